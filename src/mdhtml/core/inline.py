"""Inline emphasis and code-span formatting for a single block of text

The scanner makes one left-to-right pass. Closing delimiters are searched
forward from each opener; a failed search is remembered per delimiter, so no
suffix of the text is scanned twice for the same delimiter.

Rules:
  - ``**x**`` -> <strong>, ``*x*`` -> <em>, a backtick run closed by a run
    of the same length -> <code>.
  - An emphasis opener followed by whitespace is literal; a closer preceded
    by whitespace is not a closer.
  - Empty spans are never formed.
  - Spans do not nest. Everything between a matched pair is literal text.
  - Backslashes are ordinary text; every input character reaches the output.
"""

import html

from mdhtml.core.models import Span, SpanKind


_EMPHASIS: dict[str, SpanKind] = {
    '**': SpanKind.bold,
    '*':  SpanKind.italic,
}

_TAGS: dict[SpanKind, str] = {
    SpanKind.bold:   'strong',
    SpanKind.italic: 'em',
    SpanKind.code:   'code',
}


def _run_length(text: str, i: int, ch: str) -> int:
    j = i
    while j < len(text) and text[j] == ch:
        j += 1
    return j - i


def _can_open(text: str, after: int) -> bool:
    """An opener needs a non-whitespace character right after it."""
    return after < len(text) and not text[after].isspace()


def _is_emphasis_closer(text: str, delim: str, j: int) -> bool:
    before = text[j - 1]
    if before.isspace():
        return False
    if delim == '*':
        # a lone '*' must not be half of a '**' pair
        end = j + 1
        return before != '*' and (end >= len(text) or text[end] != '*')
    return True


def _is_code_closer(text: str, fence: str, j: int) -> bool:
    end = j + len(fence)
    return text[j - 1] != '`' and (end >= len(text) or text[end] != '`')


def _find_closer(text: str, delim: str, start: int, exhausted: dict[str, int]) -> int | None:
    """Return the index of the first valid closer at or after start, else None."""
    if start >= exhausted.get(delim, len(text) + 1):
        return None
    is_closer = _is_code_closer if delim[0] == '`' else _is_emphasis_closer
    j = text.find(delim, start)
    while j != -1:
        if is_closer(text, delim, j):
            return j
        j = text.find(delim, j + 1)
    exhausted[delim] = start
    return None


def _code_content(raw: str) -> str:
    """Strip one leading and one trailing space when both are present."""
    if len(raw) >= 2 and raw[0] == ' ' and raw[-1] == ' ' and raw.strip(' '):
        return raw[1:-1]
    return raw


def tokenize_inline(text: str) -> list[Span]:
    """Split text into non-overlapping spans; adjacent plain text is merged."""
    spans: list[Span] = []
    plain: list[str] = []
    exhausted: dict[str, int] = {}

    def _emit(kind: SpanKind, content: str) -> None:
        if plain:
            spans.append(Span(kind=SpanKind.text, text=''.join(plain)))
            plain.clear()
        spans.append(Span(kind=kind, text=content))

    i, n = 0, len(text)
    while i < n:
        ch = text[i]

        if ch == '`':
            fence = '`' * _run_length(text, i, '`')
            start = i + len(fence)
            end = _find_closer(text, fence, start, exhausted)
            if end is None:
                plain.append(fence)
                i = start
            else:
                _emit(SpanKind.code, _code_content(text[start:end]))
                i = end + len(fence)

        elif ch == '*':
            delim = '**' if text.startswith('**', i) else '*'
            start = i + len(delim)
            end = None
            if _can_open(text, start):
                # +1: the span holds at least one character
                end = _find_closer(text, delim, start + 1, exhausted)
            if end is None:
                plain.append(delim)
                i = start
            else:
                _emit(_EMPHASIS[delim], text[start:end])
                i = end + len(delim)

        else:
            plain.append(ch)
            i += 1

    if plain:
        spans.append(Span(kind=SpanKind.text, text=''.join(plain)))
    return spans


def render_spans(spans: list[Span]) -> str:
    parts = []
    for span in spans:
        if span.kind is SpanKind.text:
            parts.append(span.text)
            continue
        content = html.escape(span.text, quote=False) if span.kind is SpanKind.code else span.text
        tag = _TAGS[span.kind]
        parts.append(f"<{tag}>{content}</{tag}>")
    return ''.join(parts)


def format_inline(text: str) -> str:
    """Convert bold, italic, and inline-code markers in text to HTML tags."""
    return render_spans(tokenize_inline(text))
