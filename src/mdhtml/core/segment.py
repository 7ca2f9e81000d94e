"""Line classification and block segmentation

Each source line becomes exactly one Block. A small state machine tracks
whether the cursor is inside a fenced code region or a list run; it is
advanced once per line.
"""

import logging
import re
from enum import Enum

from mdhtml.core.models import Block, BlockKind, ListKind


logger = logging.getLogger(__name__)

LINE_RE = re.compile(r'[^\n]*\n|[^\n]+')
OPEN_FENCE_RE = re.compile(r'^\s*```\s*([^`\s]*)\s*$')
CLOSE_FENCE_RE = re.compile(r'^\s*```\s*$')
HEADER_RE = re.compile(r'^(#{1,6}) (.*)$')
RULE_RE = re.compile(r'^\s*(?:-{3,}|\*{3,}|_{3,})\s*$')
UNORDERED_RE = re.compile(r'^[-*+] (.*)$')
ORDERED_RE = re.compile(r'^(\d{1,9})\. (.*)$')


class SegmentState(str, Enum):
    text = "text"
    unordered_list = "unordered_list"
    ordered_list = "ordered_list"
    code = "code"


_LIST_STATES: dict[BlockKind, SegmentState] = {
    BlockKind.unordered_item: SegmentState.unordered_list,
    BlockKind.ordered_item:   SegmentState.ordered_list,
}


def split_lines(text: str) -> list[str]:
    """Split text into lines, each keeping its terminator. '' yields []."""
    return LINE_RE.findall(text)


def _strip_terminator(raw: str) -> str:
    """Remove a trailing '\\n' or '\\r\\n' and nothing else."""
    if raw.endswith('\n'):
        raw = raw[:-1]
        if raw.endswith('\r'):
            raw = raw[:-1]
    return raw


def classify_line(raw: str) -> Block:
    """Classify one line found outside a code region, by prefix precedence."""
    line = _strip_terminator(raw)

    if m := OPEN_FENCE_RE.match(line):
        return Block(kind=BlockKind.code_start, raw=raw, info=m.group(1) or None)

    if m := HEADER_RE.match(line):
        return Block(kind=BlockKind.header, text=m.group(2).strip(), raw=raw, level=len(m.group(1)))

    if RULE_RE.match(line):
        return Block(kind=BlockKind.rule, raw=raw)

    if m := UNORDERED_RE.match(line):
        return Block(kind=BlockKind.unordered_item, text=m.group(1), raw=raw, list_kind=ListKind.unordered)

    if m := ORDERED_RE.match(line):
        return Block(
            kind=BlockKind.ordered_item, text=m.group(2), raw=raw,
            number=int(m.group(1)), list_kind=ListKind.ordered,
        )

    if not line.strip():
        return Block(kind=BlockKind.blank, raw=raw)

    return Block(kind=BlockKind.paragraph, text=line, raw=raw)


def _code_block(raw: str) -> Block:
    """Classify one line found inside a code region."""
    line = _strip_terminator(raw)
    if CLOSE_FENCE_RE.match(line):
        return Block(kind=BlockKind.code_end, raw=raw)
    return Block(kind=BlockKind.code_line, text=line, raw=raw)


def _next_state(block: Block) -> SegmentState:
    if block.kind in (BlockKind.code_start, BlockKind.code_line):
        return SegmentState.code
    return _LIST_STATES.get(block.kind, SegmentState.text)


def segment(text: str) -> list[Block]:
    """Split a document into an ordered list of Blocks.

    Joining ``raw`` over the result reproduces ``text`` exactly. A code
    region left open at end of input is closed by a synthesized CODE_END
    block with ``implicit=True`` and an empty ``raw``.
    """
    blocks: list[Block] = []
    state = SegmentState.text

    for lineno, raw in enumerate(split_lines(text), start=1):
        block = _code_block(raw) if state is SegmentState.code else classify_line(raw)
        new_state = _next_state(block)
        if new_state is not state:
            logger.debug("line %d: %s -> %s", lineno, state.value, new_state.value)
        blocks.append(block)
        state = new_state

    if state is SegmentState.code:
        logger.debug("unterminated code block at end of input; closing implicitly")
        blocks.append(Block(kind=BlockKind.code_end, implicit=True))

    return blocks
