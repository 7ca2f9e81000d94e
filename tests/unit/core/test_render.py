"""Unit tests for core/render.py"""

from markdown_it import MarkdownIt
import pytest

from mdhtml.core.models import Block, BlockKind, ListKind
from mdhtml.core.render import group_blocks, render, render_group
from mdhtml.core.segment import segment


def _html(text: str) -> str:
    return render(segment(text))


def test_header():
    assert "<h1>Title</h1>" in _html("# Title\n")


def test_header_levels():
    assert _html("### Three\n###### Six\n") == "<h3>Three</h3>\n<h6>Six</h6>\n"


def test_header_inline_formatting():
    assert _html("## A **bold** move\n") == "<h2>A <strong>bold</strong> move</h2>\n"


def test_unordered_list_grouped():
    """Adjacent items share one <ul> wrapper."""
    html = _html("- a\n- b\n")
    assert "<ul><li>a</li><li>b</li></ul>" in html
    assert html.count("<ul>") == 1
    assert html.count("<li>") == 2


def test_ordered_list_grouped():
    assert _html("1. one\n2. two\n") == "<ol><li>one</li><li>two</li></ol>\n"


def test_ordered_list_start_number():
    """A list not starting at 1 carries a start attribute."""
    assert _html("3. three\n4. four\n") == '<ol start="3"><li>three</li><li>four</li></ol>\n'


def test_blank_line_closes_list():
    html = _html("- a\n\n- b\n")
    assert html == "<ul><li>a</li></ul>\n<ul><li>b</li></ul>\n"


def test_list_kind_change_closes_list():
    html = _html("- a\n1. b\n")
    assert html == "<ul><li>a</li></ul>\n<ol><li>b</li></ol>\n"


def test_paragraph_closes_list():
    assert _html("- a\nafter\n") == "<ul><li>a</li></ul>\n<p>after</p>\n"


def test_list_item_inline_formatting():
    assert _html("* *em* item\n") == "<ul><li><em>em</em> item</li></ul>\n"


def test_code_block():
    assert "<pre><code>code line</code></pre>" in _html("```\ncode line\n```\n")


def test_code_block_lines_verbatim():
    """Code lines pass through byte-for-byte, newline-joined, with no inline formatting."""
    lines = ["  **not bold**", "# not a header", "- not a list", "\tindented `x`"]
    text = "```\n" + "\n".join(lines) + "\n```\n"
    assert _html(text) == "<pre><code>" + "\n".join(lines) + "</code></pre>\n"


def test_code_block_escapes_markup():
    """HTML-significant characters in code are escaped to keep the output valid."""
    assert _html("```\na < b && c\n```\n") == "<pre><code>a &lt; b &amp;&amp; c</code></pre>\n"


def test_code_block_language_class():
    html = _html("```python\nprint(1)\n```\n")
    assert html == '<pre><code class="language-python">print(1)</code></pre>\n'


def test_empty_code_block():
    assert _html("```\n```\n") == "<pre><code></code></pre>\n"


def test_unterminated_code_block_is_closed():
    """A never-closed fence still produces balanced tags."""
    html = _html("```\ncode but never ends\n")
    assert html == "<pre><code>code but never ends</code></pre>\n"


def test_rule():
    assert _html("a\n\n---\n\nb\n") == "<p>a</p>\n<hr>\n<p>b</p>\n"


def test_bold_and_italic_paragraph():
    html = _html("**bold** and *italic*\n")
    assert html == "<p><strong>bold</strong> and <em>italic</em></p>\n"


def test_each_paragraph_line_is_a_paragraph():
    assert _html("one\ntwo\n") == "<p>one</p>\n<p>two</p>\n"


def test_empty_document():
    assert _html("") == ""


def test_blank_only_document():
    assert _html("\n   \n\n") == ""


def test_sample_document(sample_md):
    html = _html(sample_md)
    assert html.splitlines() == [
        "<h1>Heading 1</h1>",
        "<p>A paragraph with <strong>bold</strong> text.</p>",
        "<h2>Heading 2</h2>",
        "<ul><li>item one</li><li>item two</li></ul>",
        "<ol><li>first</li><li>second</li></ol>",
        '<pre><code class="language-python">print("hello")</code></pre>',
        "<hr>",
        "<p>Footer paragraph.</p>",
    ]


# --- group_blocks ---

def test_group_blocks_skips_blanks():
    groups = group_blocks(segment("a\n\n\nb\n"))
    assert [g.kind for g in groups] == [BlockKind.paragraph, BlockKind.paragraph]


def test_group_blocks_code_region_is_one_group():
    groups = group_blocks(segment("```\nx\n\ny\n```\n"))
    assert len(groups) == 1
    assert [b.kind for b in groups[0].blocks] == [
        BlockKind.code_start, BlockKind.code_line, BlockKind.code_line, BlockKind.code_line,
    ]


def test_group_blocks_splits_on_list_kind():
    """Items are grouped by the list kind recorded on each block."""
    groups = group_blocks(segment("- a\n* b\n1. c\n2. d\n+ e\n"))
    assert [g.blocks[0].list_kind for g in groups] == [
        ListKind.unordered, ListKind.ordered, ListKind.unordered,
    ]
    assert [len(g.blocks) for g in groups] == [2, 2, 1]


def test_group_blocks_closes_dangling_code_region():
    """A sequence ending inside a code region is still grouped and rendered closed."""
    blocks = [
        Block(kind=BlockKind.code_start, raw="```\n"),
        Block(kind=BlockKind.code_line, text="x", raw="x\n"),
    ]
    groups = group_blocks(blocks)
    assert len(groups) == 1
    assert render_group(groups[0]) == "<pre><code>x</code></pre>"


# --- agreement with a CommonMark renderer on the shared subset ---

@pytest.mark.parametrize("text", [
    "# Title\n",
    "Some **bold** and *italic* text.\n",
    "Use `code` here.\n",
    "```\nline one\nline two\n```\n",
])
def test_matches_commonmark(text):
    """Output agrees with markdown-it for constructs both support."""
    expected = MarkdownIt("commonmark").render(text).replace("\n</code></pre>", "</code></pre>")
    assert _html(text) == expected
