"""Block grouping and HTML rendering"""

import html

from mdhtml.core.inline import format_inline
from mdhtml.core.models import Block, BlockGroup, BlockKind, ListKind


CODE_KINDS = {BlockKind.code_start, BlockKind.code_line}


def group_blocks(blocks: list[Block]) -> list[BlockGroup]:
    """Fold blocks into render groups.

    Adjacent list items of one list kind share a group, as do the blocks of one
    code region. Blank lines close an open list and produce no group.
    """
    groups: list[BlockGroup] = []
    current: list[Block] = []

    def _flush() -> None:
        if current:
            groups.append(BlockGroup(kind=current[0].kind, blocks=list(current)))
            current.clear()

    for block in blocks:
        open_kind = current[0].kind if current else None
        open_list = current[0].list_kind if current else ListKind.none

        if open_kind in CODE_KINDS:
            if block.kind is BlockKind.code_end:
                _flush()
            else:
                current.append(block)
            continue

        if block.list_kind is not ListKind.none and block.list_kind is open_list:
            current.append(block)
            continue

        _flush()
        if block.list_kind is not ListKind.none or block.kind in CODE_KINDS:
            current.append(block)
        elif block.kind not in (BlockKind.blank, BlockKind.code_end):
            groups.append(BlockGroup(kind=block.kind, blocks=[block]))

    # a sequence ending inside a code region still gets its closing tags
    _flush()
    return groups


def _render_list(tag: str, blocks: list[Block], attrs: str = "") -> str:
    items = "".join(f"<li>{format_inline(b.text)}</li>" for b in blocks)
    return f"<{tag}{attrs}>{items}</{tag}>"


def _render_code(blocks: list[Block]) -> str:
    info = blocks[0].info if blocks[0].kind is BlockKind.code_start else None
    attrs = f' class="language-{html.escape(info)}"' if info else ""
    lines = [html.escape(b.text, quote=False) for b in blocks if b.kind is BlockKind.code_line]
    return f"<pre><code{attrs}>" + "\n".join(lines) + "</code></pre>"


def render_group(group: BlockGroup) -> str:
    """Render one group to a single HTML fragment."""
    first = group.blocks[0]

    if group.kind is BlockKind.header:
        return f"<h{first.level}>{format_inline(first.text)}</h{first.level}>"
    if group.kind is BlockKind.paragraph:
        return f"<p>{format_inline(first.text.strip())}</p>"
    if group.kind is BlockKind.rule:
        return "<hr>"
    if group.kind is BlockKind.unordered_item:
        return _render_list("ul", group.blocks)
    if group.kind is BlockKind.ordered_item:
        start = first.number if first.number is not None else 1
        return _render_list("ol", group.blocks, f' start="{start}"' if start != 1 else "")
    if group.kind in CODE_KINDS:
        return _render_code(group.blocks)
    raise ValueError(f"Cannot render group of kind {group.kind.value!r}")


def render(blocks: list[Block]) -> str:
    """Render blocks to an HTML string, one group per line. No blocks -> ''."""
    groups = group_blocks(blocks)
    if not groups:
        return ""
    return "\n".join(render_group(g) for g in groups) + "\n"
