"""Block, span, and group models shared by the segmenter, inline formatter, and renderer"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BlockKind(str, Enum):
    header = "header"
    paragraph = "paragraph"
    unordered_item = "unordered_item"
    ordered_item = "ordered_item"
    code_start = "code_start"
    code_line = "code_line"
    code_end = "code_end"
    rule = "rule"
    blank = "blank"


class ListKind(str, Enum):
    none = "none"
    unordered = "unordered"
    ordered = "ordered"


class SpanKind(str, Enum):
    text = "text"
    bold = "bold"
    italic = "italic"
    code = "code"


class Block(BaseModel):
    """One classified source line."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    text: str = ""                  # content without marker prefix or line terminator
    raw: str = ""                   # source line including its terminator
    level: Optional[int] = None     # header level (1-6); None for non-headers
    number: Optional[int] = None    # ordered item number
    info: Optional[str] = None      # code fence info string, e.g. "python"
    list_kind: ListKind = ListKind.none
    implicit: bool = False          # synthesized close for an unterminated code block


class Span(BaseModel):
    """A run of inline text of a single formatting kind."""
    model_config = ConfigDict(frozen=True)

    kind: SpanKind
    text: str


class BlockGroup(BaseModel):
    """Blocks rendered under a single wrapper: one list, one code region, or one standalone block."""
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    blocks: list[Block]
