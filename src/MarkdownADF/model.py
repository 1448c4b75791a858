from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List


class Mark(str, Enum):
    """Formatting attribute carried by a run of inline text."""

    STRONG = "strong"
    EMPHASIS = "em"
    CODE = "code"


@dataclass(frozen=True)
class InlineText:
    text: str
    marks: FrozenSet[Mark] = frozenset()


@dataclass
class Block:
    """Base class for block-level nodes."""


@dataclass
class Document:
    blocks: List[Block]


@dataclass
class Heading(Block):
    level: int
    inline: List[InlineText]


@dataclass
class Paragraph(Block):
    inline: List[InlineText]


@dataclass
class CodeBlock(Block):
    code: str


@dataclass
class ListItem:
    paragraph: Paragraph
    sublists: List["ListBlock"] = field(default_factory=list)


@dataclass
class ListBlock(Block):
    items: List[ListItem]

    ordered = False


@dataclass
class BulletList(ListBlock):
    """Unordered list."""


@dataclass
class OrderedList(ListBlock):
    """Numbered list."""

    ordered = True
