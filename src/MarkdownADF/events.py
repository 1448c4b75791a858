"""Markup events consumed by :mod:`MarkdownADF.builder`.

A tokenizer turns Markdown into a flat, forward-only stream of these events.
Start/end pairs are expected to be balanced, but the builder tolerates
streams that are not. Objects of any other type are ignored by the builder,
so tokenizers may pass through events the builder does not understand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StartHeading:
    level: int


@dataclass(frozen=True)
class EndHeading:
    level: int


@dataclass(frozen=True)
class StartStrong:
    pass


@dataclass(frozen=True)
class EndStrong:
    pass


@dataclass(frozen=True)
class StartEmphasis:
    pass


@dataclass(frozen=True)
class EndEmphasis:
    pass


@dataclass(frozen=True)
class StartCodeBlock:
    info: str = ""


@dataclass(frozen=True)
class EndCodeBlock:
    pass


@dataclass(frozen=True)
class StartList:
    ordered: bool = False


@dataclass(frozen=True)
class EndList:
    pass


@dataclass(frozen=True)
class StartItem:
    pass


@dataclass(frozen=True)
class EndItem:
    pass


@dataclass(frozen=True)
class RawText:
    text: str


@dataclass(frozen=True)
class InlineCode:
    code: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class EndParagraph:
    pass


@dataclass(frozen=True)
class OtherEvent:
    """Tokenizer output with no meaning to the builder (tables, links, ...)."""

    kind: str


Event = Union[
    StartHeading,
    EndHeading,
    StartStrong,
    EndStrong,
    StartEmphasis,
    EndEmphasis,
    StartCodeBlock,
    EndCodeBlock,
    StartList,
    EndList,
    StartItem,
    EndItem,
    RawText,
    InlineCode,
    SoftBreak,
    HardBreak,
    EndParagraph,
    OtherEvent,
]
