from __future__ import annotations

from typing import Iterable, Iterator

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .builder import convert
from .config import BuilderOptions
from .events import (
    EndCodeBlock,
    EndEmphasis,
    EndHeading,
    EndItem,
    EndList,
    EndParagraph,
    EndStrong,
    Event,
    HardBreak,
    InlineCode,
    OtherEvent,
    RawText,
    SoftBreak,
    StartCodeBlock,
    StartEmphasis,
    StartHeading,
    StartItem,
    StartList,
    StartStrong,
)
from .model import Document

_SIMPLE_INLINE = {
    "softbreak": SoftBreak,
    "hardbreak": HardBreak,
    "strong_open": StartStrong,
    "strong_close": EndStrong,
    "em_open": StartEmphasis,
    "em_close": EndEmphasis,
}

_SIMPLE_BLOCK = {
    "paragraph_close": EndParagraph,
    "bullet_list_close": EndList,
    "ordered_list_close": EndList,
    "list_item_open": StartItem,
    "list_item_close": EndItem,
}


def create_markdown() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def parse_markdown(text: str, options: BuilderOptions | None = None) -> Document:
    return convert(iter_events(text), options)


def iter_events(text: str, md: MarkdownIt | None = None) -> Iterator[Event]:
    """Tokenize Markdown and yield builder events lazily."""
    md = md or create_markdown()
    return _block_events(md.parse(text))


def _block_events(tokens: Iterable[Token]) -> Iterator[Event]:
    for tok in tokens:
        if tok.type == "heading_open":
            yield StartHeading(level=int(tok.tag[1]))
        elif tok.type == "heading_close":
            yield EndHeading(level=int(tok.tag[1]))
        elif tok.type in ("bullet_list_open", "ordered_list_open"):
            yield StartList(ordered=tok.type == "ordered_list_open")
        elif tok.type in ("fence", "code_block"):
            yield StartCodeBlock(info=(tok.info or "").strip())
            yield RawText(tok.content)
            yield EndCodeBlock()
        elif tok.type == "paragraph_close" and tok.hidden:
            # tight list items carry no paragraph
            yield OtherEvent(tok.type)
        elif tok.type == "inline":
            yield from _inline_events(tok.children or [])
        elif tok.type in _SIMPLE_BLOCK:
            yield _SIMPLE_BLOCK[tok.type]()
        else:
            yield OtherEvent(tok.type)


def _inline_events(children: Iterable[Token]) -> Iterator[Event]:
    for tok in children:
        if tok.type == "text":
            yield RawText(tok.content)
        elif tok.type == "code_inline":
            yield InlineCode(tok.content)
        elif tok.type in _SIMPLE_INLINE:
            yield _SIMPLE_INLINE[tok.type]()
        else:
            yield OtherEvent(tok.type)
            # image alt text arrives as child tokens
            if tok.children:
                yield from _inline_events(tok.children)
