from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .config import BuilderOptions
from .events import (
    EndCodeBlock,
    EndEmphasis,
    EndHeading,
    EndItem,
    EndList,
    EndParagraph,
    EndStrong,
    HardBreak,
    InlineCode,
    RawText,
    SoftBreak,
    StartCodeBlock,
    StartEmphasis,
    StartHeading,
    StartItem,
    StartList,
    StartStrong,
)
from .model import (
    Block,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    InlineText,
    ListBlock,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
)

logger = logging.getLogger(__name__)

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


@dataclass
class _ListFrame:
    ordered: bool
    items: List[ListItem] = field(default_factory=list)
    held_inline: List[InlineText] = field(default_factory=list)
    sublists: List[ListBlock] = field(default_factory=list)


def convert(events: Iterable, options: BuilderOptions | None = None) -> Document:
    """Reduce a stream of markup events into a :class:`Document`.

    The stream is consumed once, in order. Unbalanced or unknown events never
    raise; the result always holds at least one block.
    """
    builder = DocumentBuilder(options)
    count = 0
    for event in events:
        builder.feed(event)
        count += 1
    document = builder.finish()
    logger.debug("Converted %d events into %d blocks", count, len(document.blocks))
    return document


class DocumentBuilder:
    """Single-pass state machine turning markup events into block nodes."""

    def __init__(self, options: BuilderOptions | None = None) -> None:
        self.options = options or BuilderOptions()
        self.pending_run = ""
        # dict keys keep insertion order, used as an ordered set
        self.active_marks: dict[Mark, None] = {}
        self.inline_buffer: List[InlineText] = []
        self.block_output: List[Block] = []
        self.list_items: List[ListItem] = []
        self.in_list = False
        self.list_ordered = False
        self._frames: List[_ListFrame] = []

    @property
    def inside_list(self) -> bool:
        if self.options.nested_lists:
            return bool(self._frames)
        return self.in_list

    def feed(self, event) -> None:
        """Apply one event to the builder state."""
        if isinstance(event, RawText):
            self.pending_run += event.text
        elif isinstance(event, (SoftBreak, HardBreak)):
            self.pending_run += "\n"
        elif isinstance(event, StartStrong):
            self._open_mark(Mark.STRONG)
        elif isinstance(event, EndStrong):
            self._close_mark(Mark.STRONG)
        elif isinstance(event, StartEmphasis):
            self._open_mark(Mark.EMPHASIS)
        elif isinstance(event, EndEmphasis):
            self._close_mark(Mark.EMPHASIS)
        elif isinstance(event, InlineCode):
            self._flush_text()
            self.inline_buffer.append(InlineText(event.code, frozenset({Mark.CODE})))
        elif isinstance(event, (StartHeading, StartCodeBlock)):
            self._flush_text()
            self._flush_paragraph()
        elif isinstance(event, EndHeading):
            self._end_heading(event.level)
        elif isinstance(event, EndCodeBlock):
            self._end_code_block()
        elif isinstance(event, StartList):
            self._start_list(event.ordered)
        elif isinstance(event, EndList):
            self._end_list()
        elif isinstance(event, StartItem):
            self._flush_text()
        elif isinstance(event, EndItem):
            self._end_item()
        elif isinstance(event, EndParagraph):
            if not self.inside_list:
                self._flush_text()
                self._flush_paragraph()
        else:
            logger.debug("Ignoring event %r", event)

    def finish(self) -> Document:
        """Flush pending content and return the finished document."""
        self._flush_text()
        self._flush_paragraph()
        if not self.block_output:
            self.block_output.append(Paragraph(inline=[]))
        return Document(blocks=self._take_blocks())

    def _open_mark(self, mark: Mark) -> None:
        self._flush_text()
        self.active_marks[mark] = None

    def _close_mark(self, mark: Mark) -> None:
        self._flush_text()
        self.active_marks.pop(mark, None)

    def _end_heading(self, level: int) -> None:
        self._flush_text()
        if self.inline_buffer:
            if not isinstance(level, int):
                level = MIN_HEADING_LEVEL
            level = max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))
            self.block_output.append(Heading(level=level, inline=self._take_inline()))

    def _end_code_block(self) -> None:
        # marks never apply inside code blocks
        if self.pending_run:
            self.block_output.append(CodeBlock(code=self.pending_run))
            self.pending_run = ""

    def _start_list(self, ordered: bool) -> None:
        self._flush_text()
        if self.options.nested_lists:
            if self._frames:
                self._frames[-1].held_inline.extend(self._take_inline())
            else:
                self._flush_paragraph()
            self._frames.append(_ListFrame(ordered=ordered))
            return
        self._flush_paragraph()
        self.in_list = True
        self.list_ordered = ordered

    def _end_list(self) -> None:
        if self.options.nested_lists:
            if not self._frames:
                return
            frame = self._frames.pop()
            if frame.items:
                node = _list_block(frame.items, frame.ordered)
                if self._frames:
                    self._frames[-1].sublists.append(node)
                else:
                    self.block_output.append(node)
            return
        if self.list_items:
            self.block_output.append(_list_block(self.list_items, self.list_ordered))
            self.list_items = []
        self.in_list = False

    def _end_item(self) -> None:
        self._flush_text()
        if self.options.nested_lists:
            if not self._frames:
                return
            frame = self._frames[-1]
            inline = frame.held_inline + self._take_inline()
            if inline or frame.sublists:
                frame.items.append(ListItem(paragraph=Paragraph(inline=inline), sublists=frame.sublists))
            frame.held_inline = []
            frame.sublists = []
            return
        if self.inline_buffer:
            self.list_items.append(ListItem(paragraph=Paragraph(inline=self._take_inline())))

    def _flush_text(self) -> None:
        if not self.pending_run:
            return
        self.inline_buffer.append(InlineText(self.pending_run, frozenset(self.active_marks)))
        self.pending_run = ""

    def _flush_paragraph(self) -> None:
        if self.inline_buffer:
            self.block_output.append(Paragraph(inline=self._take_inline()))

    def _take_inline(self) -> List[InlineText]:
        inline, self.inline_buffer = self.inline_buffer, []
        return inline

    def _take_blocks(self) -> List[Block]:
        blocks, self.block_output = self.block_output, []
        return blocks


def _list_block(items: List[ListItem], ordered: bool) -> ListBlock:
    if ordered:
        return OrderedList(items=items)
    return BulletList(items=items)
