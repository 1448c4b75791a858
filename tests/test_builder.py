from MarkdownADF.builder import DocumentBuilder, convert
from MarkdownADF.config import BuilderOptions
from MarkdownADF.events import (
    EndCodeBlock,
    EndEmphasis,
    EndHeading,
    EndItem,
    EndList,
    EndParagraph,
    EndStrong,
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
from MarkdownADF.model import (
    BulletList,
    CodeBlock,
    Heading,
    InlineText,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
)

STRONG = frozenset({Mark.STRONG})
EMPHASIS = frozenset({Mark.EMPHASIS})
CODE = frozenset({Mark.CODE})


def _item(text):
    return [StartItem(), RawText(text), EndParagraph(), EndItem()]


def test_empty_stream_yields_single_empty_paragraph():
    document = convert([])
    assert document.blocks == [Paragraph(inline=[])]


def test_plain_text_is_one_unmarked_run():
    document = convert(iter([RawText("Hello "), RawText("world"), EndParagraph()]))
    assert document.blocks == [Paragraph(inline=[InlineText("Hello world")])]


def test_strong_region_does_not_leak():
    events = [RawText("This is "), StartStrong(), RawText("bold"), EndStrong(), RawText(" text"), EndParagraph()]
    (paragraph,) = convert(events).blocks
    assert paragraph.inline == [
        InlineText("This is "),
        InlineText("bold", STRONG),
        InlineText(" text"),
    ]


def test_mixed_formatting_produces_five_runs():
    events = [
        StartStrong(),
        RawText("Bold"),
        EndStrong(),
        RawText(" and "),
        StartEmphasis(),
        RawText("italic"),
        EndEmphasis(),
        RawText(" and "),
        InlineCode("code"),
        EndParagraph(),
    ]
    (paragraph,) = convert(events).blocks
    assert [run.marks for run in paragraph.inline] == [STRONG, frozenset(), EMPHASIS, frozenset(), CODE]
    assert [run.text for run in paragraph.inline] == ["Bold", " and ", "italic", " and ", "code"]


def test_marks_close_by_kind_not_by_nesting():
    events = [
        StartStrong(),
        RawText("a"),
        StartEmphasis(),
        RawText("b"),
        EndStrong(),
        RawText("c"),
        EndEmphasis(),
    ]
    (paragraph,) = convert(events).blocks
    assert paragraph.inline == [
        InlineText("a", STRONG),
        InlineText("b", frozenset({Mark.STRONG, Mark.EMPHASIS})),
        InlineText("c", EMPHASIS),
    ]


def test_inline_code_ignores_active_marks():
    events = [StartStrong(), RawText("x"), InlineCode("y"), RawText("z"), EndStrong()]
    (paragraph,) = convert(events).blocks
    assert paragraph.inline == [InlineText("x", STRONG), InlineText("y", CODE), InlineText("z", STRONG)]


def test_breaks_become_line_feeds_in_one_run():
    events = [RawText("one"), SoftBreak(), RawText("two"), HardBreak(), RawText("three")]
    (paragraph,) = convert(events).blocks
    assert paragraph.inline == [InlineText("one\ntwo\nthree")]


def test_heading_then_paragraph_stay_separate():
    events = [
        StartHeading(2),
        RawText("Problem Summary"),
        EndHeading(2),
        RawText("Details here"),
        EndParagraph(),
    ]
    blocks = convert(events).blocks
    assert blocks == [
        Heading(level=2, inline=[InlineText("Problem Summary")]),
        Paragraph(inline=[InlineText("Details here")]),
    ]


def test_heading_start_flushes_dangling_paragraph():
    events = [RawText("intro"), StartHeading(1), RawText("Title"), EndHeading(1)]
    blocks = convert(events).blocks
    assert blocks == [Paragraph(inline=[InlineText("intro")]), Heading(level=1, inline=[InlineText("Title")])]


def test_empty_heading_is_dropped():
    blocks = convert([StartHeading(3), EndHeading(3)]).blocks
    assert blocks == [Paragraph(inline=[])]


def test_heading_level_is_clamped():
    blocks = convert([StartHeading(9), RawText("deep"), EndHeading(9)]).blocks
    assert blocks[0].level == 6


def test_code_block_keeps_raw_text_without_marks():
    events = [StartStrong(), StartCodeBlock(), RawText("**not bold**\n"), EndCodeBlock(), EndStrong()]
    blocks = convert(events).blocks
    assert blocks == [CodeBlock(code="**not bold**\n")]


def test_empty_code_block_is_dropped():
    blocks = convert([StartCodeBlock(), EndCodeBlock(), RawText("after"), EndParagraph()]).blocks
    assert blocks == [Paragraph(inline=[InlineText("after")])]


def test_bullet_list_groups_items():
    events = [StartList(ordered=False), *_item("Item 1"), *_item("Item 2"), *_item("Item 3"), EndList()]
    (block,) = convert(events).blocks
    assert isinstance(block, BulletList)
    assert block.items == [
        ListItem(paragraph=Paragraph(inline=[InlineText("Item 1")])),
        ListItem(paragraph=Paragraph(inline=[InlineText("Item 2")])),
        ListItem(paragraph=Paragraph(inline=[InlineText("Item 3")])),
    ]


def test_ordered_list_has_same_shape():
    events = [StartList(ordered=True), *_item("one"), *_item("two"), EndList()]
    (block,) = convert(events).blocks
    assert isinstance(block, OrderedList)
    assert block.ordered
    assert len(block.items) == 2


def test_list_start_flushes_preceding_paragraph():
    events = [RawText("Steps:"), StartList(ordered=True), *_item("go"), EndList()]
    blocks = convert(events).blocks
    assert blocks[0] == Paragraph(inline=[InlineText("Steps:")])
    assert isinstance(blocks[1], OrderedList)


def test_empty_list_emits_nothing():
    blocks = convert([StartList(), StartItem(), EndItem(), EndList()]).blocks
    assert blocks == [Paragraph(inline=[])]


def _tight_item(text):
    return [StartItem(), RawText(text), EndItem()]


def test_flat_mode_flattens_nested_list():
    events = [
        StartList(),
        StartItem(),
        RawText("a"),
        StartList(),
        *_tight_item("b"),
        EndList(),
        EndItem(),
        *_tight_item("c"),
        EndList(),
    ]
    blocks = convert(events).blocks
    assert blocks == [
        Paragraph(inline=[InlineText("a")]),
        BulletList(items=[ListItem(paragraph=Paragraph(inline=[InlineText("b")]))]),
        BulletList(items=[ListItem(paragraph=Paragraph(inline=[InlineText("c")]))]),
    ]


def test_nested_mode_attaches_sublist_to_item():
    events = [
        StartList(),
        StartItem(),
        RawText("a"),
        EndParagraph(),
        StartList(ordered=True),
        *_item("b"),
        EndList(),
        EndItem(),
        *_item("c"),
        EndList(),
    ]
    (block,) = convert(events, BuilderOptions(nested_lists=True)).blocks
    assert isinstance(block, BulletList)
    first, second = block.items
    assert first.paragraph == Paragraph(inline=[InlineText("a")])
    assert first.sublists == [OrderedList(items=[ListItem(paragraph=Paragraph(inline=[InlineText("b")]))])]
    assert second == ListItem(paragraph=Paragraph(inline=[InlineText("c")]))


def test_unknown_and_unmatched_events_are_ignored():
    events = [
        OtherEvent("table_open"),
        object(),
        EndList(),
        EndStrong(),
        EndEmphasis(),
        RawText("kept"),
        OtherEvent("s_close"),
    ]
    blocks = convert(events).blocks
    assert blocks == [Paragraph(inline=[InlineText("kept")])]


def test_unclosed_mark_applies_until_end_of_input():
    blocks = convert([RawText("a "), StartEmphasis(), RawText("b")]).blocks
    assert blocks == [Paragraph(inline=[InlineText("a "), InlineText("b", EMPHASIS)])]


def test_builder_feed_and_finish():
    builder = DocumentBuilder()
    builder.feed(RawText("x"))
    assert builder.pending_run == "x"
    builder.feed(StartStrong())
    assert builder.pending_run == ""
    assert builder.inline_buffer == [InlineText("x")]
    document = builder.finish()
    assert document.blocks == [Paragraph(inline=[InlineText("x")])]


def test_code_block_start_flushes_dangling_paragraph():
    events = [RawText("intro"), StartCodeBlock(), RawText("x"), EndCodeBlock()]
    blocks = convert(events).blocks
    assert blocks == [Paragraph(inline=[InlineText("intro")]), CodeBlock(code="x")]


def test_item_start_separates_stray_text():
    events = [StartList(), RawText("stray"), StartItem(), RawText("x"), EndItem(), EndList()]
    (block,) = convert(events).blocks
    assert isinstance(block, BulletList)
    assert block.items == [ListItem(paragraph=Paragraph(inline=[InlineText("stray"), InlineText("x")]))]


def test_paragraph_end_inside_list_is_absorbed():
    events = [StartList(), StartItem(), RawText("a"), EndParagraph(), RawText("b"), EndList()]
    blocks = convert(events).blocks
    # no item was closed, so the text only surfaces at end of input
    assert blocks == [Paragraph(inline=[InlineText("ab")])]


def test_non_numeric_heading_level_falls_back():
    blocks = convert([StartHeading(None), RawText("Title"), EndHeading(None)]).blocks
    assert blocks == [Heading(level=1, inline=[InlineText("Title")])]
