"""Serialize :class:`~MarkdownADF.model.Document` trees to ADF JSON objects.

The shape matches what issue trackers accept for descriptions and comments::

    {"version": 1, "type": "doc", "content": [...]}
"""

from __future__ import annotations

import json
from typing import Any

from .config import BuilderOptions
from .markdown_parser import parse_markdown
from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    InlineText,
    ListBlock,
    ListItem,
    Mark,
    Paragraph,
)

ADF_VERSION = 1


def to_adf(document: Document) -> dict[str, Any]:
    return {
        "version": ADF_VERSION,
        "type": "doc",
        "content": [_block_to_adf(block) for block in document.blocks],
    }


def markdown_to_adf(text: str, options: BuilderOptions | None = None) -> dict[str, Any]:
    return to_adf(parse_markdown(text, options))


def comment_payload(text: str, options: BuilderOptions | None = None) -> dict[str, Any]:
    """Wrap converted Markdown as the body of an issue comment."""
    return as_comment(markdown_to_adf(text, options))


def as_comment(adf: dict[str, Any]) -> dict[str, Any]:
    return {"body": adf}


def dumps(adf: dict[str, Any], indent: int | None = None) -> str:
    return json.dumps(adf, indent=indent, ensure_ascii=False)


def _block_to_adf(block: Block) -> dict[str, Any]:
    if isinstance(block, Heading):
        return {
            "type": "heading",
            "attrs": {"level": block.level},
            "content": _inline_to_adf(block.inline),
        }
    if isinstance(block, Paragraph):
        return _paragraph_to_adf(block)
    if isinstance(block, CodeBlock):
        return {"type": "codeBlock", "content": [{"type": "text", "text": block.code}]}
    if isinstance(block, ListBlock):
        return _list_to_adf(block)
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _paragraph_to_adf(paragraph: Paragraph) -> dict[str, Any]:
    return {"type": "paragraph", "content": _inline_to_adf(paragraph.inline)}


def _list_to_adf(block: ListBlock) -> dict[str, Any]:
    return {
        "type": "orderedList" if block.ordered else "bulletList",
        "content": [_item_to_adf(item) for item in block.items],
    }


def _item_to_adf(item: ListItem) -> dict[str, Any]:
    content = [_paragraph_to_adf(item.paragraph)]
    content.extend(_list_to_adf(sublist) for sublist in item.sublists)
    return {"type": "listItem", "content": content}


def _inline_to_adf(inline: list[InlineText]) -> list[dict[str, Any]]:
    nodes = []
    for run in inline:
        node: dict[str, Any] = {"type": "text", "text": run.text}
        if run.marks:
            # enum order keeps output stable: strong, em, code
            node["marks"] = [{"type": mark.value} for mark in Mark if mark in run.marks]
        nodes.append(node)
    return nodes
