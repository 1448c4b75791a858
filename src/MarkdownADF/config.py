from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class BuilderOptions:
    """Switches for :class:`MarkdownADF.builder.DocumentBuilder`.

    ``nested_lists`` keeps a stack of list frames so that a list opened
    inside a list item is attached to that item. When off, a single list
    level is tracked and nested lists come out flattened the way older
    converters produced them.
    """

    nested_lists: bool = False


def load_options(path: str | Path) -> BuilderOptions:
    """Read builder options from a YAML mapping."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError("Options file root must be a mapping.")
    return options_from_mapping(data)


def options_from_mapping(data: dict) -> BuilderOptions:
    known = {f.name for f in fields(BuilderOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(map(str, unknown))}")
    for key, value in data.items():
        if not isinstance(value, bool):
            raise ValueError(f"Option {key!r} must be true or false, got {value!r}")
    return replace(BuilderOptions(), **data)
