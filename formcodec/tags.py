"""Form field tags attached to dataclass fields."""

from __future__ import annotations

import dataclasses
from typing import Any

_TAG_KEY = "form"


@dataclasses.dataclass(frozen=True)
class FieldTag:
    """How one dataclass field appears in form data."""

    name: str = ""
    omit: bool = False
    ignore: bool = False


def parse_tag(text: str) -> FieldTag:
    """Parse a tag such as ``"name,omitempty"`` into a FieldTag."""
    if text == "-":
        return FieldTag(ignore=True)
    name, *flags = text.split(",")
    ignored = name == "-"
    return FieldTag(
        name="" if ignored else name,
        omit="omitempty" in flags,
        ignore=ignored or "ignore" in flags,
    )


def field_tags(cls: Any) -> dict[str, FieldTag]:
    """Return the tag of every public field of a dataclass or instance.

    Fields without a name take their attribute name. Fields whose names
    start with an underscore are private and left out. Anything that is
    not a dataclass has no tags.
    """
    if not dataclasses.is_dataclass(cls):
        return {}
    tags: dict[str, FieldTag] = {}
    for field in dataclasses.fields(cls):
        if field.name.startswith("_"):
            continue
        tag = parse_tag(field.metadata.get(_TAG_KEY, ""))
        if not tag.ignore and not tag.name:
            tag = dataclasses.replace(tag, name=field.name)
        tags[field.name] = tag
    return tags


def form_field(tag: str, **kwargs: Any) -> Any:
    """Declare a dataclass field carrying a form tag.

    Other keyword arguments go to :func:`dataclasses.field`; any metadata
    given is kept alongside the tag.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)