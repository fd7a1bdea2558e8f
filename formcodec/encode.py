"""Encoding of Python values as URL-encoded form data."""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Protocol, runtime_checkable
from urllib.parse import quote_plus, unquote_plus

from .errors import FormError, UnsupportedTypeError
from .tags import field_tags

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@runtime_checkable
class Marshaler(Protocol):
    """A value that renders its own form representation."""

    def marshal_form(self) -> bytes | str:
        """Return the form representation of the value."""


def _query_unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad:
        snippet = text[bad.start() : bad.start() + 3]
        raise FormError(f'invalid URL escape "{snippet}"')
    return unquote_plus(text)


def _parse_query(text: str) -> dict[str, list[str]]:
    """Parse a query string strictly, rejecting bad escapes and semicolons."""
    values: dict[str, list[str]] = {}
    for part in text.split("&"):
        if ";" in part:
            raise FormError("invalid semicolon separator in query")
        if not part:
            continue
        key, _, value = part.partition("=")
        values.setdefault(_query_unescape(key), []).append(_query_unescape(value))
    return values


def _encode_values(values: Mapping[str, list[str]]) -> str:
    """Encode values sorted by key, keeping each key's values in order."""
    return "&".join(
        f"{quote_plus(key)}={quote_plus(item)}"
        for key in sorted(values)
        for item in values[key]
    )


def _as_marshaler(value: Any) -> Optional[Marshaler]:
    if isinstance(value, Marshaler) and not isinstance(value, type):
        return value
    return None


def _as_text(data: Any) -> str:
    return data if isinstance(data, str) else bytes(data).decode("utf-8")


def _is_struct(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_composite(value: Any) -> bool:
    return _is_struct(value) or isinstance(value, Mapping)


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(float(value))
    if isinstance(value, str):
        return value
    raise UnsupportedTypeError(f"form: unsupported type: {type(value).__name__}")


def _element_text(item: Any) -> str:
    marshaler = _as_marshaler(item)
    if marshaler is not None:
        return _as_text(marshaler.marshal_form())
    return _scalar(item)


def _get(value: Any) -> list[str]:
    """Return the form strings for one value; None has none."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_element_text(item) for item in value]
    marshaler = _as_marshaler(value)
    if marshaler is not None:
        return [_as_text(marshaler.marshal_form())]
    if _is_composite(value):
        return [marshal(value).decode("ascii")]
    return [_scalar(value)]


def _get_lenient(value: Any) -> list[str]:
    """Like _get, but a value that fails to encode is dropped."""
    try:
        return _get(value)
    except UnsupportedTypeError:
        raise
    except FormError:
        return []


def _struct_values(obj: Any) -> dict[str, list[str]]:
    values: dict[str, list[str]] = {}
    for attribute, tag in field_tags(obj).items():
        if tag.ignore or not tag.name:
            continue
        field_value = getattr(obj, attribute)
        if tag.omit and is_empty_value(field_value):
            continue
        entries = _get_lenient(field_value)
        if entries:
            values[tag.name] = entries
    return values


def _mapping_values(mapping: Mapping[Any, Any]) -> dict[str, list[str]]:
    for key in mapping:
        if not isinstance(key, str):
            raise FormError(
                "form: failed to marshal: form: unsupported map key type: "
                f"{type(key).__name__}"
            )
    values: dict[str, list[str]] = {}
    for key, item in mapping.items():
        if is_empty_value(item):
            continue
        entries = _get_lenient(item)
        if entries:
            values[key] = entries
    return values


def _marshal_marshaler(marshaler: Marshaler) -> bytes:
    try:
        text = _as_text(marshaler.marshal_form())
    except UnsupportedTypeError:
        raise
    except FormError as exc:
        raise FormError(f"form: failed to marshal: {exc}") from exc
    try:
        values = _parse_query(text)
    except FormError as exc:
        raise FormError(f"form: invalid form data: {exc}") from exc
    return _encode_values(values).encode("ascii")


def marshal(value: Any) -> bytes:
    """Return the form encoding of ``value``.

    Dataclass instances and string-keyed mappings become ``key=value`` pairs
    sorted by key; lists become values joined by ``&``; scalars are escaped
    on their own. Mapping entries whose values are empty are left out.
    """
    marshaler = _as_marshaler(value)
    if marshaler is not None:
        return _marshal_marshaler(marshaler)
    if value is None:
        return b""
    if _is_struct(value):
        return _encode_values(_struct_values(value)).encode("ascii")
    if isinstance(value, Mapping):
        return _encode_values(_mapping_values(value)).encode("ascii")
    try:
        texts = _get(value)
    except UnsupportedTypeError:
        raise
    except FormError as exc:
        raise FormError(f"form: failed to marshal: {exc}") from exc
    return "&".join(quote_plus(text) for text in texts).encode("ascii")


def is_empty_value(value: Any) -> bool:
    """Tell whether a value counts as empty for ``omitempty``."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, Mapping)):
        return len(value) == 0
    return False