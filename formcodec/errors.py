"""Exceptions raised while encoding and decoding form data."""

from __future__ import annotations

from typing import Any


class FormError(ValueError):
    """Base class for every error reported by the form codec."""


class UnsupportedTypeError(FormError, TypeError):
    """Raised when a value has a type that has no form representation."""


class InvalidUnmarshalError(FormError, TypeError):
    """Raised when the target handed to unmarshal cannot receive a value."""

    def __init__(self, target_type: Any) -> None:
        self.target_type = target_type
        if target_type is None:
            message = "form: Unmarshal(nil)"
        else:
            name = getattr(target_type, "__name__", None) or repr(target_type)
            message = f"form: Unmarshal(unsupported target {name})"
        super().__init__(message)