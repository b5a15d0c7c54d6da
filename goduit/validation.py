"""Request validation helpers: the notblank rule and mapping of field errors to HTTP errors."""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from numbers import Number
from typing import Any

from goduit import http_errors
from goduit.http_errors import HTTPError


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule on a request field."""

    tag: str
    field: str
    param: str = ""
    value: Any = None


def not_blank(value: Any) -> bool:
    """Return True when ``value`` is neither empty, whitespace-only, nil nor a zero value."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (bytes, bytearray)):
        return len(value) != 0
    if isinstance(value, Sized):
        return len(value) != 0
    if isinstance(value, Number):
        return value != 0
    return True


def to_http(error: FieldError) -> HTTPError | None:
    """Translate a field error into the matching HTTP error, or None for unknown rules."""
    tag = error.tag
    if tag in ("required", "notblank"):
        return http_errors.required_field_error(error.field)
    if tag in ("min", "max"):
        return http_errors.invalid_field_limit(error.field, tag, error.param)
    if tag in ("email", "http_url|base64"):
        return http_errors.invalid_field_error(error.field, error.value)
    if tag == "unique":
        return http_errors.unique_field_error(error.field)
    return None