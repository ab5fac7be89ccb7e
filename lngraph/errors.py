"""Error hierarchy for graph decoding.

Every failure surfaces as a single ``DecodeError`` subclass whose ``kind``
tells the caller what went wrong.  Nothing here is recovered locally.
"""

from __future__ import annotations

from enum import Enum


class DecodeErrorKind(str, Enum):
    SYNTAX = "syntax"
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    FIELD_PARSE = "field_parse"


class DecodeError(Exception):
    """Base error for all decode failures."""

    kind: DecodeErrorKind

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.cause = cause


class JsonSyntaxError(DecodeError):
    """Input is not well-formed JSON."""

    kind = DecodeErrorKind.SYNTAX

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        lineno: int | None = None,
        colno: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.position = position
        self.lineno = lineno
        self.colno = colno


class MissingFieldError(DecodeError):
    """A required field or top-level key is absent."""

    kind = DecodeErrorKind.MISSING_FIELD


class TypeMismatchError(DecodeError):
    """A JSON value has the wrong type for its field."""

    kind = DecodeErrorKind.TYPE_MISMATCH

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        expected: str | None = None,
        found: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, field=field, cause=cause)
        self.expected = expected
        self.found = found


class FieldParseError(DecodeError):
    """A field's text could not be parsed into its target type."""

    kind = DecodeErrorKind.FIELD_PARSE

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        text: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, field=field, cause=cause)
        self.text = text
