"""
lngraph/models/schemas/fields.py

Field types shared by the graph schemas.

Native integers
---------------
  U16, U32 — JSON numbers, strict (no bools, floats or quoted numbers),
  bounded to the unsigned width.

String-coerced integers
-----------------------
  StrU16, StrU32, StrU64 — JSON strings whose text is an unsigned decimal
  integer.  Upstream graph dumps quote large integers to avoid precision
  loss in generic JSON number handling.  Built by from_str(bits); all
  widths share one validator and one serializer, so they behave
  identically apart from the range check.

Custom pydantic error types raised here ("type_mismatch", "field_parse")
are translated into lngraph.errors by lngraph.codec.
"""
from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import Field, PlainSerializer, PlainValidator, StrictInt, ValidationInfo
from pydantic_core import PydanticCustomError

# Validation context passed by decode(); turns off the Python-side
# convenience of accepting plain ints for string-coerced fields.
WIRE_CONTEXT: dict[str, bool] = {"wire": True}

# Unsigned decimal grammar: optional '+', ASCII digits only.
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def json_type_name(value: Any) -> str:
    """Return the JSON type name for a decoded JSON value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def parse_unsigned(text: str, bits: int) -> int:
    """Parse *text* as an unsigned integer that fits in *bits* bits.

    Raises:
        ValueError: If the text is empty, contains anything other than an
            optional leading '+' followed by ASCII digits, or overflows.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError("invalid digit found in string")
    limit = (1 << bits) - 1
    digits = text.lstrip("+").lstrip("0") or "0"
    # Length check first: int() refuses very long digit strings on its own.
    if len(digits) > len(str(limit)):
        raise ValueError("number too large to fit in target type")
    value = int(digits)
    if value > limit:
        raise ValueError("number too large to fit in target type")
    return value


def from_str(bits: int) -> Any:
    """Build an annotated int type decoded from a quoted decimal string."""

    def validate(value: Any, info: ValidationInfo) -> int:
        wire = bool(info.context and info.context.get("wire"))
        # Models built in Python code may pass the number itself.
        if not wire and isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            raise PydanticCustomError(
                "type_mismatch",
                "expected a string holding a u{bits}, found {found}",
                {"bits": bits, "expected": "string", "found": json_type_name(value)},
            )
        try:
            return parse_unsigned(value, bits)
        except ValueError as exc:
            raise PydanticCustomError(
                "field_parse",
                "cannot parse '{text}' as u{bits}: {reason}",
                {"bits": bits, "text": value, "reason": str(exc)},
            ) from exc

    return Annotated[
        int,
        PlainValidator(validate),
        PlainSerializer(str, return_type=str, when_used="json"),
    ]


U16 = Annotated[StrictInt, Field(ge=0, le=0xFFFF)]
U32 = Annotated[StrictInt, Field(ge=0, le=0xFFFF_FFFF)]

StrU16 = from_str(16)
StrU32 = from_str(32)
StrU64 = from_str(64)
