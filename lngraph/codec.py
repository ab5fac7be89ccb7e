"""
lngraph/codec.py

JSON codec for graph snapshots.

decode()
    Text -> Graph.  All-or-nothing: the first malformed field aborts the
    decode and is raised as a single lngraph.errors.DecodeError subclass.
    Pure; performs no I/O and does not log.

encode()
    Graph -> text in the same wire format decode() reads, so
    decode(encode(graph)) == graph.
"""
from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import ValidationError

from lngraph.config import settings
from lngraph.errors import (
    DecodeError,
    FieldParseError,
    JsonSyntaxError,
    MissingFieldError,
    TypeMismatchError,
)
from lngraph.models.schemas.fields import WIRE_CONTEXT, json_type_name
from lngraph.models.schemas.graph import Graph

logger = structlog.get_logger(__name__)

# pydantic error types reported as a value that cannot be parsed or is out
# of range for its target type.
_FIELD_PARSE_TYPES: frozenset[str] = frozenset(
    {"field_parse", "greater_than_equal", "less_than_equal"}
)

# JSON type each built-in pydantic type error was expecting.
_EXPECTED_JSON_TYPE: dict[str, str] = {
    "int_type": "number",
    "string_type": "string",
    "bool_type": "boolean",
    "tuple_type": "array",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _reject_constant(name: str) -> Any:
    """json.loads hook for NaN / Infinity, which are not JSON."""
    raise JsonSyntaxError(f"invalid JSON literal '{name}'")


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """json.loads hook that refuses an object repeating a key."""
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise JsonSyntaxError(f"duplicate field '{key}'")
        obj[key] = value
    return obj


def _load_json(text: str | bytes) -> Any:
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return json.loads(
            text,
            parse_constant=_reject_constant,
            object_pairs_hook=_reject_duplicates,
        )
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(
            f"{exc.msg} at line {exc.lineno} column {exc.colno}",
            position=exc.pos,
            lineno=exc.lineno,
            colno=exc.colno,
            cause=exc,
        ) from exc
    except UnicodeDecodeError as exc:
        raise JsonSyntaxError(
            f"input is not valid UTF-8: {exc.reason}",
            position=exc.start,
            cause=exc,
        ) from exc
    except RecursionError as exc:
        raise JsonSyntaxError("document nested too deeply", cause=exc) from exc


def _qualified_name(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as e.g. ``edges[3].capacity``."""
    name = ""
    for part in loc:
        if isinstance(part, int):
            name += f"[{part}]"
        else:
            name += f".{part}" if name else str(part)
    return name


def _document_position(data: Any, loc: tuple[int | str, ...]) -> tuple[int, ...]:
    """Sort key placing an error location in document order.

    Object keys are ranked by their position in the decoded object (dicts
    keep document order).  A key absent from its object ranks after every
    key present there, since a missing field is only known once the object
    closes.
    """
    position: list[int] = []
    current = data
    for part in loc:
        if isinstance(current, dict):
            keys = list(current)
            if part not in current:
                position.append(len(keys))
                break
            position.append(keys.index(part))
            current = current[part]
        elif isinstance(current, list) and isinstance(part, int):
            position.append(part)
            current = current[part]
        else:
            break
    return tuple(position)


def _translate(exc: ValidationError, data: Any) -> DecodeError:
    """Map the earliest pydantic error in the document onto the taxonomy."""
    # min() keeps pydantic's order between errors at the same position.
    error = min(
        exc.errors(include_url=False),
        key=lambda e: _document_position(data, e["loc"]),
    )
    field = _qualified_name(error["loc"]) or None
    err_type = error["type"]
    ctx = error.get("ctx") or {}
    value = error.get("input")

    if err_type == "missing":
        return MissingFieldError(f"missing field '{field}'", field=field, cause=exc)

    if err_type in _FIELD_PARSE_TYPES:
        text = ctx.get("text", str(value))
        return FieldParseError(f"{field}: {error['msg']}", field=field, text=text, cause=exc)

    return TypeMismatchError(
        f"{field}: {error['msg']}",
        field=field,
        expected=ctx.get("expected") or _EXPECTED_JSON_TYPE.get(err_type),
        found=ctx.get("found") or json_type_name(value),
        cause=exc,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def decode(text: str | bytes) -> Graph:
    """Parse a JSON graph snapshot into a validated Graph.

    Args:
        text: One JSON document whose root object holds ``nodes`` and
            ``edges`` arrays.  Bytes are decoded as UTF-8.

    Returns:
        The fully populated Graph, sequences in document order.

    Raises:
        JsonSyntaxError: If the text is not well-formed JSON.
        MissingFieldError: If a required key is absent, including a root
            that is not an object.
        TypeMismatchError: If a value has the wrong JSON type.
        FieldParseError: If a string-coerced number or address does not
            parse, or a number is out of range.
    """
    data = _load_json(text)

    if not isinstance(data, dict):
        raise MissingFieldError("missing field 'nodes'", field="nodes")

    try:
        return Graph.model_validate(data, context=WIRE_CONTEXT)
    except ValidationError as exc:
        raise _translate(exc, data) from exc


def to_wire(graph: Graph) -> dict[str, Any]:
    """Return the JSON-compatible dict form of *graph*."""
    return graph.model_dump(mode="json")


def encode(graph: Graph, *, indent: int | None = None) -> str:
    """Serialize *graph* to the wire format read by decode().

    Integers that the wire format quotes (capacity, HTLC limits, fees) are
    written as decimal strings; addresses as ``ip:port`` text; missing
    policies as ``null``.  *indent* defaults to ``settings.json_indent``.
    """
    if indent is None:
        indent = settings.json_indent
    text = graph.model_dump_json(indent=indent)
    logger.debug(
        "graph_encoded",
        nodes=len(graph.nodes),
        edges=len(graph.edges),
        chars=len(text),
    )
    return text
