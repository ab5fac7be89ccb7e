"""Typed decoding of payment-channel graph snapshots."""

from lngraph.codec import decode, encode, to_wire
from lngraph.errors import (
    DecodeError,
    DecodeErrorKind,
    FieldParseError,
    JsonSyntaxError,
    MissingFieldError,
    TypeMismatchError,
)
from lngraph.models.schemas import Address, Edge, Graph, Node, NodePolicy, SocketAddr

__all__ = [
    "decode",
    "encode",
    "to_wire",
    "DecodeError",
    "DecodeErrorKind",
    "FieldParseError",
    "JsonSyntaxError",
    "MissingFieldError",
    "TypeMismatchError",
    "Address",
    "Edge",
    "Graph",
    "Node",
    "NodePolicy",
    "SocketAddr",
]
