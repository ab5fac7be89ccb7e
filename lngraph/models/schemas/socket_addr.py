"""Socket addresses as they appear in node announcements: ``ip:port``."""
from __future__ import annotations

import re
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from lngraph.models.schemas.fields import json_type_name

_DIGITS_RE = re.compile(r"[0-9]+")


def _decimal(text: str, limit: int) -> int | None:
    """Return *text* as an int no greater than *limit*, or None."""
    if not _DIGITS_RE.fullmatch(text) or len(text.lstrip("0")) > len(str(limit)):
        return None
    value = int(text)
    return value if value <= limit else None


@dataclass(frozen=True)
class SocketAddr:
    """An IP address plus port.

    IPv4 is written ``a.b.c.d:port``; IPv6 must be bracketed,
    ``[addr]:port``, optionally with a numeric scope id
    (``[fe80::1%2]:port``).  Hostnames and named zones are not accepted.
    """

    ip: IPv4Address | IPv6Address
    port: int

    @classmethod
    def parse(cls, text: str) -> SocketAddr:
        """Parse ``ip:port`` text.

        Raises:
            ValueError: If the text is not a well-formed IP-and-port pair.
        """
        ip: IPv4Address | IPv6Address
        if text.startswith("["):
            host, sep, port = text[1:].partition("]:")
            if not sep:
                raise ValueError("invalid socket address syntax")
            _, pct, scope = host.partition("%")
            if pct and _decimal(scope, 0xFFFF_FFFF) is None:
                raise ValueError(f"invalid scope id '{scope}'")
            ip = IPv6Address(host)
        else:
            host, sep, port = text.rpartition(":")
            if not sep:
                raise ValueError("invalid socket address syntax")
            ip = IPv4Address(host)

        port_number = _decimal(port, 0xFFFF)
        if port_number is None:
            raise ValueError(f"invalid port '{port}'")
        return cls(ip=ip, port=port_number)

    def __str__(self) -> str:
        if isinstance(self.ip, IPv6Address):
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"

    # ── pydantic integration ──────────────────────────────────────────────────

    @classmethod
    def _validate(cls, value: Any) -> SocketAddr:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "type_mismatch",
                "expected an 'ip:port' string, found {found}",
                {"expected": "string", "found": json_type_name(value)},
            )
        try:
            return cls.parse(value)
        except ValueError as exc:
            raise PydanticCustomError(
                "field_parse",
                "invalid socket address '{text}': {reason}",
                {"text": value, "reason": str(exc)},
            ) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )
