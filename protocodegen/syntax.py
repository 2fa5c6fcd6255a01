"""The Protobuf syntax level declared by a .proto file."""

from __future__ import annotations

import enum

__all__ = ["Syntax", "parse_syntax"]


class Syntax(enum.Enum):
    """Protobuf syntax levels."""

    PROTO2 = "proto2"
    PROTO3 = "proto3"


def parse_syntax(value: str | None) -> Syntax:
    """Map a file's declared syntax to a Syntax; a missing value means proto2."""
    if value is None:
        return Syntax.PROTO2
    try:
        return Syntax(value)
    except ValueError:
        raise ValueError(f"unknown syntax: {value}") from None