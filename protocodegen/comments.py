"""Comments attached to Protobuf items, and the service descriptors that carry them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol, Sequence

from google.protobuf import descriptor_pb2

__all__ = [
    "Location",
    "Comments",
    "sanitize_line",
    "get_lines",
    "Method",
    "Service",
]

_RULE_URL = re.compile(r"https?://[^\s)]+")
_RULE_BRACKETS = re.compile(r"(^|[^\]\\])\[(([^\]]*[^\\])?)\]([^(\[]|$)")

_INDENT = "    "


class _LocationLike(Protocol):
    leading_comments: str | None
    trailing_comments: str | None
    leading_detached_comments: Sequence[str]


@dataclass
class Location:
    """Source location of a Protobuf item, with the comments found around it."""

    path: list[int] = field(default_factory=list)
    span: list[int] = field(default_factory=list)
    leading_comments: str | None = None
    trailing_comments: str | None = None
    leading_detached_comments: list[str] = field(default_factory=list)


def get_lines(comments: str) -> list[str]:
    """Split comment text into lines, dropping line terminators.

    Lines end at a newline; a carriage return before it is removed too, and a
    final newline does not start an extra empty line.
    """
    if not comments:
        return []
    pieces = comments.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]


def _should_indent(sanitized_line: str) -> bool:
    """A line gets a leading space if it is non-empty and does not start with
    exactly one space (several spaces occur in multi-line Markdown lists)."""
    if not sanitized_line:
        return False
    return sanitized_line[0] != " " or sanitized_line[1:2] == " "


def sanitize_line(line: str) -> str:
    """Prepare a comment line for doc output.

    URLs are wrapped in angle brackets, bare square brackets that do not form
    a link are escaped, and a separating space is added where needed.
    """
    s = _RULE_URL.sub(r"<\g<0>>", line)
    s = _RULE_BRACKETS.sub(r"\1\\[\2\\]\4", s)
    if _should_indent(s):
        s = " " + s
    return s


@dataclass
class Comments:
    """Comments on a Protobuf item."""

    leading_detached: list[list[str]] = field(default_factory=list)
    leading: list[str] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)

    @classmethod
    def from_location(cls, location: _LocationLike) -> Comments:
        """Collect the comments recorded for a source location."""
        return cls(
            leading_detached=[get_lines(block) for block in location.leading_detached_comments],
            leading=get_lines(location.leading_comments or ""),
            trailing=get_lines(location.trailing_comments or ""),
        )

    def append_with_indent(self, indent_level: int) -> str:
        """Render the comments, each indentation level being four spaces."""
        indent = _INDENT * indent_level
        out: list[str] = []

        for block in self.leading_detached:
            out.extend(f"{indent}//{sanitize_line(line)}\n" for line in block)
            out.append("\n")

        out.extend(f"{indent}///{sanitize_line(line)}\n" for line in self.leading)

        if self.leading and self.trailing:
            out.append(f"{indent}///\n")

        out.extend(f"{indent}///{sanitize_line(line)}\n" for line in self.trailing)

        return "".join(out)


@dataclass
class Method:
    """A service method descriptor."""

    name: str
    proto_name: str
    input_type: str
    output_type: str
    input_proto_type: str
    output_proto_type: str
    comments: Comments = field(default_factory=Comments)
    options: descriptor_pb2.MethodOptions = field(default_factory=descriptor_pb2.MethodOptions)
    client_streaming: bool = False
    server_streaming: bool = False


@dataclass
class Service:
    """A service descriptor."""

    name: str
    proto_name: str
    package: str
    comments: Comments = field(default_factory=Comments)
    methods: list[Method] = field(default_factory=list)
    options: descriptor_pb2.ServiceOptions = field(default_factory=descriptor_pb2.ServiceOptions)