"""Mapping of externally provided Protobuf packages and types to Rust paths."""

from __future__ import annotations

from typing import Iterable

from protocodegen.ident import to_snake, to_upper_camel

__all__ = ["validate_proto_path", "ExternPaths"]

_WELL_KNOWN_TYPES = (
    (".google.protobuf", "::prost_types"),
    (".google.protobuf.BoolValue", "bool"),
    (".google.protobuf.BytesValue", "::prost::alloc::vec::Vec<u8>"),
    (".google.protobuf.DoubleValue", "f64"),
    (".google.protobuf.Empty", "()"),
    (".google.protobuf.FloatValue", "f32"),
    (".google.protobuf.Int32Value", "i32"),
    (".google.protobuf.Int64Value", "i64"),
    (".google.protobuf.StringValue", "::prost::alloc::string::String"),
    (".google.protobuf.UInt32Value", "u32"),
    (".google.protobuf.UInt64Value", "u64"),
)


def validate_proto_path(path: str) -> None:
    """Check that a Protobuf path is fully qualified and well formed.

    Raises ValueError when it is not.
    """
    if not path.startswith("."):
        raise ValueError(
            "Protobuf paths must be fully qualified "
            f"(begin with a leading '.'): {path}"
        )
    if any(not segment for segment in path.split(".")[1:]):
        raise ValueError(f"invalid fully-qualified Protobuf path: {path}")


class ExternPaths:
    """Protobuf packages and types that are provided outside the generated code."""

    def __init__(self, paths: Iterable[tuple[str, str]], prost_types: bool) -> None:
        self._paths: dict[str, str] = {}
        for proto_path, rust_path in paths:
            self._insert(proto_path, rust_path)
        if prost_types:
            for proto_path, rust_path in _WELL_KNOWN_TYPES:
                self._insert(proto_path, rust_path)

    def _insert(self, proto_path: str, rust_path: str) -> None:
        validate_proto_path(proto_path)
        if proto_path in self._paths:
            raise ValueError(f"duplicate extern Protobuf path: {proto_path}")
        self._paths[proto_path] = rust_path

    def __repr__(self) -> str:
        return f"ExternPaths({self._paths!r})"

    def resolve_ident(self, pb_ident: str) -> str | None:
        """Resolve a fully qualified Protobuf identifier to an external Rust path.

        Returns None when no configured package or type covers the identifier.
        """
        if not pb_ident.startswith("."):
            raise ValueError(f"Protobuf identifier must be fully qualified: {pb_ident}")

        exact = self._paths.get(pb_ident)
        if exact is not None:
            return exact

        dots = [i for i, char in enumerate(pb_ident) if char == "."]
        for idx in reversed(dots):
            rust_path = self._paths.get(pb_ident[:idx])
            if rust_path is None:
                continue
            *modules, ident_type = pb_ident[idx + 1 :].split(".")
            segments = [*rust_path.split("::"), *modules]
            parts = [
                segment if position == 0 and segment == "crate" else to_snake(segment)
                for position, segment in enumerate(segments)
            ]
            parts.append(to_upper_camel(ident_type))
            return "::".join(parts)

        return None