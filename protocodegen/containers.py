"""Collection types chosen for generated map and bytes fields."""

from __future__ import annotations

import enum

__all__ = ["MapType", "BytesType"]


class MapType(enum.Enum):
    """The map collection emitted for Protobuf map fields; HASH_MAP is the default."""

    HASH_MAP = "hash_map"
    BTREE_MAP = "btree_map"

    def annotation(self) -> str:
        """The field annotation naming this map type."""
        return {
            MapType.HASH_MAP: "map",
            MapType.BTREE_MAP: "btree_map",
        }[self]

    def rust_type(self) -> str:
        """The fully qualified type name of this map type."""
        return {
            MapType.HASH_MAP: "::std::collections::HashMap",
            MapType.BTREE_MAP: "::prost::alloc::collections::BTreeMap",
        }[self]


class BytesType(enum.Enum):
    """The collection emitted for Protobuf bytes fields; VEC is the default."""

    VEC = "vec"
    BYTES = "bytes"

    def annotation(self) -> str:
        """The field annotation naming this bytes type."""
        return {
            BytesType.VEC: "vec",
            BytesType.BYTES: "bytes",
        }[self]

    def rust_type(self) -> str:
        """The fully qualified type name of this bytes type."""
        return {
            BytesType.VEC: "::prost::alloc::vec::Vec<u8>",
            BytesType.BYTES: "::prost::bytes::Bytes",
        }[self]