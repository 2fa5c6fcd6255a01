import pytest

from protocodegen.containers import BytesType, MapType


def test_map_annotations():
    assert MapType.HASH_MAP.annotation() == "map"
    assert MapType.BTREE_MAP.annotation() == "btree_map"


def test_map_rust_types():
    assert MapType.HASH_MAP.rust_type() == "::std::collections::HashMap"
    assert MapType.BTREE_MAP.rust_type() == "::prost::alloc::collections::BTreeMap"


def test_bytes_annotations():
    assert BytesType.VEC.annotation() == "vec"
    assert BytesType.BYTES.annotation() == "bytes"


def test_bytes_rust_types():
    assert BytesType.VEC.rust_type() == "::prost::alloc::vec::Vec<u8>"
    assert BytesType.BYTES.rust_type() == "::prost::bytes::Bytes"


@pytest.mark.parametrize("kind", [MapType, BytesType])
def test_annotations_are_distinct(kind):
    annotations = [member.annotation() for member in kind]
    assert len(set(annotations)) == len(annotations)


@pytest.mark.parametrize("kind", [MapType, BytesType])
def test_rust_types_are_fully_qualified(kind):
    assert all(member.rust_type().startswith("::") for member in kind)