import pytest

from protocodegen.extern_paths import ExternPaths, validate_proto_path


@pytest.fixture
def paths():
    return ExternPaths(
        [
            (".foo", "::foo1"),
            (".foo.bar", "::foo2"),
            (".foo.baz", "::foo3"),
            (".foo.Fuzz", "::foo4::Fuzz"),
            (".a.b.c.d.e.f", "::abc::def"),
        ],
        False,
    )


@pytest.mark.parametrize(
    ("proto_ident", "resolved"),
    [
        (".foo", "::foo1"),
        (".foo.Foo", "::foo1::Foo"),
        (".foo.bar", "::foo2"),
        (".foo.Bas", "::foo1::Bas"),
        (".foo.bar.Bar", "::foo2::Bar"),
        (".foo.Fuzz.Bar", "::foo4::fuzz::Bar"),
        (".a.b.c.d.e.f", "::abc::def"),
        (".a.b.c.d.e.f.g.FooBar.Baz", "::abc::def::g::foo_bar::Baz"),
    ],
)
def test_extern_paths(paths, proto_ident, resolved):
    assert paths.resolve_ident(proto_ident) == resolved


@pytest.mark.parametrize("proto_ident", [".a", ".a.b", ".a.c"])
def test_extern_paths_unresolved(paths, proto_ident):
    assert paths.resolve_ident(proto_ident) is None


@pytest.mark.parametrize(
    ("proto_ident", "resolved"),
    [
        (".google.protobuf.Value", "::prost_types::Value"),
        (".google.protobuf.Duration", "::prost_types::Duration"),
        (".google.protobuf.Empty", "()"),
    ],
)
def test_well_known_types(proto_ident, resolved):
    paths = ExternPaths([], True)
    assert paths.resolve_ident(proto_ident) == resolved


def test_well_known_types_absent_without_prost_types():
    paths = ExternPaths([], False)
    assert paths.resolve_ident(".google.protobuf.Empty") is None


def test_crate_prefix_is_not_escaped():
    paths = ExternPaths([(".foo", "crate::foo")], False)
    assert paths.resolve_ident(".foo.Bar") == "crate::foo::Bar"


def test_error_fully_qualified():
    with pytest.raises(ValueError) as excinfo:
        ExternPaths([("foo", "bar")], False)
    assert str(excinfo.value) == (
        "Protobuf paths must be fully qualified (begin with a leading '.'): foo"
    )


def test_error_invalid_path():
    with pytest.raises(ValueError) as excinfo:
        ExternPaths([(".foo.", "bar")], False)
    assert str(excinfo.value) == "invalid fully-qualified Protobuf path: .foo."


def test_error_duplicate():
    with pytest.raises(ValueError) as excinfo:
        ExternPaths([(".foo", "bar"), (".foo", "bar")], False)
    assert str(excinfo.value) == "duplicate extern Protobuf path: .foo"


def test_error_duplicate_with_well_known_types():
    with pytest.raises(ValueError) as excinfo:
        ExternPaths([(".google.protobuf", "::other")], True)
    assert str(excinfo.value) == "duplicate extern Protobuf path: .google.protobuf"


def test_validate_proto_path_accepts_qualified_path():
    assert validate_proto_path(".foo.bar") is None


@pytest.mark.parametrize("bad", ["", "foo", ".foo..bar", "."])
def test_validate_proto_path_rejects(bad):
    with pytest.raises(ValueError):
        validate_proto_path(bad)


def test_resolve_ident_requires_leading_dot(paths):
    with pytest.raises(ValueError):
        paths.resolve_ident("foo.Bar")