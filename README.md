# protocodegen

Building blocks for generating Rust source code from Protocol Buffers
descriptors. The package runs `protoc` to get a `FileDescriptorSet`. It turns
Protobuf names into Rust identifiers, decodes C-escaped default values, and
resolves externally provided types. It also renders Protobuf source comments
as Rust doc comments.

## Installation

```
pip install protocodegen
```

To run the test suite, install the test extra and run pytest:

```
pip install "protocodegen[test]"
pytest
```

## Modules

- `protocodegen.ident`
  - `to_snake` and `to_upper_camel` convert Protobuf names to Rust field and
    type names.
  - `sanitize_identifier` escapes Rust keywords (`r#type`, `self_`) and names
    that start with a digit (`_0foo`).
  - `strip_enum_prefix` removes an enum's name from the front of its value
    names.
- `protocodegen.escaping`
  - `unescape_c_escape_string` decodes a C-escaped string, such as the default
    value of a `bytes` field, into `bytes`.
  - Malformed escapes raise `ValueError`.
- `protocodegen.syntax`
  - The `Syntax` enum (`PROTO2`, `PROTO3`).
  - `parse_syntax` maps a file's declared syntax to a `Syntax`. A missing value
    (`None`) means proto2. An unknown value raises `ValueError`.
- `protocodegen.containers`
  - `MapType` (`HASH_MAP`, `BTREE_MAP`) and `BytesType` (`VEC`, `BYTES`).
  - Each has `annotation()` and `rust_type()`.
- `protocodegen.extern_paths`
  - `ExternPaths(paths, prost_types)` maps fully qualified Protobuf packages or
    types to Rust paths.
  - With `prost_types=True` it also maps the well-known `.google.protobuf`
    types.
  - `resolve_ident` returns the Rust path, or `None` when no entry covers the
    identifier.
  - `validate_proto_path` checks a path. Bad or duplicate paths raise
    `ValueError`.
- `protocodegen.comments`
  - `Location` holds the comments found around an item.
  - `Comments.from_location` collects those comments.
  - `Comments.append_with_indent(level)` returns them as `//` and `///` lines
    indented by four spaces per level.
  - `sanitize_line` wraps URLs in `<...>` and escapes bare square brackets.
  - `get_lines` splits comment text into lines.
  - `Service` and `Method` are plain descriptors for service generation.
- `protocodegen.protoc`
  - `load_descriptor_set` runs `protoc`, or with `skip_protoc_run=True` reads
    an existing descriptor set from `file_descriptor_set_path`. It returns a
    `google.protobuf.descriptor_pb2.FileDescriptorSet`.
  - `protoc_from_env` reads the `PROTOC` variable and `protoc_include_from_env`
    reads the `PROTOC_INCLUDE` variable.
  - `error_message_protoc_not_found` returns the message reported when `protoc`
    cannot be found.
  - `write_file_if_changed` writes a file only when its content differs. It
    returns `True` when it wrote.

## Example

```python
from protocodegen.ident import to_snake, to_upper_camel, strip_enum_prefix
from protocodegen.escaping import unescape_c_escape_string
from protocodegen.extern_paths import ExternPaths
from protocodegen.protoc import load_descriptor_set

print(to_snake("XMLHttpRequest"))           # xml_http_request
print(to_upper_camel("FOO_BAR"))            # FooBar
print(strip_enum_prefix("Foo", "FooBar"))   # Bar
print(unescape_c_escape_string(r"\x01\x02"))  # b'\x01\x02'

paths = ExternPaths([(".foo.Fuzz", "::foo4::Fuzz")], prost_types=True)
print(paths.resolve_ident(".foo.Fuzz.Bar"))              # ::foo4::fuzz::Bar
print(paths.resolve_ident(".google.protobuf.Duration"))  # ::prost_types::Duration

descriptor_set = load_descriptor_set(["src/items.proto"], ["src"])
```

`load_descriptor_set` and `protoc_include_from_env` raise `ProtocError`, a
subclass of `OSError`, in these cases:

- `protoc_include_from_env`:
  - `PROTOC_INCLUDE` points to something other than an existing directory.
- `load_descriptor_set`:
  - `skip_protoc_run` is set without a `file_descriptor_set_path`.
  - `protoc` cannot be found or started.
  - `protoc` exits with an error.
  - The descriptor set cannot be read or decoded.

Include directories that do not exist are skipped. The `PROTOC_INCLUDE`
directory is passed after your own includes.

## What the package does not do

The package provides the pieces listed above and nothing more:

- It does not emit Rust structs, enums or modules from descriptors.
- It has no configuration builder that ties the options together.
- It does not write the include file that nests generated modules.
- It has no command-line program.