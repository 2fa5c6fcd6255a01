"""Naming, escaping, comment and protoc helpers for generating Rust code from Protocol Buffers descriptors."""

__version__ = "0.13.5"

__all__ = [
    "comments",
    "containers",
    "escaping",
    "extern_paths",
    "ident",
    "protoc",
    "syntax",
]