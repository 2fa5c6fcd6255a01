"""Helpers for turning Protobuf names into Rust identifiers."""

from __future__ import annotations

import enum
from itertools import groupby
from typing import Iterator

__all__ = [
    "sanitize_identifier",
    "to_snake",
    "to_upper_camel",
    "strip_enum_prefix",
]

# Keywords that can be written as raw identifiers (``r#name``).
_RAW_KEYWORDS = frozenset(
    {
        # 2015 strict keywords.
        "as", "break", "const", "continue", "else", "enum", "false",
        "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut",
        "pub", "ref", "return", "static", "struct", "trait", "true",
        "type", "unsafe", "use", "where", "while",
        # 2018 strict keywords.
        "dyn",
        # 2015 reserved keywords.
        "abstract", "become", "box", "do", "final", "macro", "override", "priv", "typeof",
        "unsized", "virtual", "yield",
        # 2018 reserved keywords.
        "async", "await", "try",
        # 2024 reserved keywords.
        "gen",
    }
)

# Keywords that cannot be raw identifiers and get an underscore suffix instead.
_SUFFIXED_KEYWORDS = frozenset({"_", "super", "self", "Self", "extern", "crate"})


class _Mode(enum.Enum):
    BOUNDARY = enum.auto()
    LOWERCASE = enum.auto()
    UPPERCASE = enum.auto()


def _split_case(word: str) -> Iterator[str]:
    """Split one alphanumeric run into words at case boundaries."""
    start = 0
    mode = _Mode.BOUNDARY
    for i, (char, following) in enumerate(zip(word, word[1:])):
        if char.islower():
            next_mode = _Mode.LOWERCASE
        elif char.isupper():
            next_mode = _Mode.UPPERCASE
        else:
            next_mode = mode

        if next_mode is _Mode.LOWERCASE and following.isupper():
            # Boundary after a non-uppercase character followed by an uppercase one.
            yield word[start : i + 1]
            start = i + 1
            mode = _Mode.BOUNDARY
        elif mode is _Mode.UPPERCASE and char.isupper() and following.islower():
            # Boundary before the last capital of an acronym, as in "XMLHttp".
            yield word[start:i]
            start = i
            mode = _Mode.BOUNDARY
        else:
            mode = next_mode
    yield word[start:]


def _words(text: str) -> Iterator[str]:
    for is_alnum, chars in groupby(text, key=str.isalnum):
        if is_alnum:
            yield from _split_case("".join(chars))


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def sanitize_identifier(s: str) -> str:
    """Escape an identifier that clashes with a keyword or starts with a digit."""
    if s in _RAW_KEYWORDS:
        return f"r#{s}"
    if s in _SUFFIXED_KEYWORDS:
        return f"{s}_"
    if s[:1].isnumeric():
        return f"_{s}"
    return s


def to_snake(s: str) -> str:
    """Convert a camelCase or SCREAMING_SNAKE_CASE name to a lower_snake field name."""
    return sanitize_identifier("_".join(word.lower() for word in _words(s)))


def to_upper_camel(s: str) -> str:
    """Convert a snake_case name to an UpperCamel type name."""
    return sanitize_identifier("".join(_capitalize(word) for word in _words(s)))


def strip_enum_prefix(prefix: str, name: str) -> str:
    """Strip an enum's type name from the front of one of its value names.

    Both arguments are expected in upper camel case. The prefix is only removed
    when what follows starts with an uppercase letter, so "Foo" is not stripped
    from "Foobar", and the result is never empty.
    """
    stripped = name.removeprefix(prefix)
    if not stripped[:1].isupper():
        stripped = name
    return sanitize_identifier(stripped)