"""Decoding of C-escaped strings as found in Protobuf default values."""

from __future__ import annotations

import string

__all__ = ["unescape_c_escape_string"]

_SIMPLE_ESCAPES = {
    ord("a"): 0x07,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("v"): 0x0B,
    ord("\\"): 0x5C,
    ord("?"): 0x3F,
    ord("'"): 0x27,
    ord('"'): 0x22,
}

_OCTAL_DIGITS = frozenset(b"01234567")
_HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))


def unescape_c_escape_string(s: str) -> bytes:
    """Decode a C-escaped string into the bytes it denotes.

    Raises ValueError when the string ends in a lone backslash or holds an
    unknown, incomplete or malformed escape.
    """
    src = s.encode("utf-8")
    length = len(src)
    dst = bytearray()
    p = 0

    while p < length:
        if src[p] != ord("\\"):
            dst.append(src[p])
            p += 1
            continue

        p += 1
        if p == length:
            raise ValueError(f"invalid c-escaped default binary value ({s}): ends with '\\'")

        escape = src[p]
        if escape in _SIMPLE_ESCAPES:
            dst.append(_SIMPLE_ESCAPES[escape])
            p += 1
        elif escape in _OCTAL_DIGITS:
            octal = 0
            for _ in range(3):
                if p < length and src[p] in _OCTAL_DIGITS:
                    octal = (octal * 8 + (src[p] - ord("0"))) & 0xFF
                    p += 1
                else:
                    break
            dst.append(octal)
        elif escape in (ord("x"), ord("X")):
            if p + 3 > length:
                raise ValueError(
                    f"invalid c-escaped default binary value ({s}): incomplete hex value"
                )
            digits = src[p + 1 : p + 3]
            if not all(d in _HEX_DIGITS for d in digits):
                shown = src[p : p + 2].decode("utf-8", errors="replace")
                raise ValueError(
                    f"invalid c-escaped default binary value ({shown}): invalid hex value"
                )
            dst.append(int(digits, 16))
            p += 3
        else:
            raise ValueError(f"invalid c-escaped default binary value ({s}): invalid escape")

    return bytes(dst)