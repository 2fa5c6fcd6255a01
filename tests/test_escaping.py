import pytest

from protocodegen.escaping import unescape_c_escape_string


def test_plain_text_is_unchanged():
    assert unescape_c_escape_string("hello world") == b"hello world"


def test_nul_octal():
    assert unescape_c_escape_string(r"\0") == b"\0"


def test_octal_sequences():
    assert unescape_c_escape_string(r"\012\156") == bytes([0o012, 0o156])


def test_hex_sequences():
    assert unescape_c_escape_string(r"\x01\x02") == bytes([0x01, 0x02])


def test_all_escape_kinds():
    assert (
        unescape_c_escape_string(r"\0\001\a\b\f\n\r\t\v\\\'\"\xfe")
        == b"\0\x01\x07\x08\x0C\n\r\t\x0B\\'\"\xFE"
    )


def test_incomplete_hex_value():
    with pytest.raises(ValueError, match="incomplete hex value"):
        unescape_c_escape_string(r"\x1")


def test_invalid_hex_value():
    with pytest.raises(ValueError, match="invalid hex value"):
        unescape_c_escape_string(r"\xzz")


def test_trailing_backslash():
    with pytest.raises(ValueError, match="ends with"):
        unescape_c_escape_string("abc\\")


def test_unknown_escape():
    with pytest.raises(ValueError, match="invalid escape"):
        unescape_c_escape_string(r"\q")


def test_non_ascii_text_is_utf8_encoded():
    assert unescape_c_escape_string("é") == "é".encode("utf-8")