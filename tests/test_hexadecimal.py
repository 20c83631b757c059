import pytest

from ethereum_legacy_signer.utils.hexadecimal import (
    bytes_to_hex,
    has_hex_prefix,
    hex_to_bytes,
    parse_hex,
    remove_hex_prefix,
)


def test_has_hex_prefix() -> None:
    assert has_hex_prefix("0x1234")
    assert not has_hex_prefix("1234")


def test_remove_hex_prefix() -> None:
    assert remove_hex_prefix("0xabcd") == "abcd"
    assert remove_hex_prefix("abcd") == "abcd"


@pytest.mark.parametrize(
    "hex_string, expected",
    [
        ("0x", b""),
        ("", b""),
        ("0x00", b"\x00"),
        ("0xdeadbeef", b"\xde\xad\xbe\xef"),
        ("deadbeef", b"\xde\xad\xbe\xef"),
        ("0x1", b"\x01"),
        ("0xabc", b"\x0a\xbc"),
    ],
)
def test_hex_to_bytes(hex_string: str, expected: bytes) -> None:
    assert hex_to_bytes(hex_string) == expected


def test_hex_to_bytes_rejects_non_hex_digits() -> None:
    with pytest.raises(ValueError):
        hex_to_bytes("0xzz")


def test_parse_hex() -> None:
    assert parse_hex("0x0102") == b"\x01\x02"
    assert parse_hex(b"\x01\x02") == b"\x01\x02"

    converted = parse_hex(bytearray(b"\x03"))
    assert type(converted) is bytes
    assert converted == b"\x03"


@pytest.mark.parametrize("value", ["0102", 12, None, 1.5])
def test_parse_hex_leaves_other_values_alone(value: object) -> None:
    assert parse_hex(value) is value


def test_bytes_to_hex() -> None:
    assert bytes_to_hex(b"") == "0x"
    assert bytes_to_hex(b"\x00\xff") == "0x00ff"
