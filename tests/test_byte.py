import pytest

from ethereum_legacy_signer.utils.byte import (
    left_pad_zero_bytes,
    reverse_bytes,
    strip_leading_zeros,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"", b""),
        (b"\x00", b""),
        (b"\x00\x00\x00", b""),
        (b"\x01", b"\x01"),
        (b"\x00\x01\x00", b"\x01\x00"),
        (b"\x00\x00\xff\x00\x01", b"\xff\x00\x01"),
        (b"\x80" + b"\x00" * 31, b"\x80" + b"\x00" * 31),
    ],
)
def test_strip_leading_zeros(value: bytes, expected: bytes) -> None:
    assert strip_leading_zeros(value) == expected


@pytest.mark.parametrize(
    "value", [b"", b"\x00", b"\x00\x00\x07", b"\x12\x34", b"\x00" * 40]
)
def test_strip_leading_zeros_is_idempotent(value: bytes) -> None:
    once = strip_leading_zeros(value)
    assert strip_leading_zeros(once) == once


def test_strip_leading_zeros_accepts_bytearray() -> None:
    assert strip_leading_zeros(bytearray(b"\x00\x2a")) == b"\x2a"


def test_left_pad_zero_bytes() -> None:
    assert left_pad_zero_bytes(b"\x01\x02", 4) == b"\x00\x00\x01\x02"
    assert left_pad_zero_bytes(b"", 3) == b"\x00\x00\x00"
    assert left_pad_zero_bytes(b"\x01\x02\x03", 2) == b"\x01\x02\x03"


def test_reverse_bytes_reverses_in_place() -> None:
    buffer = bytearray(b"\x01\x02\x03")
    result = reverse_bytes(buffer)
    assert result is buffer
    assert buffer == bytearray(b"\x03\x02\x01")


@pytest.mark.parametrize(
    "value", [b"", b"\x00", b"\x01\x02", bytes(range(32)), bytes(range(65))]
)
def test_reverse_bytes_is_an_involution(value: bytes) -> None:
    assert bytes(reverse_bytes(reverse_bytes(bytearray(value)))) == value
