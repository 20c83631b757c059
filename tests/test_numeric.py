import pytest

from ethereum_legacy_signer.exceptions import OversizedIntegerError
from ethereum_legacy_signer.utils.numeric import parse_fixed_width_int


@pytest.mark.parametrize(
    "buffer, expected",
    [
        (b"\x00", 0),
        (b"\x1b", 27),
        (b"\x26", 38),
        (b"\x01\x00", 256),
        (b"\x01\x02\x03", 0x010203),
        (b"\x00\x00\x01", 1),
        (b"\xff\xff\xff", 0xFFFFFF),
        (b"\x7f\xff\xff\xff", 0x7FFFFFFF),
        (b"\xff\xff\xff\xff", 0xFFFFFFFF),
    ],
)
def test_parse_fixed_width_int(buffer: bytes, expected: int) -> None:
    assert parse_fixed_width_int(buffer) == expected


@pytest.mark.parametrize("buffer", [b"", None])
def test_parse_fixed_width_int_absent(buffer: bytes) -> None:
    assert parse_fixed_width_int(buffer) is None


@pytest.mark.parametrize("buffer", [b"\x01" * 5, b"\x00" * 5, b"\xff" * 32])
def test_parse_fixed_width_int_too_wide(buffer: bytes) -> None:
    with pytest.raises(OversizedIntegerError):
        parse_fixed_width_int(buffer)
