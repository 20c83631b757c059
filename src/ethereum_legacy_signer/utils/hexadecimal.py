"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Hexadecimal string helpers. Transaction fields may be given either as bytes
or as `0x` prefixed hex strings; both end up as bytes before anything is
encoded or hashed.
"""
from typing import Any

from ethereum_types.bytes import Bytes


def has_hex_prefix(hex_string: str) -> bool:
    """
    Whether `hex_string` starts with `0x`.
    """
    return hex_string.startswith("0x")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Strip a leading `0x` from `hex_string`, if it has one.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_bytes(hex_string: str) -> Bytes:
    """
    Convert hex string to bytes. The 0x prefix is optional, and a string with
    an odd number of digits is read as if it had one more leading zero.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to bytes.

    Returns
    -------
    byte_stream : `bytes`
        Byte stream corresponding to the given hexadecimal string.
    """
    digits = remove_hex_prefix(hex_string)
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def parse_hex(value: Any) -> Any:
    """
    Decode `value` if it is a 0x prefixed hex string.

    Bytes are passed through (a `bytearray` is copied into `bytes`). Anything
    else, including strings without the prefix, is returned unchanged and
    left for the caller to interpret.

    Parameters
    ----------
    value :
        Field value as supplied by the caller.

    Returns
    -------
    parsed : `Any`
        Bytes for hex strings and byte sequences, `value` otherwise.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str) and has_hex_prefix(value):
        return parse_hex(hex_to_bytes(value))
    return value


def bytes_to_hex(value: Bytes) -> str:
    """
    Convert bytes to a 0x prefixed hex string.
    """
    return "0x" + bytes(value).hex()
