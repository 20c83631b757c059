"""
Utility Functions For Byte Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Byte specific utility functions: canonical integer encoding and the byte
order translation between the signature primitive and the transaction
encoding.
"""
from typing import Union

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import FixedUnsigned, Uint


def left_pad_zero_bytes(
    value: Bytes, size: Union[int, FixedUnsigned, Uint]
) -> Bytes:
    """
    Widen a canonical big endian scalar back to `size` bytes. Values that
    are already `size` bytes or longer are returned unchanged.
    """
    return bytes(value).rjust(int(size), b"\x00")


def strip_leading_zeros(value: Bytes) -> Bytes:
    """
    Remove every leading zero byte from `value`.

    This is the canonical encoding of an unsigned integer, where zero is the
    empty byte string rather than `b"\\x00"`.

    Parameters
    ----------
    value :
        Big endian integer, possibly with leading zero bytes.

    Returns
    -------
    stripped : `Bytes`
        Shortest suffix of `value` that does not start with a zero byte.
    """
    return bytes(value).lstrip(b"\x00")


def reverse_bytes(buffer: bytearray) -> bytearray:
    """
    Reverse the byte order of `buffer` in place.

    Parameters
    ----------
    buffer :
        Mutable buffer to reverse.

    Returns
    -------
    buffer : `bytearray`
        The same buffer, now reversed.
    """
    buffer.reverse()
    return buffer
