"""
Utility Functions For Numeric Operations
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Decoding of small big endian integers, such as the `v` field of a signed
transaction.
"""
from typing import Optional

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U32

from ..exceptions import OversizedIntegerError

MAX_FIXED_WIDTH_INT_BYTES = 4


def parse_fixed_width_int(buffer: Optional[Bytes]) -> Optional[int]:
    """
    Decode a big endian unsigned integer of one to four bytes.

    Parameters
    ----------
    buffer :
        The encoded integer.

    Returns
    -------
    value : `Optional[int]`
        The decoded integer, or `None` if `buffer` is empty or absent.
    """
    if not buffer:
        return None

    if len(buffer) > MAX_FIXED_WIDTH_INT_BYTES:
        raise OversizedIntegerError(
            f"expected at most {MAX_FIXED_WIDTH_INT_BYTES} bytes "
            f"but got {len(buffer)}"
        )

    return int(U32.from_be_bytes(buffer))
