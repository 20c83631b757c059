"""
Transaction Signatures
^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Conversion between the 65 byte recoverable signature produced by the
secp256k1 primitive and the `v`, `r` and `s` fields of a transaction.

The primitive stores `r` and `s` as little-endian scalars while the
transaction holds them big-endian, so each half is byte-reversed on the way
in and on the way out. `v` folds the recovery id together with the chain id
when the signature is replay protected (`EIP-155`_):

* no replay protection: ``v = recovery_id + 27``
* bound to ``chain_id``: ``v = recovery_id + chain_id * 2 + 35``

.. _EIP-155: https://eips.ethereum.org/EIPS/eip-155
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import Uint

from .crypto.elliptic_curve import RECOVERABLE_SIGNATURE_LENGTH
from .exceptions import InvalidSignatureError, MalformedTransactionError
from .transactions import Transaction
from .utils.byte import (
    left_pad_zero_bytes,
    reverse_bytes,
    strip_leading_zeros,
)
from .utils.ensure import ensure
from .utils.numeric import parse_fixed_width_int

SCALAR_LENGTH = 32
PRE_155_V_OFFSET = 27
EIP_155_V_OFFSET = 35


@slotted_freezable
@dataclass
class TransactionSignature:
    """
    Signature fields as they are stored on a transaction. `r` and `s` are
    big endian without leading zeros.
    """

    v: int
    r: Bytes
    s: Bytes


@slotted_freezable
@dataclass
class RecoveryParameters:
    """
    What a verifier needs to recover the signer of a transaction.
    """

    chain_id: Optional[int]
    recovery_id: int
    signature: Bytes


def get_chain_id(v: int) -> Optional[int]:
    """
    Extract the chain id folded into `v`.

    Parameters
    ----------
    v :
        The `v` field of a signed transaction.

    Returns
    -------
    chain_id : `Optional[int]`
        The chain id, or `None` when `v` is 27 or 28 (no replay protection).
    """
    if v - PRE_155_V_OFFSET <= 1:
        return None

    parity = (v - EIP_155_V_OFFSET) % 2
    return (v - EIP_155_V_OFFSET - parity) // 2


def encode_signature(
    raw_signature: Bytes, chain_id: Optional[int] = None
) -> TransactionSignature:
    """
    Convert a recoverable signature into transaction signature fields.

    Parameters
    ----------
    raw_signature :
        65 byte recoverable signature in the primitive's layout.
    chain_id :
        Chain to bind the signature to. `None` or `0` for no replay
        protection.

    Returns
    -------
    signature : `TransactionSignature`
        The `v`, `r` and `s` fields.
    """
    ensure(
        len(raw_signature) == RECOVERABLE_SIGNATURE_LENGTH,
        InvalidSignatureError("bad signature length"),
    )

    recovery_id = raw_signature[64]
    ensure(recovery_id in (0, 1), InvalidSignatureError("bad recovery id"))

    r = reverse_bytes(bytearray(raw_signature[0:SCALAR_LENGTH]))
    s = reverse_bytes(
        bytearray(raw_signature[SCALAR_LENGTH : 2 * SCALAR_LENGTH])
    )

    if chain_id:
        v = recovery_id + chain_id * 2 + EIP_155_V_OFFSET
    else:
        v = recovery_id + PRE_155_V_OFFSET

    return TransactionSignature(
        v=v,
        r=strip_leading_zeros(bytes(r)),
        s=strip_leading_zeros(bytes(s)),
    )


def signature_to_fields(signature: TransactionSignature) -> Dict[str, Bytes]:
    """
    Byte encoded `v`, `r` and `s`, ready to be set on a `Transaction`.
    """
    return {
        "v": Uint(signature.v).to_be_bytes(),
        "r": signature.r,
        "s": signature.s,
    }


def _scalar_to_primitive(name: str, value: Bytes) -> bytearray:
    ensure(
        len(strip_leading_zeros(value)) <= SCALAR_LENGTH,
        InvalidSignatureError(f"{name} is wider than {SCALAR_LENGTH} bytes"),
    )
    padded = left_pad_zero_bytes(strip_leading_zeros(value), SCALAR_LENGTH)
    return reverse_bytes(bytearray(padded))


def decode_signature(tx: Transaction) -> RecoveryParameters:
    """
    Recover the chain id, recovery id and primitive signature from the
    signature fields of `tx`.

    Parameters
    ----------
    tx :
        A signed transaction.

    Returns
    -------
    parameters : `RecoveryParameters`
        Chain id (`None` without replay protection), recovery id, and the
        65 byte signature in the primitive's layout.
    """
    ensure(
        tx.v is not None and tx.r is not None and tx.s is not None,
        MalformedTransactionError("transaction is not signed"),
    )

    v = parse_fixed_width_int(tx.v)
    if v is None:
        raise InvalidSignatureError("bad v")

    chain_id = get_chain_id(v)
    if chain_id:
        recovery_id = v - (chain_id * 2 + EIP_155_V_OFFSET)
    else:
        recovery_id = v - PRE_155_V_OFFSET

    if recovery_id not in (0, 1) or (chain_id is not None and chain_id < 0):
        raise InvalidSignatureError("bad v")

    signature = bytearray(RECOVERABLE_SIGNATURE_LENGTH)
    signature[0:SCALAR_LENGTH] = _scalar_to_primitive(
        "r", tx.r  # type: ignore[arg-type]
    )
    signature[SCALAR_LENGTH : 2 * SCALAR_LENGTH] = _scalar_to_primitive(
        "s", tx.s  # type: ignore[arg-type]
    )
    signature[64] = recovery_id

    return RecoveryParameters(
        chain_id=chain_id,
        recovery_id=recovery_id,
        signature=bytes(signature),
    )
