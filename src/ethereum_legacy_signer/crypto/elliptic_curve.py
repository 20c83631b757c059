"""
Elliptic Curves
^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

secp256k1 signing, public key recovery and verification, backed by
libsecp256k1 through `coincurve`.

Recoverable signatures cross this module's boundary in libsecp256k1's
in-memory layout: `r` as a 32 byte little-endian scalar, `s` as a 32 byte
little-endian scalar, then the one byte recovery id. Plain signatures are the
same without the recovery id. Translating to the big-endian transaction
encoding is the caller's job.

coincurve's `GLOBAL_CONTEXT` is immutable once created, so every call shares
it.
"""

from typing import Tuple

import coincurve
from Crypto.Util.asn1 import DerSequence
from ethereum_types.bytes import Bytes, Bytes20, Bytes64
from ethereum_types.numeric import U256

from ..exceptions import InvalidPrivateKeyError, InvalidSignatureError
from .hash import Hash32, keccak256

SECP256K1B = U256(7)
SECP256K1P = U256(
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
)
SECP256K1N = U256(
    0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
)

PRIVATE_KEY_LENGTH = 32
RECOVERABLE_SIGNATURE_LENGTH = 65
SIGNATURE_LENGTH = 64


def _split_signature(signature: Bytes) -> Tuple[U256, U256]:
    r = U256.from_le_bytes(signature[0:32])
    s = U256.from_le_bytes(signature[32:64])
    return r, s


def secp256k1_sign_recoverable(msg_hash: Hash32, private_key: Bytes) -> Bytes:
    """
    Signs a message hash, producing a recoverable signature.

    Parameters
    ----------
    msg_hash :
        32 byte hash to sign. It is signed as is, without hashing again.
    private_key :
        32 byte secret key.

    Returns
    -------
    signature : `Bytes`
        65 byte recoverable signature: little-endian `r`, little-endian `s`
        and the recovery id (0 or 1).
    """
    try:
        key = coincurve.PrivateKey(bytes(private_key))
    except ValueError as e:
        raise InvalidPrivateKeyError(str(e)) from e

    signature = key.sign_recoverable(bytes(msg_hash), hasher=None)

    return (
        U256.from_be_bytes(signature[0:32]).to_le_bytes32()
        + U256.from_be_bytes(signature[32:64]).to_le_bytes32()
        + signature[64:65]
    )


def secp256k1_recover(msg_hash: Hash32, signature: Bytes) -> Bytes64:
    """
    Recovers the public key from a given signature.

    Parameters
    ----------
    msg_hash :
        Hash of the message being recovered.
    signature :
        65 byte recoverable signature in libsecp256k1 layout.

    Returns
    -------
    public_key : `Bytes64`
        Recovered public key, uncompressed and without the `0x04` prefix.
    """
    if len(signature) != RECOVERABLE_SIGNATURE_LENGTH:
        raise InvalidSignatureError("bad signature length")

    r, s = _split_signature(signature)
    recovery_id = signature[64]

    if U256(0) >= r or r >= SECP256K1N:
        raise InvalidSignatureError("bad r")
    if U256(0) >= s or s >= SECP256K1N:
        raise InvalidSignatureError("bad s")
    if recovery_id not in (0, 1):
        raise InvalidSignatureError("bad recovery id")

    is_square = pow(
        pow(r, U256(3), SECP256K1P) + SECP256K1B,
        (SECP256K1P - U256(1)) // U256(2),
        SECP256K1P,
    )

    if is_square != 1:
        raise InvalidSignatureError(
            "r is not the x-coordinate of a point on the secp256k1 curve"
        )

    compact = r.to_be_bytes32() + s.to_be_bytes32() + bytes([recovery_id])

    # A point at infinity makes recovery fail with a ValueError.
    try:
        public_key = coincurve.PublicKey.from_signature_and_message(
            compact, bytes(msg_hash), hasher=None
        )
    except ValueError as e:
        raise InvalidSignatureError from e

    return Bytes64(public_key.format(compressed=False)[1:])


def secp256k1_recoverable_to_plain(signature: Bytes) -> Bytes64:
    """
    Drops the recovery id from a recoverable signature, keeping the layout of
    `r` and `s`.
    """
    if len(signature) != RECOVERABLE_SIGNATURE_LENGTH:
        raise InvalidSignatureError("bad signature length")
    return Bytes64(signature[0:SIGNATURE_LENGTH])


def secp256k1_verify(
    msg_hash: Hash32, signature: Bytes, public_key: Bytes
) -> bool:
    """
    Verifies a plain (non-recoverable) signature against a public key.

    Signatures with `s` in the upper half of the curve order are rejected,
    as libsecp256k1 does.

    Parameters
    ----------
    msg_hash :
        Hash of the signed message.
    signature :
        64 byte signature in libsecp256k1 layout.
    public_key :
        64 byte uncompressed public key without the `0x04` prefix.

    Returns
    -------
    valid : `bool`
        True if the signature was made by `public_key` over `msg_hash`.
    """
    if len(signature) != SIGNATURE_LENGTH:
        return False

    r, s = _split_signature(signature)
    if U256(0) >= r or r >= SECP256K1N:
        return False
    if U256(0) >= s or s >= SECP256K1N:
        return False

    der = DerSequence([int(r), int(s)]).encode()

    try:
        key = coincurve.PublicKey(b"\x04" + bytes(public_key))
        return key.verify(der, bytes(msg_hash), hasher=None)
    except ValueError:
        return False


def public_key_to_address(public_key: Bytes) -> Bytes20:
    """
    Derives the account address of a 64 byte uncompressed public key.
    """
    return Bytes20(keccak256(public_key)[12:32])


def private_key_to_address(private_key: Bytes) -> Bytes20:
    """
    Derives the account address controlled by `private_key`.
    """
    try:
        key = coincurve.PrivateKey(bytes(private_key))
    except ValueError as e:
        raise InvalidPrivateKeyError(str(e)) from e
    return public_key_to_address(key.public_key.format(compressed=False)[1:])
