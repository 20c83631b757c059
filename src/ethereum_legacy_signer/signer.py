"""
Transaction Signing
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Signs legacy transactions, optionally binding the signature to a chain id as
described in EIP-155. Signing never touches its input: the signature is
combined with the unsigned transaction into a new, frozen value.
"""
import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable

from .config import DEFAULT_CONFIG, SignerConfig
from .crypto.elliptic_curve import (
    PRIVATE_KEY_LENGTH,
    secp256k1_sign_recoverable,
)
from .crypto.hash import keccak256
from .exceptions import (
    ChainIdOutOfRangeError,
    InvalidInputTypeError,
    InvalidKeyLengthError,
)
from .signature import (
    TransactionSignature,
    encode_signature,
    signature_to_fields,
)
from .transactions import (
    Transaction,
    TransactionInput,
    encode_transaction,
    signing_hash,
    to_transaction,
)
from .utils.ensure import ensure
from .utils.hexadecimal import bytes_to_hex, parse_hex

logger = logging.getLogger(__name__)


@slotted_freezable
@dataclass
class SignedTransaction:
    """
    Result of signing: the wire encoding and the signed transaction.
    """

    raw: Bytes
    tx: Transaction


def apply_signature(
    tx: Transaction, signature: TransactionSignature
) -> Transaction:
    """
    Combine an unsigned transaction with its signature.

    Any signature fields already on `tx` are replaced, and the `hash` of the
    result is computed from its wire encoding.

    Parameters
    ----------
    tx :
        The transaction that was signed.
    signature :
        Its signature fields.

    Returns
    -------
    signed_tx : `Transaction`
        A new transaction carrying `v`, `r`, `s` and `hash`.
    """
    signed = replace(tx, hash=None, **signature_to_fields(signature))
    return replace(signed, hash=keccak256(encode_transaction(signed)))


def _validate_private_key(private_key: Union[Bytes, str]) -> Bytes:
    try:
        key = parse_hex(private_key)
    except ValueError as e:
        raise InvalidInputTypeError("private key is not valid hex") from e

    if not isinstance(key, bytes):
        raise InvalidInputTypeError(
            "private key must be bytes or a 0x prefixed hex string"
        )
    ensure(
        len(key) == PRIVATE_KEY_LENGTH,
        InvalidKeyLengthError(
            f"private key must be {PRIVATE_KEY_LENGTH} bytes, not {len(key)}"
        ),
    )
    return key


def _validate_chain_id(
    chain_id: Optional[int], config: SignerConfig
) -> None:
    if chain_id is None:
        return
    if isinstance(chain_id, bool) or not isinstance(chain_id, int):
        raise InvalidInputTypeError("chain id must be an integer")
    ensure(
        0 <= chain_id < config.max_chain_id,
        ChainIdOutOfRangeError(
            f"chain id {chain_id} is outside [0, {config.max_chain_id})"
        ),
    )


def sign(
    tx: TransactionInput,
    private_key: Union[Bytes, str],
    chain_id: Optional[int] = None,
    config: Optional[SignerConfig] = None,
) -> SignedTransaction:
    """
    Sign a legacy transaction.

    Parameters
    ----------
    tx :
        The transaction, in any shape accepted by `to_transaction`.
    private_key :
        32 byte secp256k1 secret key.
    chain_id :
        Chain to bind the signature to. `None` or `0` signs without replay
        protection.
    config :
        Limits to apply. Defaults to `DEFAULT_CONFIG`.

    Returns
    -------
    signed : `SignedTransaction`
        The RLP encoded signed transaction and the signed `Transaction`.
    """
    if tx is None:
        raise InvalidInputTypeError("transaction must not be None")

    if config is None:
        config = DEFAULT_CONFIG

    unsigned = to_transaction(tx)
    key = _validate_private_key(private_key)
    _validate_chain_id(chain_id, config)

    sig_hash = signing_hash(unsigned, chain_id)
    raw_signature = secp256k1_sign_recoverable(sig_hash, key)
    signature = encode_signature(raw_signature, chain_id)

    signed = apply_signature(unsigned, signature)
    raw = encode_transaction(signed)

    logger.debug(
        "signed transaction %s (chain id %s)",
        bytes_to_hex(signed.hash) if signed.hash is not None else None,
        chain_id or None,
    )

    return SignedTransaction(raw=raw, tx=signed)
