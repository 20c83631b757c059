"""
Transaction Verification
^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Verifies the signature of legacy transactions and recovers their sender.

The v, r, and s values are the three parts that make up the signature of a
transaction. Together with the signing hash they are enough to recover the
sender's public key, and from it the sender's address. Whether the signing
hash covers the EIP-155 trailer is decided by the chain id folded into `v`.

Verification is a predicate: a signature that does not check out yields
`False`, while a transaction that cannot be interpreted at all raises.
"""
import logging
from typing import Optional, Tuple, Union

from ethereum_types.bytes import Bytes, Bytes20, Bytes64

from .crypto.elliptic_curve import (
    public_key_to_address,
    secp256k1_recover,
    secp256k1_recoverable_to_plain,
    secp256k1_verify,
)
from .crypto.hash import Hash32
from .exceptions import InvalidInputTypeError, InvalidSignatureError
from .signature import decode_signature
from .transactions import (
    ADDRESS_LENGTH,
    Transaction,
    TransactionInput,
    signing_hash,
    to_transaction,
    transaction_hash,
)
from .utils.hexadecimal import parse_hex

logger = logging.getLogger(__name__)


def _recover(tx: Transaction) -> Tuple[Hash32, Bytes, Bytes64]:
    parameters = decode_signature(tx)
    sig_hash = signing_hash(tx, parameters.chain_id)
    public_key = secp256k1_recover(sig_hash, parameters.signature)
    return sig_hash, parameters.signature, public_key


def recover_public_key(tx_input: TransactionInput) -> Bytes64:
    """
    Recover the public key that signed a transaction.

    Parameters
    ----------
    tx_input :
        A signed transaction, in any shape accepted by `to_transaction`.

    Returns
    -------
    public_key : `Bytes64`
        Uncompressed public key without the `0x04` prefix.
    """
    _, _, public_key = _recover(to_transaction(tx_input))
    return public_key


def recover_sender(tx_input: TransactionInput) -> Bytes20:
    """
    Extracts the sender address from a transaction.

    Parameters
    ----------
    tx_input :
        A signed transaction, in any shape accepted by `to_transaction`.

    Returns
    -------
    sender : `Bytes20`
        The address of the account that signed the transaction.
    """
    return public_key_to_address(recover_public_key(tx_input))


def _expected_sender(sender: Union[Bytes, str]) -> Bytes:
    try:
        address = parse_hex(sender)
    except ValueError as e:
        raise InvalidInputTypeError("sender is not valid hex") from e

    if not isinstance(address, bytes) or len(address) != ADDRESS_LENGTH:
        raise InvalidInputTypeError(
            f"sender must be a {ADDRESS_LENGTH} byte address"
        )
    return address


def verify(
    tx_input: TransactionInput, sender: Optional[Union[Bytes, str]] = None
) -> bool:
    """
    Verify the signature of a transaction.

    Parameters
    ----------
    tx_input :
        A signed transaction, in any shape accepted by `to_transaction`.
    sender :
        If given, the address the transaction must have been signed by.

    Returns
    -------
    valid : `bool`
        True if the signature is valid, covers the transaction's fields
        (including its `hash`, when it carries one) and, when `sender` is
        given, was made by that account.

    Raises
    ------
    MalformedTransactionError :
        If the transaction is not signed.
    OversizedIntegerError :
        If `v` is wider than 4 bytes.
    """
    tx = to_transaction(tx_input)
    expected = _expected_sender(sender) if sender is not None else None

    try:
        parameters = decode_signature(tx)
    except InvalidSignatureError as e:
        logger.debug("cannot decode signature: %s", e)
        return False

    if tx.hash is not None and tx.hash != transaction_hash(tx):
        logger.debug("transaction hash does not match its fields")
        return False

    sig_hash = signing_hash(tx, parameters.chain_id)
    signature = parameters.signature
    try:
        public_key = secp256k1_recover(sig_hash, signature)
    except InvalidSignatureError as e:
        logger.debug("cannot recover signer: %s", e)
        return False

    plain_signature = secp256k1_recoverable_to_plain(signature)
    if not secp256k1_verify(sig_hash, plain_signature, public_key):
        logger.debug("signature does not verify against recovered key")
        return False

    if expected is not None and public_key_to_address(public_key) != expected:
        logger.debug("transaction was not signed by the expected sender")
        return False

    return True
