"""
Legacy Transaction Signer
^^^^^^^^^^^^^^^^^^^^^^^^^

Signs and verifies legacy (pre-typed) Ethereum transactions, with or without
the chain id replay protection introduced by EIP-155.

A transaction can be given as a mapping of fields (bytes, 0x prefixed hex
strings or integers), as its RLP encoding, as the hex string of that
encoding, or as a `Transaction`:

    signed = sign({"nonce": "0x00", ...}, private_key, chain_id=1)
    assert verify(signed.raw)
"""
from .config import DEFAULT_CONFIG, SignerConfig, load_config
from .exceptions import (
    ChainIdOutOfRangeError,
    InvalidInputTypeError,
    InvalidKeyLengthError,
    InvalidPrivateKeyError,
    InvalidSignatureError,
    LegacySignerException,
    MalformedTransactionError,
    OversizedIntegerError,
)
from .signature import decode_signature, encode_signature, get_chain_id
from .signer import SignedTransaction, apply_signature, sign
from .transactions import (
    Transaction,
    build_digest_items,
    decode_transaction,
    encode_transaction,
    signing_hash,
    to_transaction,
    transaction_hash,
)
from .verifier import recover_public_key, recover_sender, verify

__version__ = "0.1.0"

__all__ = (
    "ChainIdOutOfRangeError",
    "DEFAULT_CONFIG",
    "InvalidInputTypeError",
    "InvalidKeyLengthError",
    "InvalidPrivateKeyError",
    "InvalidSignatureError",
    "LegacySignerException",
    "MalformedTransactionError",
    "OversizedIntegerError",
    "SignedTransaction",
    "SignerConfig",
    "Transaction",
    "apply_signature",
    "build_digest_items",
    "decode_signature",
    "decode_transaction",
    "encode_signature",
    "encode_transaction",
    "get_chain_id",
    "load_config",
    "recover_public_key",
    "recover_sender",
    "sign",
    "signing_hash",
    "to_transaction",
    "transaction_hash",
    "verify",
)
