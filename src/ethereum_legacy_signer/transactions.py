"""
Legacy Transactions
^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Transactions are atomic units of work created externally to Ethereum and
submitted to be executed. A legacy transaction is the RLP encoding of

    ``[nonce, gasPrice, gas, to, value, data, v, r, s]``

where the last three fields hold the signature. Before it is signed only the
first six are present.

This module holds the `Transaction` value, normalizes the shapes callers
supply into it, and builds the ordered field list that gets RLP encoded and
hashed, either as the signing pre-image or as the wire encoding. The field
order and which fields are present are what a signature actually commits
to.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from ethereum_rlp import rlp
from ethereum_rlp.exceptions import DecodingError
from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import Uint

from .crypto.hash import Hash32, keccak256
from .exceptions import InvalidInputTypeError, MalformedTransactionError
from .utils.byte import strip_leading_zeros
from .utils.ensure import ensure
from .utils.hexadecimal import hex_to_bytes, parse_hex

ADDRESS_LENGTH = 20
HASH_LENGTH = 32
UNSIGNED_FIELD_COUNT = 6
SIGNED_FIELD_COUNT = 9


@slotted_freezable
@dataclass
class Transaction:
    """
    Legacy transaction.

    Every field is a byte string, or `None` when absent. Integer fields hold
    whatever big endian bytes the caller supplied; they are only reduced to
    their canonical form when the transaction is encoded.
    """

    nonce: Optional[Bytes]
    gas_price: Optional[Bytes]
    gas: Optional[Bytes]
    to: Optional[Bytes]
    value: Optional[Bytes]
    data: Optional[Bytes]
    v: Optional[Bytes]
    r: Optional[Bytes]
    s: Optional[Bytes]
    hash: Optional[Hash32]

    def is_signed(self) -> bool:
        """
        Whether the transaction carries a signature.
        """
        return self.v is not None


TransactionInput = Union[Transaction, Mapping[str, Any], Bytes, bytearray, str]

# Accepted mapping keys and the `Transaction` field each one fills.
FIELD_NAMES: Dict[str, str] = {
    "nonce": "nonce",
    "gasPrice": "gas_price",
    "gas_price": "gas_price",
    "gas": "gas",
    "gasLimit": "gas",
    "gas_limit": "gas",
    "to": "to",
    "value": "value",
    "data": "data",
    "v": "v",
    "r": "r",
    "s": "s",
    "hash": "hash",
}

INTEGER_FIELDS = frozenset(
    ("nonce", "gas_price", "gas", "value", "v", "r", "s")
)


def _field_to_bytes(key: str, value: Any) -> Optional[Bytes]:
    if value is None:
        return None

    name = FIELD_NAMES[key]

    if isinstance(value, int) and not isinstance(value, bool):
        ensure(
            name in INTEGER_FIELDS,
            InvalidInputTypeError(f"{key} cannot be given as an integer"),
        )
        try:
            return Uint(value).to_be_bytes()
        except OverflowError as e:
            raise MalformedTransactionError(
                f"{key} must not be negative"
            ) from e

    try:
        parsed = parse_hex(value)
    except ValueError as e:
        raise InvalidInputTypeError(f"{key} is not valid hex") from e

    if not isinstance(parsed, bytes):
        raise InvalidInputTypeError(
            f"{key} must be bytes, an integer or a 0x prefixed hex string, "
            f"not {type(value).__name__}"
        )
    return parsed


def _same_field_value(name: str, left: Bytes, right: Bytes) -> bool:
    if name in INTEGER_FIELDS:
        return strip_leading_zeros(left) == strip_leading_zeros(right)
    return left == right


def _validate_shape(tx: Transaction) -> None:
    if tx.to:
        ensure(
            len(tx.to) == ADDRESS_LENGTH,
            MalformedTransactionError(
                f"to must be {ADDRESS_LENGTH} bytes, not {len(tx.to)}"
            ),
        )

    present = [field is not None for field in (tx.v, tx.r, tx.s)]
    ensure(
        all(present) or not any(present),
        MalformedTransactionError(
            "transaction must carry all of v, r and s, or none of them"
        ),
    )


def transaction_from_fields(fields: Mapping[str, Any]) -> Transaction:
    """
    Build a `Transaction` from a mapping of field names to values.

    Keys are the wire names (`nonce`, `gasPrice`, `gas` or `gasLimit`, `to`,
    `value`, `data`, `v`, `r`, `s`) plus `hash`. Values may be bytes,
    0x prefixed hex strings or, for integer fields, non-negative integers.

    Parameters
    ----------
    fields :
        The transaction fields.

    Returns
    -------
    tx : `Transaction`
        The normalized transaction.
    """
    values: Dict[str, Optional[Bytes]] = {
        name: None for name in FIELD_NAMES.values()
    }

    for key, value in fields.items():
        if key not in FIELD_NAMES:
            raise MalformedTransactionError(
                f"unknown transaction field {key!r}"
            )
        name = FIELD_NAMES[key]
        parsed = _field_to_bytes(key, value)
        if parsed is None:
            continue

        previous = values[name]
        if previous is not None and not _same_field_value(
            name, previous, parsed
        ):
            raise MalformedTransactionError(
                f"conflicting values given for {name}"
            )
        values[name] = parsed

    tx_hash = values.pop("hash")
    if tx_hash is not None:
        ensure(
            len(tx_hash) == HASH_LENGTH,
            MalformedTransactionError(f"hash must be {HASH_LENGTH} bytes"),
        )
        tx_hash = Hash32(tx_hash)

    tx = Transaction(hash=tx_hash, **values)
    _validate_shape(tx)
    return tx


def decode_transaction(raw: Union[Bytes, bytearray, str]) -> Transaction:
    """
    Decode a legacy transaction from its RLP wire encoding.

    Both the unsigned (six item) and signed (nine item) encodings are
    accepted. A nine item encoding whose signature items are all empty is
    read as unsigned.

    Parameters
    ----------
    raw :
        Encoded transaction, as bytes or as a hex string (0x optional).

    Returns
    -------
    tx : `Transaction`
        The decoded transaction.
    """
    if isinstance(raw, str):
        try:
            raw = hex_to_bytes(raw)
        except ValueError as e:
            raise MalformedTransactionError(
                "transaction is not valid hex"
            ) from e

    ensure(len(raw) > 0, MalformedTransactionError("transaction is empty"))

    try:
        decoded = rlp.decode(bytes(raw))
    except DecodingError as e:
        raise MalformedTransactionError("transaction is not valid RLP") from e

    if isinstance(decoded, bytes) or len(decoded) not in (
        UNSIGNED_FIELD_COUNT,
        SIGNED_FIELD_COUNT,
    ):
        raise MalformedTransactionError(
            f"expected a list of {UNSIGNED_FIELD_COUNT} or "
            f"{SIGNED_FIELD_COUNT} items"
        )

    for item in decoded:
        ensure(
            isinstance(item, bytes),
            MalformedTransactionError("transaction fields must be strings"),
        )

    nonce, gas_price, gas, to, value, data = decoded[:UNSIGNED_FIELD_COUNT]

    v: Optional[Bytes] = None
    r: Optional[Bytes] = None
    s: Optional[Bytes] = None
    if len(decoded) == SIGNED_FIELD_COUNT and any(
        decoded[UNSIGNED_FIELD_COUNT:]
    ):
        v, r, s = decoded[UNSIGNED_FIELD_COUNT:]

    tx = Transaction(
        nonce=nonce,
        gas_price=gas_price,
        gas=gas,
        to=to,
        value=value,
        data=data,
        v=v,
        r=r,
        s=s,
        hash=None,
    )
    _validate_shape(tx)
    return tx


def to_transaction(tx_input: TransactionInput) -> Transaction:
    """
    Normalize any supported transaction shape into a `Transaction`.

    Parameters
    ----------
    tx_input :
        A `Transaction`, a mapping of fields, the RLP encoded bytes, or the
        hex string of the RLP encoding.

    Returns
    -------
    tx : `Transaction`
        The normalized transaction.
    """
    if isinstance(tx_input, Transaction):
        _validate_shape(tx_input)
        return tx_input
    if isinstance(tx_input, Mapping):
        return transaction_from_fields(tx_input)
    if isinstance(tx_input, (bytes, bytearray, str)):
        return decode_transaction(tx_input)

    raise InvalidInputTypeError(
        "transaction must be given as bytes, a hex string, a mapping of "
        f"fields or a Transaction, not {type(tx_input).__name__}"
    )


def build_digest_items(
    tx: Transaction, chain_id: Optional[int] = None
) -> List[Bytes]:
    """
    Build the ordered list of fields that is RLP encoded and hashed.

    The six base fields always come first. With a non-zero `chain_id` the
    EIP-155 trailer ``[chain_id, "", ""]`` follows; otherwise whichever of
    `v`, `r` and `s` the transaction carries are appended as they are.

    Parameters
    ----------
    tx :
        Transaction of interest.
    chain_id :
        Chain to bind the signature to. `None` and `0` both mean no replay
        protection.

    Returns
    -------
    items : `List[Bytes]`
        The fields in encoding order.
    """
    ensure(
        tx.nonce is not None,
        MalformedTransactionError("transaction has no nonce"),
    )
    ensure(
        tx.gas_price is not None,
        MalformedTransactionError("transaction has no gasPrice"),
    )
    ensure(
        tx.gas is not None,
        MalformedTransactionError("transaction has no gas (or gasLimit)"),
    )
    ensure(
        tx.data is not None or tx.to is not None,
        MalformedTransactionError("transaction needs at least data or to"),
    )

    items: List[Bytes] = [
        strip_leading_zeros(tx.nonce),  # type: ignore[arg-type]
        strip_leading_zeros(tx.gas_price),  # type: ignore[arg-type]
        strip_leading_zeros(tx.gas),  # type: ignore[arg-type]
        tx.to if tx.to is not None else b"",
        strip_leading_zeros(tx.value) if tx.value is not None else b"",
        tx.data if tx.data is not None else b"",
    ]

    if chain_id:
        items.append(Uint(chain_id).to_be_bytes())
        items.append(b"")
        items.append(b"")
    else:
        if tx.v is not None:
            items.append(strip_leading_zeros(tx.v))
        if tx.r is not None:
            items.append(tx.r)
        if tx.s is not None:
            items.append(tx.s)

    return items


def signing_hash(tx: Transaction, chain_id: Optional[int] = None) -> Hash32:
    """
    Compute the hash that is signed for `tx`.

    Without a chain id only the six base fields are hashed (the pre EIP-155
    scheme), even if `tx` already carries a signature.

    Parameters
    ----------
    tx :
        Transaction of interest.
    chain_id :
        Chain the signature is bound to, if any.

    Returns
    -------
    hash : `Hash32`
        Hash of the signing pre-image.
    """
    items = build_digest_items(tx, chain_id)
    if not chain_id:
        items = items[:UNSIGNED_FIELD_COUNT]
    return keccak256(rlp.encode(items))


def encode_transaction(tx: Transaction) -> Bytes:
    """
    Encode `tx` in the legacy wire format.
    """
    return rlp.encode(build_digest_items(tx))


def transaction_hash(tx: Transaction) -> Hash32:
    """
    Compute the hash identifying `tx`, i.e. the hash of its wire encoding.
    """
    return keccak256(encode_transaction(tx))
