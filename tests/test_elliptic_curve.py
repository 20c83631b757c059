import pytest

from ethereum_legacy_signer.crypto.elliptic_curve import (
    SECP256K1N,
    private_key_to_address,
    public_key_to_address,
    secp256k1_recover,
    secp256k1_recoverable_to_plain,
    secp256k1_sign_recoverable,
    secp256k1_verify,
)
from ethereum_legacy_signer.crypto.hash import keccak256
from ethereum_legacy_signer.exceptions import (
    InvalidPrivateKeyError,
    InvalidSignatureError,
)

PRIVATE_KEY = b"\x46" * 32
MESSAGE_HASH = keccak256(b"legacy transaction")


def test_keccak256() -> None:
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_private_key_to_address() -> None:
    key = (1).to_bytes(32, "big")
    assert private_key_to_address(key).hex() == (
        "7e5f4552091a69125d5dfcb7b8c2659029395bdf"
    )


@pytest.mark.parametrize(
    "private_key", [b"\x00" * 32, SECP256K1N.to_be_bytes32()]
)
def test_invalid_private_key(private_key: bytes) -> None:
    with pytest.raises(InvalidPrivateKeyError):
        secp256k1_sign_recoverable(MESSAGE_HASH, private_key)
    with pytest.raises(InvalidPrivateKeyError):
        private_key_to_address(private_key)


def test_sign_recover_verify() -> None:
    signature = secp256k1_sign_recoverable(MESSAGE_HASH, PRIVATE_KEY)
    assert len(signature) == 65
    assert signature[64] in (0, 1)

    public_key = secp256k1_recover(MESSAGE_HASH, signature)
    assert public_key_to_address(public_key) == private_key_to_address(
        PRIVATE_KEY
    )

    plain = secp256k1_recoverable_to_plain(signature)
    assert plain == signature[0:64]
    assert secp256k1_verify(MESSAGE_HASH, plain, public_key)
    assert not secp256k1_verify(keccak256(b"other"), plain, public_key)


def test_signing_is_deterministic() -> None:
    assert secp256k1_sign_recoverable(
        MESSAGE_HASH, PRIVATE_KEY
    ) == secp256k1_sign_recoverable(MESSAGE_HASH, PRIVATE_KEY)


def test_signature_uses_little_endian_scalars() -> None:
    signature = secp256k1_sign_recoverable(MESSAGE_HASH, PRIVATE_KEY)
    s = int.from_bytes(signature[32:64], "little")
    assert 0 < s <= int(SECP256K1N) // 2


@pytest.mark.parametrize(
    "signature",
    [
        b"\x01" * 64,
        b"\x00" * 32 + b"\x01" * 32 + b"\x00",
        b"\x01" * 32 + b"\x00" * 32 + b"\x00",
        b"\xff" * 32 + b"\x01" * 32 + b"\x00",
        b"\x01" * 64 + b"\x02",
    ],
)
def test_recover_rejects_bad_signatures(signature: bytes) -> None:
    with pytest.raises(InvalidSignatureError):
        secp256k1_recover(MESSAGE_HASH, signature)


def test_verify_rejects_bad_signatures() -> None:
    signature = secp256k1_sign_recoverable(MESSAGE_HASH, PRIVATE_KEY)
    public_key = secp256k1_recover(MESSAGE_HASH, signature)

    assert not secp256k1_verify(MESSAGE_HASH, signature, public_key)
    assert not secp256k1_verify(MESSAGE_HASH, b"\x00" * 64, public_key)
    assert not secp256k1_verify(
        MESSAGE_HASH, signature[0:64], b"\x00" * 64
    )
