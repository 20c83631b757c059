"""
Error types raised while signing and verifying legacy transactions.
"""


class LegacySignerException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown during normal
    operation.
    """


class MalformedTransactionError(LegacySignerException):
    """
    Thrown when a transaction is missing a required field, has a field of the
    wrong shape, or cannot be decoded from its wire encoding.
    """


class InvalidInputTypeError(LegacySignerException):
    """
    Thrown when a transaction (or one of its fields) is given as a type that
    cannot be interpreted as bytes.
    """


class InvalidKeyLengthError(LegacySignerException):
    """
    Thrown when a private key is not exactly 32 bytes long.
    """


class InvalidPrivateKeyError(LegacySignerException):
    """
    Thrown when a 32 byte private key is not a valid secp256k1 scalar.
    """


class ChainIdOutOfRangeError(LegacySignerException):
    """
    Thrown when a chain id is outside the range accepted by the signer.
    """


class OversizedIntegerError(LegacySignerException):
    """
    Thrown when a fixed width integer field is wider than 4 bytes.
    """


class InvalidSignatureError(LegacySignerException):
    """
    Thrown when a transaction has an invalid signature.

    Verification turns this into a negative result rather than letting it
    escape.
    """
