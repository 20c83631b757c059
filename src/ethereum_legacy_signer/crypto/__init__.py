"""
Cryptographic primitives used to sign and verify transactions.
"""
