r"""
Ed25519 key derivation.

Derives account public keys from 32-byte secret seeds using the
cryptography package.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
)
from cryptography.hazmat.primitives import serialization

from ..runtime.errors import InvalidKeyError

KEY_SIZE = 32


class Ed25519PrivateKey:
    """
    Ed25519 private key.

    Holds the 32-byte seed and the public key derived from it.
    """

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from 32-byte private key seed.

        Args:
            private_key_bytes: 32-byte Ed25519 private key seed

        Raises:
            InvalidKeyError: If key is invalid
        """
        if len(private_key_bytes) != KEY_SIZE:
            raise InvalidKeyError(f"Ed25519 private key must be {KEY_SIZE} bytes, got {len(private_key_bytes)}")

        self._key_bytes = bytes(private_key_bytes)
        try:
            crypto_key = CryptoEd25519PrivateKey.from_private_bytes(self._key_bytes)
        except ValueError as e:
            raise InvalidKeyError(f"Invalid Ed25519 private key: {e}", cause=e)
        self._public_key_bytes = crypto_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )

    @classmethod
    def generate(cls) -> Ed25519PrivateKey:
        """Generate a new random Ed25519 private key."""
        crypto_key = CryptoEd25519PrivateKey.generate()
        private_bytes = crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )
        return cls(private_bytes)

    def to_bytes(self) -> bytes:
        """Get the 32-byte private key seed."""
        return self._key_bytes

    def public_key_bytes(self) -> bytes:
        """Get the 32-byte public key."""
        return self._public_key_bytes

    def __repr__(self) -> str:
        return f"Ed25519PrivateKey(public={self._public_key_bytes.hex()})"
