"""
Ed25519 signing.

Produces Ed25519Signature values on the signer side. Verification lives on
the signature itself and never needs the private key.

KEY MANAGEMENT ASSUMPTIONS:
- Private keys are provided at initialization (from HSM, KMS, or secure file)
- generate() is for tests and local tooling only
"""

from __future__ import annotations

from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..crypto.address import Ed25519Address, address_from_ed25519_public_key
from .ed25519 import Ed25519Signature


class Ed25519Signer:
    """
    Ed25519 key pair that signs messages for one address.

    Usage:
        # From raw key bytes (32 bytes)
        signer = Ed25519Signer.from_private_bytes(key_bytes)

        # From PEM file
        signer = Ed25519Signer.from_pem_file("/path/to/key.pem")

        # Generate new key (for testing only)
        signer = Ed25519Signer.generate()

        sig = signer.sign(message)
        sig.valid(message, signer.address)
    """

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        self._address = address_from_ed25519_public_key(self._public_key_bytes)

    @property
    def public_key_bytes(self) -> bytes:
        """Raw 32-byte public key."""
        return self._public_key_bytes

    @property
    def address(self) -> Ed25519Address:
        """Address bound to this key pair."""
        return self._address

    def sign(self, message: bytes) -> Ed25519Signature:
        return Ed25519Signature(
            public_key=self._public_key_bytes,
            signature=self._private_key.sign(bytes(message)),
        )

    @classmethod
    def generate(cls) -> "Ed25519Signer":
        """
        Generate a new Ed25519 key pair.

        WARNING: Use only for testing.
        """
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_private_bytes(cls, key_bytes: bytes) -> "Ed25519Signer":
        """Create signer from raw 32-byte private key."""
        return cls(Ed25519PrivateKey.from_private_bytes(key_bytes))

    @classmethod
    def from_pem_file(cls, path: str, password: Optional[bytes] = None) -> "Ed25519Signer":
        """Load signer from PEM-encoded private key file."""
        with open(path, "rb") as f:
            private_key = serialization.load_pem_private_key(
                f.read(),
                password=password,
            )
        if not isinstance(private_key, Ed25519PrivateKey):
            raise TypeError(f"Expected Ed25519 private key, got {type(private_key)}")
        return cls(private_key)
