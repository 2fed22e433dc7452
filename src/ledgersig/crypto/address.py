"""
Ed25519 addresses.

An Ed25519 address is the BLAKE2b-256 hash of the account's public key. This
module owns that binding; other address kinds are defined elsewhere.
"""

from __future__ import annotations

import binascii
import hashlib
from dataclasses import dataclass

ED25519_ADDRESS_BYTES_LENGTH = 32


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


@dataclass(frozen=True)
class Ed25519Address:
    """
    Fixed-size opaque address derived from an Ed25519 public key.

    Attributes:
        digest: The 32 raw address bytes
    """
    digest: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.digest, (bytes, bytearray)):
            raise TypeError(f"Ed25519 address must be bytes, got {type(self.digest).__name__}")
        if len(self.digest) != ED25519_ADDRESS_BYTES_LENGTH:
            raise ValueError(
                f"Ed25519 address must be {ED25519_ADDRESS_BYTES_LENGTH} bytes, got {len(self.digest)}"
            )
        object.__setattr__(self, "digest", bytes(self.digest))

    def __bytes__(self) -> bytes:
        return self.digest

    def __str__(self) -> str:
        return self.digest.hex()

    def hex(self) -> str:
        return self.digest.hex()

    @classmethod
    def from_hex(cls, value: str) -> "Ed25519Address":
        try:
            return cls(binascii.unhexlify(value))
        except binascii.Error as e:
            raise ValueError(f"invalid Ed25519 address hex: {e}") from e


def address_from_ed25519_public_key(public_key: bytes) -> Ed25519Address:
    """Derive the address bound to an Ed25519 public key."""
    return Ed25519Address(blake2b_256(bytes(public_key)))
