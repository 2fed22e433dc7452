from .address import (
    ED25519_ADDRESS_BYTES_LENGTH,
    Ed25519Address,
    address_from_ed25519_public_key,
    blake2b_256,
)

__all__ = [
    "ED25519_ADDRESS_BYTES_LENGTH",
    "Ed25519Address",
    "address_from_ed25519_public_key",
    "blake2b_256",
]
