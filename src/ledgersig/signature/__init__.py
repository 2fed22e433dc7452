from .base import AddressLike, Signature
from .ed25519 import (
    ED25519_PUBLIC_KEY_SIZE,
    ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE,
    ED25519_SIGNATURE_SIZE,
    Ed25519Signature,
    JSONEd25519Signature,
)
from .registry import (
    SIGNATURE_REGISTRY,
    RegistryEntry,
    deserialize_signature,
    json_signature_selector,
    registered_types,
    signature_from_json,
    signature_selector,
)
from .signing import Ed25519Signer
from .verification import is_valid_signature, verify_signature
from .wots import JSONWOTSSignature, WOTSSignature

__all__ = [
    "AddressLike",
    "Signature",
    "ED25519_PUBLIC_KEY_SIZE",
    "ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE",
    "ED25519_SIGNATURE_SIZE",
    "Ed25519Signature",
    "JSONEd25519Signature",
    "SIGNATURE_REGISTRY",
    "RegistryEntry",
    "deserialize_signature",
    "json_signature_selector",
    "registered_types",
    "signature_from_json",
    "signature_selector",
    "Ed25519Signer",
    "is_valid_signature",
    "verify_signature",
    "JSONWOTSSignature",
    "WOTSSignature",
]
