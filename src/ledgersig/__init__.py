from .crypto.address import Ed25519Address, address_from_ed25519_public_key
from .protocol import (
    AddressKeyMismatchError,
    DeSerializationMode,
    DeserializationError,
    ErrorCode,
    MalformedHexError,
    MalformedJSONError,
    MinByteLengthError,
    SignatureError,
    SignatureInvalidError,
    SignatureType,
    TypeMismatchError,
    UnknownSignatureTypeError,
    VerificationError,
    WOTSNotImplementedError,
)
from .signature import (
    Ed25519Signature,
    Ed25519Signer,
    Signature,
    WOTSSignature,
    deserialize_signature,
    json_signature_selector,
    signature_from_json,
    signature_selector,
    verify_signature,
)

__all__ = [
    "Ed25519Address",
    "address_from_ed25519_public_key",
    "AddressKeyMismatchError",
    "DeSerializationMode",
    "DeserializationError",
    "ErrorCode",
    "MalformedHexError",
    "MalformedJSONError",
    "MinByteLengthError",
    "SignatureError",
    "SignatureInvalidError",
    "SignatureType",
    "TypeMismatchError",
    "UnknownSignatureTypeError",
    "VerificationError",
    "WOTSNotImplementedError",
    "Ed25519Signature",
    "Ed25519Signer",
    "Signature",
    "WOTSSignature",
    "deserialize_signature",
    "json_signature_selector",
    "signature_from_json",
    "signature_selector",
    "verify_signature",
]
