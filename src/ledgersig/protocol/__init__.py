from .enums import DeSerializationMode, ErrorCode, SignatureType
from .errors import (
    AddressKeyMismatchError,
    DeserializationError,
    MalformedHexError,
    MalformedJSONError,
    MinByteLengthError,
    SignatureError,
    SignatureInvalidError,
    TypeMismatchError,
    UnknownSignatureTypeError,
    VerificationError,
    WOTSNotImplementedError,
)
from .serialization import (
    SMALL_TYPE_DENOTATION_BYTE_SIZE,
    JSONSerializable,
    Serializable,
    check_min_byte_length,
    check_type_byte,
)

__all__ = [
    "DeSerializationMode",
    "ErrorCode",
    "SignatureType",
    "AddressKeyMismatchError",
    "DeserializationError",
    "MalformedHexError",
    "MalformedJSONError",
    "MinByteLengthError",
    "SignatureError",
    "SignatureInvalidError",
    "TypeMismatchError",
    "UnknownSignatureTypeError",
    "VerificationError",
    "WOTSNotImplementedError",
    "SMALL_TYPE_DENOTATION_BYTE_SIZE",
    "JSONSerializable",
    "Serializable",
    "check_min_byte_length",
    "check_type_byte",
]
