from enum import Enum, IntEnum, IntFlag


class ErrorCode(str, Enum):
    UNKNOWN_SIGNATURE_TYPE = "unknown_signature_type"
    MIN_BYTE_LENGTH = "min_byte_length"
    TYPE_MISMATCH = "type_mismatch"
    ADDRESS_KEY_MISMATCH = "address_key_mismatch"
    SIGNATURE_INVALID = "signature_invalid"
    NOT_IMPLEMENTED = "not_implemented"
    MALFORMED_HEX = "malformed_hex"
    MALFORMED_JSON = "malformed_json"
    INTERNAL_ERROR = "internal_error"


class SignatureType(IntEnum):
    """
    Type tag stored as the first byte of every serialized signature.

    The tag space is closed: a value not listed here is never decoded.
    """

    WOTS = 0
    ED25519 = 1


class DeSerializationMode(IntFlag):
    """
    Flags controlling (de)serialization.

    PERFORM_VALIDATION enables the length and type byte checks. Callers that
    decode untrusted input must set it.
    """

    NONE = 0
    PERFORM_VALIDATION = 1

    def has_mode(self, mode: "DeSerializationMode") -> bool:
        return (self & mode) == mode

    @classmethod
    def coerce(cls, value: "DeSerializationMode | bool | int") -> "DeSerializationMode":
        if isinstance(value, bool):
            return cls.PERFORM_VALIDATION if value else cls.NONE
        return cls(value)
