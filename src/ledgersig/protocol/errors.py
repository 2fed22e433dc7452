from typing import Any, Optional

from .enums import ErrorCode


def _render(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return str(value)


class SignatureError(Exception):
    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.code = code or ErrorCode.INTERNAL_ERROR


class DeserializationError(SignatureError):
    """Raised when bytes or JSON cannot be turned into a signature."""


class VerificationError(SignatureError):
    """Raised when a signature does not verify for a message and address."""


class UnknownSignatureTypeError(DeserializationError):
    def __init__(self, type_value: int):
        self.type_value = type_value
        super().__init__(
            f"unknown signature type: type byte {type_value}",
            ErrorCode.UNKNOWN_SIGNATURE_TYPE,
        )


class MinByteLengthError(DeserializationError):
    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"data must be at least {required} bytes long but is {actual}",
            ErrorCode.MIN_BYTE_LENGTH,
        )


class TypeMismatchError(DeserializationError):
    def __init__(self, expected: int, actual: Any):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"type denotation mismatch: expected {expected}, got {actual}",
            ErrorCode.TYPE_MISMATCH,
        )


class MalformedHexError(DeserializationError):
    def __init__(self, field: str, detail: str, expected_length: Optional[int] = None):
        self.field = field
        self.expected_length = expected_length
        super().__init__(
            f"unable to decode {field} from JSON: {detail}",
            ErrorCode.MALFORMED_HEX,
        )


class MalformedJSONError(DeserializationError):
    def __init__(self, detail: str):
        super().__init__(f"invalid signature JSON: {detail}", ErrorCode.MALFORMED_JSON)


class AddressKeyMismatchError(VerificationError):
    """Raised when a public key does not hash to the claimed address."""

    def __init__(self, address: Any, derived_address: Any):
        self.address = address
        self.derived_address = derived_address
        super().__init__(
            "public key and address do not correspond to each other (Ed25519): "
            f"address {_render(address)}, derived address {_render(derived_address)}",
            ErrorCode.ADDRESS_KEY_MISMATCH,
        )


class SignatureInvalidError(VerificationError):
    """Raised when the Ed25519 check over the message fails."""

    def __init__(self, address: Any, public_key: bytes, signature: bytes):
        self.address = address
        self.public_key = public_key
        self.signature = signature
        super().__init__(
            "signature is invalid (Ed25519): "
            f"address {address}, public key {public_key.hex()}, signature {signature.hex()}",
            ErrorCode.SIGNATURE_INVALID,
        )


class WOTSNotImplementedError(SignatureError, NotImplementedError):
    """WOTS reserves a type tag only; none of its operations exist yet."""

    def __init__(self, operation: str = ""):
        self.operation = operation
        message = "WOTS signatures are not implemented"
        if operation:
            message = f"{message} ({operation})"
        super().__init__(message, ErrorCode.NOT_IMPLEMENTED)
