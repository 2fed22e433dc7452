"""
Ed25519 signatures.

Binary layout (big-endian, no padding):

    offset  size  field
    0       1     type byte (SignatureType.ED25519)
    1       32    public key
    33      64    signature

JSON layout:

    {"type": 1, "publicKey": "<64 hex chars>", "signature": "<128 hex chars>"}
"""

from __future__ import annotations

import binascii
import struct
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from ..crypto.address import (
    ED25519_ADDRESS_BYTES_LENGTH,
    Ed25519Address,
    address_from_ed25519_public_key,
)
from ..protocol.enums import DeSerializationMode, SignatureType
from ..protocol.errors import (
    AddressKeyMismatchError,
    MalformedHexError,
    MalformedJSONError,
    SignatureInvalidError,
    TypeMismatchError,
)
from ..protocol.serialization import (
    SMALL_TYPE_DENOTATION_BYTE_SIZE,
    check_min_byte_length,
    check_type_byte,
)
from ..utils.json import load_json_object
from ..utils.logging import get_logger
from .base import AddressLike, Signature

logger = get_logger(__name__)

ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# Type byte + public key + signature.
ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE = (
    SMALL_TYPE_DENOTATION_BYTE_SIZE + ED25519_PUBLIC_KEY_SIZE + ED25519_SIGNATURE_SIZE
)

_LAYOUT = struct.Struct(f">B{ED25519_PUBLIC_KEY_SIZE}s{ED25519_SIGNATURE_SIZE}s")


def _fixed_bytes(name: str, value: Any, size: int) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value


def _decode_hex_field(field: str, value: Any, size: int) -> bytes:
    if not isinstance(value, str):
        raise MalformedHexError(field, f"expected a hex string, got {type(value).__name__}", size)
    try:
        raw = binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise MalformedHexError(field, str(e), size) from e
    if len(raw) != size:
        raise MalformedHexError(field, f"expected {size} bytes, got {len(raw)}", size)
    return raw


def _as_address(address: AddressLike) -> Optional[Ed25519Address]:
    """Return the claimed address, or None when it cannot be an Ed25519 address."""
    if isinstance(address, Ed25519Address):
        return address
    raw = bytes(address)
    if len(raw) != ED25519_ADDRESS_BYTES_LENGTH:
        return None
    return Ed25519Address(raw)


@dataclass
class Ed25519Signature(Signature):
    """
    An Ed25519 signature together with the public key that verifies it.

    Attributes:
        public_key: Raw Ed25519 public key (32 bytes)
        signature: Raw Ed25519 signature (64 bytes)
    """

    SIGNATURE_TYPE: ClassVar[SignatureType] = SignatureType.ED25519

    public_key: bytes = bytes(ED25519_PUBLIC_KEY_SIZE)
    signature: bytes = bytes(ED25519_SIGNATURE_SIZE)

    def __post_init__(self) -> None:
        self.public_key = _fixed_bytes("public_key", self.public_key, ED25519_PUBLIC_KEY_SIZE)
        self.signature = _fixed_bytes("signature", self.signature, ED25519_SIGNATURE_SIZE)

    # -----------------------------------------------------------------------
    # Binary codec
    # -----------------------------------------------------------------------

    def deserialize(self, data: bytes, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> int:
        """
        Read the signature from the start of data.

        With PERFORM_VALIDATION the buffer length and type byte are checked
        first. Without it the caller guarantees a well-formed buffer; a short
        buffer then surfaces as struct.error.

        Returns:
            ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE. Trailing bytes are ignored.
        """
        mode = DeSerializationMode.coerce(mode)
        if mode.has_mode(DeSerializationMode.PERFORM_VALIDATION):
            check_min_byte_length(ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE, len(data))
            check_type_byte(data, SignatureType.ED25519)

        # type byte is skipped
        _, public_key, signature = _LAYOUT.unpack_from(data)
        self.public_key = public_key
        self.signature = signature
        logger.debug("Deserialized Ed25519 signature (public key %s)", public_key.hex())
        return ED25519_SIGNATURE_SERIALIZED_BYTES_SIZE

    def serialize(self, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> bytes:
        return _LAYOUT.pack(SignatureType.ED25519, self.public_key, self.signature)

    # -----------------------------------------------------------------------
    # JSON codec
    # -----------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return JSONEd25519Signature.from_signature(self).to_dict()

    @classmethod
    def from_json(cls, data: Union[str, bytes, Dict[str, Any]]) -> "Ed25519Signature":
        return JSONEd25519Signature.from_dict(load_json_object(data)).to_signature()

    # -----------------------------------------------------------------------
    # Verification
    # -----------------------------------------------------------------------

    def valid(self, message: bytes, address: AddressLike) -> None:
        """
        Check that this signature is valid for message under address.

        The address binding is checked before the signature itself, so a key
        that does not belong to the address is reported as such rather than
        as a bad signature.

        Raises:
            AddressKeyMismatchError: BLAKE2b-256(public_key) != address
            SignatureInvalidError: Ed25519 verification rejected the signature
        """
        claimed = _as_address(address)
        derived = address_from_ed25519_public_key(self.public_key)
        if claimed is None:
            # wrong length, never equal to a 32-byte hash
            raise AddressKeyMismatchError(bytes(address), derived)
        if derived != claimed:
            raise AddressKeyMismatchError(claimed, derived)
        address = claimed

        try:
            Ed25519PublicKey.from_public_bytes(self.public_key).verify(self.signature, bytes(message))
        except (InvalidSignature, ValueError) as e:
            raise SignatureInvalidError(address, self.public_key, self.signature) from e


@dataclass
class JSONEd25519Signature:
    """JSON representation of an Ed25519Signature."""

    type: int = int(SignatureType.ED25519)
    publicKey: str = ""
    signature: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "publicKey": self.publicKey,
            "signature": self.signature,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JSONEd25519Signature":
        try:
            ty = data["type"]
            public_key = data["publicKey"]
            signature = data["signature"]
        except KeyError as e:
            raise MalformedJSONError(f"missing field {e.args[0]!r}") from e
        if isinstance(ty, bool) or not isinstance(ty, int):
            raise MalformedJSONError(f"type must be an integer, got {ty!r}")
        return cls(type=ty, publicKey=public_key, signature=signature)

    @classmethod
    def from_signature(cls, sig: Ed25519Signature) -> "JSONEd25519Signature":
        return cls(
            type=int(SignatureType.ED25519),
            publicKey=sig.public_key.hex(),
            signature=sig.signature.hex(),
        )

    def to_signature(self) -> Ed25519Signature:
        if self.type != SignatureType.ED25519:
            raise TypeMismatchError(int(SignatureType.ED25519), self.type)
        return Ed25519Signature(
            public_key=_decode_hex_field("public key", self.publicKey, ED25519_PUBLIC_KEY_SIZE),
            signature=_decode_hex_field("signature", self.signature, ED25519_SIGNATURE_SIZE),
        )
