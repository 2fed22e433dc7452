from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Union

from ..crypto.address import Ed25519Address
from ..protocol.enums import DeSerializationMode, SignatureType
from ..utils.json import json_dumps

AddressLike = Union[Ed25519Address, bytes, bytearray]


class Signature(ABC):
    """
    One case of the signature sum type.

    Subclasses set SIGNATURE_TYPE and implement the binary codec, the JSON
    codec and verification. A freshly constructed instance is the "empty"
    variant handed out by the type registry.
    """

    SIGNATURE_TYPE: ClassVar[SignatureType]

    @abstractmethod
    def deserialize(self, data: bytes, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> int:
        """Populate this instance from data and return the bytes consumed."""

    @abstractmethod
    def serialize(self, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> bytes:
        """Return the type byte followed by the variant's fields."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible representation, including the integer type field."""

    @classmethod
    @abstractmethod
    def from_json(cls, data: Union[str, bytes, Dict[str, Any]]) -> "Signature":
        """Build a signature of this kind from JSON text or a parsed dict."""

    @abstractmethod
    def valid(self, message: bytes, address: AddressLike) -> None:
        """Raise unless this signature is valid for message and address."""

    def to_json(self) -> str:
        return json_dumps(self.to_dict())
