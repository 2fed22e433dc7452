"""
WOTS (Winternitz one-time signature) placeholder.

The variant reserves SignatureType.WOTS on the wire so that a future
implementation stays compatible. Every operation raises
WOTSNotImplementedError; the type byte is still checked on decode so that a
caller probing the wrong tag gets a type mismatch instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from ..protocol.enums import DeSerializationMode, SignatureType
from ..protocol.errors import WOTSNotImplementedError
from ..protocol.serialization import check_type_byte
from .base import AddressLike, Signature


@dataclass
class WOTSSignature(Signature):
    SIGNATURE_TYPE: ClassVar[SignatureType] = SignatureType.WOTS

    def deserialize(self, data: bytes, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> int:
        if DeSerializationMode.coerce(mode).has_mode(DeSerializationMode.PERFORM_VALIDATION):
            check_type_byte(data, SignatureType.WOTS)
        raise WOTSNotImplementedError("deserialize")

    def serialize(self, mode: DeSerializationMode = DeSerializationMode.PERFORM_VALIDATION) -> bytes:
        raise WOTSNotImplementedError("serialize")

    def to_dict(self) -> Dict[str, Any]:
        raise WOTSNotImplementedError("to_dict")

    @classmethod
    def from_json(cls, data: Union[str, bytes, Dict[str, Any]]) -> "WOTSSignature":
        raise WOTSNotImplementedError("from_json")

    def valid(self, message: bytes, address: AddressLike) -> None:
        raise WOTSNotImplementedError("valid")


@dataclass
class JSONWOTSSignature:
    """JSON representation of a WOTSSignature."""

    type: int = int(SignatureType.WOTS)

    def to_dict(self) -> Dict[str, Any]:
        raise WOTSNotImplementedError("to_dict")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JSONWOTSSignature":
        raise WOTSNotImplementedError("from_dict")

    def to_signature(self) -> WOTSSignature:
        raise WOTSNotImplementedError("to_signature")
