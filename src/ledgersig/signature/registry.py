"""
Signature type registry.

A single table maps each SignatureType to its variant class and its JSON
mirror class. Both the binary and the JSON selectors read from it, so they
cannot disagree about which tags exist.

Adding an algorithm:
    1. add a SignatureType value
    2. implement the variant and its JSON mirror
    3. add one row to SIGNATURE_REGISTRY
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from ..core.settings import get_settings
from ..protocol.enums import DeSerializationMode, SignatureType
from ..protocol.errors import MalformedJSONError, UnknownSignatureTypeError
from ..protocol.serialization import (
    SMALL_TYPE_DENOTATION_BYTE_SIZE,
    JSONSerializable,
    check_min_byte_length,
)
from ..utils.json import load_json_object
from ..utils.logging import get_logger
from .base import Signature
from .ed25519 import Ed25519Signature, JSONEd25519Signature
from .wots import JSONWOTSSignature, WOTSSignature

logger = get_logger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    signature_type: SignatureType
    variant: Type[Signature]
    json_mirror: Type[JSONSerializable]


SIGNATURE_REGISTRY: Dict[SignatureType, RegistryEntry] = {
    SignatureType.WOTS: RegistryEntry(SignatureType.WOTS, WOTSSignature, JSONWOTSSignature),
    SignatureType.ED25519: RegistryEntry(SignatureType.ED25519, Ed25519Signature, JSONEd25519Signature),
}


def _lookup(type_value: Any) -> RegistryEntry:
    if isinstance(type_value, bool) or not isinstance(type_value, int):
        raise UnknownSignatureTypeError(type_value)
    try:
        return SIGNATURE_REGISTRY[SignatureType(type_value)]
    except (ValueError, KeyError):
        raise UnknownSignatureTypeError(type_value) from None


def registered_types() -> List[SignatureType]:
    return sorted(SIGNATURE_REGISTRY)


def signature_selector(type_value: int) -> Signature:
    """Return a fresh, empty signature for the given type byte."""
    return _lookup(type_value).variant()


def json_signature_selector(type_value: int) -> JSONSerializable:
    """Return a fresh, empty JSON mirror for the given JSON type field."""
    return _lookup(type_value).json_mirror()


def deserialize_signature(
    data: bytes,
    mode: Optional[Union[DeSerializationMode, bool]] = None,
) -> Tuple[Signature, int]:
    """
    Decode a signature of any registered type from the start of data.

    Args:
        data: Buffer starting with a type byte; trailing bytes are ignored
        mode: Deserialization mode; None uses the configured default

    Returns:
        (signature, bytes consumed)
    """
    if mode is None:
        mode = get_settings().codec.default_mode
    check_min_byte_length(SMALL_TYPE_DENOTATION_BYTE_SIZE, len(data))

    sig = signature_selector(data[0])
    consumed = sig.deserialize(data, DeSerializationMode.coerce(mode))
    logger.debug("Decoded %s signature (%d bytes)", sig.SIGNATURE_TYPE.name, consumed)
    return sig, consumed


def signature_from_json(data: Union[str, bytes, Dict[str, Any]]) -> Signature:
    """Decode a signature of any registered type from JSON text or a parsed dict."""
    obj = load_json_object(data)
    if "type" not in obj:
        raise MalformedJSONError("missing field 'type'")

    entry = _lookup(obj["type"])
    return entry.json_mirror.from_dict(obj).to_signature()
