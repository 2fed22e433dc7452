"""
Wire-level primitives shared by every signature variant.

Every serialized object starts with a single type denotation byte. The helpers
here perform the defensive checks a variant runs before it reads its fields
from an untrusted buffer.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from .enums import DeSerializationMode
from .errors import MinByteLengthError, TypeMismatchError

# Size of the leading type denotation byte.
SMALL_TYPE_DENOTATION_BYTE_SIZE = 1


@runtime_checkable
class Serializable(Protocol):
    """
    Binary codec contract.

    deserialize() returns the number of bytes consumed so that callers decoding
    a larger structure know where the next field starts.
    """

    def deserialize(self, data: bytes, mode: DeSerializationMode) -> int:
        ...

    def serialize(self, mode: DeSerializationMode) -> bytes:
        ...


@runtime_checkable
class JSONSerializable(Protocol):
    """JSON mirror contract: a plain-field view convertible to a Serializable."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JSONSerializable":
        ...

    def to_dict(self) -> Dict[str, Any]:
        ...

    def to_signature(self) -> Serializable:
        ...


def check_min_byte_length(required: int, actual: int) -> None:
    if actual < required:
        raise MinByteLengthError(required, actual)


def check_type_byte(data: bytes, expected: int) -> None:
    """Raise unless the first byte of data equals the expected type tag."""
    check_min_byte_length(SMALL_TYPE_DENOTATION_BYTE_SIZE, len(data))
    if data[0] != expected:
        raise TypeMismatchError(int(expected), data[0])
