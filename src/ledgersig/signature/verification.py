"""
Signature verification entry point.

verify_signature() is what transaction processing calls once a signature has
been decoded. It delegates to the variant and logs the outcome; errors are
re-raised unchanged so the caller can tell a key/address mismatch from a bad
signature from an unsupported signature type.
"""

from __future__ import annotations

from ..protocol.errors import SignatureError, VerificationError
from ..utils.logging import get_logger
from .base import AddressLike, Signature

logger = get_logger(__name__)


def verify_signature(signature: Signature, message: bytes, address: AddressLike) -> None:
    """
    Verify signature over message for the claimed address.

    Raises:
        AddressKeyMismatchError: the signing key does not belong to address
        SignatureInvalidError: the signature does not verify over message
        WOTSNotImplementedError: the variant has no verification yet
    """
    try:
        signature.valid(message, address)
    except SignatureError as e:
        logger.info(
            "Rejected %s signature (code=%s): %s",
            signature.SIGNATURE_TYPE.name,
            e.code.value,
            e,
        )
        raise
    logger.debug("Verified %s signature", signature.SIGNATURE_TYPE.name)


def is_valid_signature(signature: Signature, message: bytes, address: AddressLike) -> bool:
    """
    Boolean form of verify_signature for callers that only need a yes/no.

    Only verification failures map to False; an unsupported signature type
    still raises WOTSNotImplementedError.
    """
    try:
        verify_signature(signature, message, address)
    except VerificationError:
        return False
    return True
