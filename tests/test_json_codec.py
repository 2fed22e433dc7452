"""
Tests for the JSON signature codec.
"""

import json

import pytest

from ledgersig.protocol.enums import ErrorCode, SignatureType
from ledgersig.protocol.errors import (
    MalformedHexError,
    MalformedJSONError,
    TypeMismatchError,
    WOTSNotImplementedError,
)
from ledgersig.signature.ed25519 import Ed25519Signature, JSONEd25519Signature
from ledgersig.signature.signing import Ed25519Signer
from ledgersig.signature.wots import JSONWOTSSignature, WOTSSignature


@pytest.fixture
def signed():
    return Ed25519Signer.generate().sign(b"transaction essence")


def _doc(**overrides):
    doc = {"type": 1, "publicKey": "00" * 32, "signature": "00" * 64}
    doc.update(overrides)
    return doc


class TestEd25519ToJSON:
    def test_field_names_and_types(self, signed):
        doc = json.loads(signed.to_json())

        assert doc == {
            "type": 1,
            "publicKey": signed.public_key.hex(),
            "signature": signed.signature.hex(),
        }

    def test_hex_is_lowercase_without_prefix(self):
        sig = Ed25519Signature(public_key=b"\xab" * 32, signature=b"\xcd" * 64)
        doc = sig.to_dict()

        assert doc["publicKey"] == "ab" * 32
        assert doc["signature"] == "cd" * 64
        assert len(doc["publicKey"]) == 64
        assert len(doc["signature"]) == 128

    def test_compact_text(self):
        text = Ed25519Signature().to_json()
        assert " " not in text
        assert text.startswith('{"type":1,')


class TestEd25519FromJSON:
    def test_roundtrip(self, signed):
        assert Ed25519Signature.from_json(signed.to_json()) == signed

    def test_accepts_bytes_and_dict(self, signed):
        assert Ed25519Signature.from_json(signed.to_json().encode()) == signed
        assert Ed25519Signature.from_json(signed.to_dict()) == signed

    def test_matches_binary_decoding(self, signed):
        from_binary = Ed25519Signature()
        from_binary.deserialize(signed.serialize())

        assert Ed25519Signature.from_json(signed.to_json()) == from_binary

    def test_uppercase_hex_decodes_to_same_bytes(self, signed):
        doc = signed.to_dict()
        doc["publicKey"] = doc["publicKey"].upper()

        assert Ed25519Signature.from_json(doc) == signed

    def test_public_key_wrong_length(self):
        with pytest.raises(MalformedHexError) as exc_info:
            Ed25519Signature.from_json(_doc(publicKey="00" * 31))

        assert exc_info.value.field == "public key"
        assert exc_info.value.expected_length == 32
        assert exc_info.value.code == ErrorCode.MALFORMED_HEX

    def test_signature_wrong_length(self):
        with pytest.raises(MalformedHexError) as exc_info:
            Ed25519Signature.from_json(_doc(signature="00" * 65))

        assert exc_info.value.field == "signature"

    @pytest.mark.parametrize(
        "value",
        [
            "zz" * 32,
            "0" * 63,
            "0x" + "00" * 31,
            "00 " * 32,
            12345,
            None,
        ],
    )
    def test_public_key_malformed(self, value):
        with pytest.raises(MalformedHexError):
            Ed25519Signature.from_json(_doc(publicKey=value))

    def test_wrong_type_field(self):
        with pytest.raises(TypeMismatchError):
            Ed25519Signature.from_json(_doc(type=0))

    def test_non_integer_type_field(self):
        with pytest.raises(MalformedJSONError):
            Ed25519Signature.from_json(_doc(type="1"))

    def test_boolean_type_field(self):
        with pytest.raises(MalformedJSONError):
            Ed25519Signature.from_json(_doc(type=True))

    def test_missing_field(self):
        doc = _doc()
        del doc["signature"]

        with pytest.raises(MalformedJSONError, match="signature"):
            Ed25519Signature.from_json(doc)

    def test_invalid_json_text(self):
        with pytest.raises(MalformedJSONError) as exc_info:
            Ed25519Signature.from_json("{not json")

        assert exc_info.value.code == ErrorCode.MALFORMED_JSON

    def test_non_object_document(self):
        with pytest.raises(MalformedJSONError):
            Ed25519Signature.from_json("[1, 2, 3]")


class TestJSONMirror:
    def test_from_signature_to_signature(self, signed):
        mirror = JSONEd25519Signature.from_signature(signed)

        assert mirror.type == SignatureType.ED25519
        assert mirror.to_signature() == signed

    def test_default_type(self):
        assert JSONEd25519Signature().type == 1
        assert JSONWOTSSignature().type == 0


class TestWOTSJSON:
    def test_to_json_not_implemented(self):
        with pytest.raises(WOTSNotImplementedError):
            WOTSSignature().to_json()

    def test_from_json_not_implemented(self):
        with pytest.raises(WOTSNotImplementedError):
            WOTSSignature.from_json('{"type": 0}')

    def test_mirror_not_implemented(self):
        with pytest.raises(WOTSNotImplementedError):
            JSONWOTSSignature().to_signature()
        with pytest.raises(WOTSNotImplementedError):
            JSONWOTSSignature.from_dict({"type": 0})
