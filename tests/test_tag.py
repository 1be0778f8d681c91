"""Tests for crypto/tag.py module."""

import hashlib
import hmac

import pytest

from cbchmac.crypto.tag import compute_tag, verify_tag
from cbchmac.types import Variant

from .vectors import AAD, IV, VECTORS, Vector


def mac_key_of(key: bytes) -> bytes:
    return key[: len(key) // 2]


class TestComputeTag:
    """Tests for compute_tag function."""

    @pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v.name)
    def test_known_tag(self, vector: Vector) -> None:
        """Test the tag against the published value."""
        variant = Variant.from_key_size(len(vector.key))
        tag = compute_tag(mac_key_of(vector.key), AAD, IV, vector.ciphertext, variant)
        assert tag == vector.tag

    @pytest.mark.parametrize("variant", list(Variant))
    def test_tag_size(self, variant: Variant) -> None:
        """Test that the tag is half the digest size."""
        mac_key = b"m" * variant.half_key_size
        tag = compute_tag(mac_key, b"", IV, b"\x00" * 16, variant)
        assert len(tag) == variant.tag_size

    def test_mac_input_layout(self) -> None:
        """Test MAC input is AAD || IV || ciphertext || AL, truncated."""
        mac_key = b"m" * 16
        aad = b"header"
        ciphertext = b"\x01" * 32
        al = (len(aad) * 8).to_bytes(8, "big")
        full = hmac.new(mac_key, aad + IV + ciphertext + al, hashlib.sha256).digest()

        tag = compute_tag(mac_key, aad, IV, ciphertext, Variant.AES128_HMAC_SHA256)
        assert tag == full[:16]

    def test_aad_length_is_authenticated(self) -> None:
        """Test that shifting a byte from the IV into the AAD changes the tag."""
        mac_key = b"m" * 16
        variant = Variant.AES128_HMAC_SHA256
        ciphertext = b"\x02" * 16
        # Both calls MAC the same AAD || IV || ciphertext bytes, only AL differs
        a = compute_tag(mac_key, b"ab", b"c" * 16, ciphertext, variant)
        b = compute_tag(mac_key, b"abc", b"c" * 15 + b"\x02", ciphertext[1:], variant)
        assert a != b


class TestVerifyTag:
    """Tests for verify_tag function."""

    @pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v.name)
    def test_valid_tag(self, vector: Vector) -> None:
        variant = Variant.from_key_size(len(vector.key))
        assert verify_tag(
            mac_key_of(vector.key), AAD, IV, vector.ciphertext, vector.tag, variant
        )

    def test_flipped_tag_bit(self) -> None:
        """Test that any single flipped tag bit fails verification."""
        vector = VECTORS[0]
        variant = Variant.AES128_HMAC_SHA256
        for i in range(len(vector.tag) * 8):
            tag = bytearray(vector.tag)
            tag[i // 8] ^= 1 << (i % 8)
            assert not verify_tag(
                mac_key_of(vector.key), AAD, IV, vector.ciphertext, bytes(tag), variant
            )

    def test_wrong_aad(self) -> None:
        vector = VECTORS[0]
        assert not verify_tag(
            mac_key_of(vector.key),
            AAD + b".",
            IV,
            vector.ciphertext,
            vector.tag,
            Variant.AES128_HMAC_SHA256,
        )

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_wrong_tag_length(self, length: int) -> None:
        """Test that a tag of the wrong length is unequal, not an error."""
        vector = VECTORS[0]
        tag = (vector.tag * 2)[:length]
        assert not verify_tag(
            mac_key_of(vector.key), AAD, IV, vector.ciphertext, tag, Variant.AES128_HMAC_SHA256
        )
