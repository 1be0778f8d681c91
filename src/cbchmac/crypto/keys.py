"""Combined key splitting and generation for cbchmac."""

from __future__ import annotations

from ..types import SplitKey, Variant
from .cbc import random_bytes


def split_key(key: bytes) -> SplitKey:
    """Split a combined key into its MAC and encryption halves.

    The first half keys HMAC and the second half keys AES, as laid out in
    the AEAD_AES_CBC_HMAC_SHA2 construction.

    Args:
        key: The combined key (32, 48 or 64 bytes).

    Returns:
        The two halves and the variant selected by the key length.

    Raises:
        InvalidKeySizeError: If the key length is not supported.
    """
    key = bytes(key)
    variant = Variant.from_key_size(len(key))
    half = variant.half_key_size
    return SplitKey(mac_key=key[:half], enc_key=key[half:], variant=variant)


def generate_key(variant: Variant = Variant.AES256_HMAC_SHA512) -> bytes:
    """Generate a random combined key for the given variant.

    Args:
        variant: The parameter set the key is for.

    Returns:
        ``variant.key_size`` random bytes.

    Raises:
        RandomSourceError: If the OS random source fails.
    """
    return random_bytes(variant.key_size)
