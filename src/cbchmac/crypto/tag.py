"""Truncated HMAC tag over AAD, IV, ciphertext and AAD length."""

from __future__ import annotations

from cryptography.hazmat.primitives import constant_time, hmac

from ..constants import AAD_LENGTH_SIZE
from ..types import Variant


def compute_tag(
    mac_key: bytes,
    aad: bytes,
    iv: bytes,
    ciphertext: bytes,
    variant: Variant,
) -> bytes:
    """Compute the authentication tag.

    MAC input is ``AAD || IV || ciphertext || AL`` where AL is the AAD
    length in bits as a 64-bit big-endian integer. The HMAC output is
    truncated to its leftmost half.

    Args:
        mac_key: HMAC key (first half of the combined key).
        aad: Additional authenticated data.
        iv: The CBC initialization vector.
        ciphertext: AES-CBC output.
        variant: Selects the hash and tag size.

    Returns:
        The ``variant.tag_size``-byte tag.
    """
    al = (len(aad) * 8).to_bytes(AAD_LENGTH_SIZE, "big")

    h = hmac.HMAC(mac_key, variant.hash_algorithm())
    h.update(aad)
    h.update(iv)
    h.update(ciphertext)
    h.update(al)
    return h.finalize()[: variant.tag_size]


def verify_tag(
    mac_key: bytes,
    aad: bytes,
    iv: bytes,
    ciphertext: bytes,
    tag: bytes,
    variant: Variant,
) -> bool:
    """Check a received tag in constant time.

    Returns:
        True if the tag matches, False otherwise.
    """
    expected = compute_tag(mac_key, aad, iv, ciphertext, variant)
    return constant_time.bytes_eq(expected, bytes(tag))
