"""PKCS#7 padding for the CBC layer."""

from __future__ import annotations

from cryptography.hazmat.primitives import padding

from ..constants import BLOCK_SIZE
from ..errors import DecryptionError

_BLOCK_BITS = BLOCK_SIZE * 8


def pad(data: bytes) -> bytes:
    """Pad data to a multiple of the block size.

    Always appends between 1 and 16 bytes, so a block-aligned input gains
    a full block of padding.
    """
    padder = padding.PKCS7(_BLOCK_BITS).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes) -> bytes:
    """Strip PKCS#7 padding.

    Args:
        data: Decrypted, padded bytes.

    Returns:
        The data without its padding.

    Raises:
        DecryptionError: If the padding is invalid. This is the same error
            raised for a tag mismatch.
    """
    if not data or len(data) % BLOCK_SIZE:
        raise DecryptionError()
    unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError:
        pass
    # Raised outside the handler so no context links back to the padding check
    raise DecryptionError()
