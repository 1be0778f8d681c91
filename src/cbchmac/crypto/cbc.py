"""AES-CBC block encryption and IV generation."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import BLOCK_SIZE, IV_SIZE
from ..errors import MalformedCiphertextError, RandomSourceError


def random_bytes(size: int) -> bytes:
    """Read bytes from the OS CSPRNG.

    Raises:
        RandomSourceError: If the OS cannot supply randomness.
    """
    try:
        return os.urandom(size)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Random source failure: {e}") from e


def generate_iv() -> bytes:
    """Generate a fresh random CBC initialization vector."""
    return random_bytes(IV_SIZE)


def _check_inputs(iv: bytes, data: bytes) -> None:
    if len(iv) != IV_SIZE:
        raise MalformedCiphertextError(f"Invalid IV size: {len(iv)} bytes, expected {IV_SIZE}")
    if not data or len(data) % BLOCK_SIZE:
        raise MalformedCiphertextError(
            f"Invalid CBC input length: {len(data)} bytes, "
            f"expected a positive multiple of {BLOCK_SIZE}"
        )


def cbc_encrypt(enc_key: bytes, iv: bytes, padded: bytes) -> bytes:
    """Encrypt block-aligned data with AES-CBC.

    Args:
        enc_key: AES key (16, 24 or 32 bytes).
        iv: 16-byte initialization vector.
        padded: Plaintext already padded to the block size.

    Returns:
        Ciphertext of the same length as ``padded``.

    Raises:
        MalformedCiphertextError: If the IV or data length is invalid.
    """
    _check_inputs(iv, padded)
    encryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def cbc_decrypt(enc_key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Decrypt AES-CBC ciphertext, leaving padding in place.

    Raises:
        MalformedCiphertextError: If the IV or data length is invalid.
    """
    _check_inputs(iv, ciphertext)
    decryptor = Cipher(algorithms.AES(enc_key), modes.CBC(iv)).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()
