"""AEAD_AES_CBC_HMAC_SHA2 authenticated encryption."""

from __future__ import annotations

import logging
from types import TracebackType

from .constants import BLOCK_SIZE, IV_SIZE
from .crypto.cbc import cbc_decrypt, cbc_encrypt, generate_iv
from .crypto.keys import split_key
from .crypto.padding import pad, unpad
from .crypto.tag import compute_tag, verify_tag
from .errors import DecryptionError, KeyClearedError, MalformedCiphertextError
from .types import Variant

logger = logging.getLogger("cbchmac")


class AesCbcHmac:
    """AES-CBC with a truncated HMAC-SHA2 tag.

    The envelope produced by :meth:`encrypt` and consumed by :meth:`decrypt`
    is ``IV || ciphertext || tag``.

    Instances hold only the split key and never mutate it while encrypting
    or decrypting, so one instance can be shared between threads. Call
    :meth:`clear` (or use the instance as a context manager) to wipe the
    key once it is no longer needed.

    Example:
        ```python
        from cbchmac import AesCbcHmac, generate_key

        with AesCbcHmac(generate_key()) as aead:
            envelope = aead.encrypt(b"attack at dawn", b"header")
            assert aead.decrypt(envelope, b"header") == b"attack at dawn"
        ```
    """

    def __init__(self, key: bytes) -> None:
        """Split the combined key.

        Args:
            key: Combined key of 32, 48 or 64 bytes.

        Raises:
            InvalidKeySizeError: If the key length is not supported.
        """
        split = split_key(key)
        self._variant = split.variant
        self._mac_key = bytearray(split.mac_key)
        self._enc_key = bytearray(split.enc_key)
        self._cleared = False
        logger.debug("Initialized %s cipher", self._variant.value)

    def __enter__(self) -> AesCbcHmac:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"AesCbcHmac(variant={self._variant.value!r})"

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def key_size(self) -> int:
        """Combined key length in bytes."""
        return self._variant.key_size

    @property
    def tag_size(self) -> int:
        return self._variant.tag_size

    @property
    def iv_size(self) -> int:
        return IV_SIZE

    @property
    def overhead(self) -> int:
        """Maximum number of bytes an envelope adds to its plaintext."""
        return IV_SIZE + BLOCK_SIZE + self.tag_size

    def ciphertext_size(self, plaintext_size: int) -> int:
        """Exact envelope length for a plaintext of the given length."""
        padded = (plaintext_size // BLOCK_SIZE + 1) * BLOCK_SIZE
        return IV_SIZE + padded + self.tag_size

    def clear(self) -> None:
        """Overwrite the held key material with zeros.

        The cipher is unusable afterwards. Must not be called while other
        threads are still encrypting or decrypting with this instance.
        """
        if self._cleared:
            return
        for buf in (self._mac_key, self._enc_key):
            for i in range(len(buf)):
                buf[i] = 0
        self._cleared = True
        logger.debug("Cleared %s key material", self._variant.value)

    def _keys(self) -> tuple[bytes, bytes]:
        if self._cleared:
            raise KeyClearedError("Key material has been cleared")
        return bytes(self._mac_key), bytes(self._enc_key)

    def encrypt(self, plaintext: bytes, aad: bytes = b"") -> bytes:
        """Encrypt and authenticate plaintext.

        Args:
            plaintext: Data to encrypt (may be empty).
            aad: Additional authenticated data, not encrypted.

        Returns:
            The envelope ``IV || ciphertext || tag``.

        Raises:
            RandomSourceError: If no IV could be generated.
            KeyClearedError: If :meth:`clear` was called.
        """
        mac_key, enc_key = self._keys()
        iv = generate_iv()

        ciphertext = cbc_encrypt(enc_key, iv, pad(bytes(plaintext)))
        tag = compute_tag(mac_key, bytes(aad), iv, ciphertext, self._variant)
        return iv + ciphertext + tag

    def decrypt(self, envelope: bytes, aad: bytes = b"") -> bytes:
        """Verify and decrypt an envelope.

        CRITICAL: The tag is verified BEFORE decryption, and a bad tag and
        bad padding raise the same error.

        Args:
            envelope: ``IV || ciphertext || tag`` as produced by :meth:`encrypt`.
            aad: The additional authenticated data used at encryption.

        Returns:
            The decrypted plaintext.

        Raises:
            MalformedCiphertextError: If the envelope length is impossible.
            DecryptionError: If authentication or padding validation fails.
            KeyClearedError: If :meth:`clear` was called.
        """
        envelope = bytes(envelope)
        aad = bytes(aad)
        tag_size = self.tag_size

        # Step 1: Structural checks (no secrets involved)
        if len(envelope) < IV_SIZE + tag_size:
            raise MalformedCiphertextError("ciphertext too short")

        iv = envelope[:IV_SIZE]
        ciphertext = envelope[IV_SIZE : len(envelope) - tag_size]
        tag = envelope[len(envelope) - tag_size :]

        if not ciphertext or len(ciphertext) % BLOCK_SIZE:
            raise MalformedCiphertextError(
                f"Invalid ciphertext length: {len(ciphertext)} bytes, "
                f"expected a positive multiple of {BLOCK_SIZE}"
            )

        mac_key, enc_key = self._keys()

        # Step 2: Verify tag FIRST
        if not verify_tag(mac_key, aad, iv, ciphertext, tag, self._variant):
            logger.debug("Authentication failed for %s envelope", self._variant.value)
            raise DecryptionError()

        # Step 3: Decrypt and strip padding
        try:
            return unpad(cbc_decrypt(enc_key, iv, ciphertext))
        except DecryptionError:
            logger.debug("Authentication failed for %s envelope", self._variant.value)
            raise
