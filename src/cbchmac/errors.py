"""Error hierarchy for cbchmac."""

from __future__ import annotations

from .constants import SUPPORTED_KEY_SIZES


class CbcHmacError(Exception):
    """Base exception for all cbchmac errors."""

    pass


class InvalidKeySizeError(CbcHmacError, ValueError):
    """Combined key length is not one of the supported sizes.

    Attributes:
        size: The length of the rejected key in bytes.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        want = ", ".join(str(s) for s in SUPPORTED_KEY_SIZES[:-1])
        super().__init__(
            f"Invalid AES-CBC-HMAC key size: want {want} or {SUPPORTED_KEY_SIZES[-1]}, got {size}"
        )


class MalformedCiphertextError(CbcHmacError, ValueError):
    """Ciphertext envelope has an impossible length."""

    pass


class DecryptionError(CbcHmacError):
    """Authentication failed.

    CRITICAL: Raised for both tag mismatches and padding failures with the
    same message. Never add detail that tells the two apart.
    """

    def __init__(self) -> None:
        super().__init__("invalid ciphertext (auth tag mismatch)")


class RandomSourceError(CbcHmacError):
    """The operating system random source could not supply bytes."""

    pass


class KeyClearedError(CbcHmacError):
    """Key material was wiped and the cipher can no longer be used."""

    pass
