"""Type definitions for cbchmac."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cryptography.hazmat.primitives import hashes

from .errors import InvalidKeySizeError


class Variant(str, Enum):
    """Supported AEAD_AES_CBC_HMAC_SHA2 parameter sets.

    Values are the JWE "enc" identifiers for each combination.
    """

    AES128_HMAC_SHA256 = "A128CBC-HS256"
    AES192_HMAC_SHA384 = "A192CBC-HS384"
    AES256_HMAC_SHA512 = "A256CBC-HS512"

    @classmethod
    def from_key_size(cls, size: int) -> Variant:
        """Select the variant for a combined key length.

        Args:
            size: Combined key length in bytes.

        Returns:
            The matching variant.

        Raises:
            InvalidKeySizeError: If no variant uses that key length.
        """
        for variant in cls:
            if variant.key_size == size:
                return variant
        raise InvalidKeySizeError(size)

    @property
    def key_size(self) -> int:
        """Combined key length in bytes."""
        return _PARAMS[self][0]

    @property
    def half_key_size(self) -> int:
        """Length of each of the MAC and encryption keys."""
        return self.key_size // 2

    @property
    def hash_name(self) -> str:
        return _PARAMS[self][1].name

    @property
    def tag_size(self) -> int:
        """Truncated tag length: half the digest size."""
        return _PARAMS[self][1].digest_size // 2

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh hash instance for HMAC."""
        return _PARAMS[self][1]()


_PARAMS: dict[Variant, tuple[int, type[hashes.HashAlgorithm]]] = {
    Variant.AES128_HMAC_SHA256: (32, hashes.SHA256),
    Variant.AES192_HMAC_SHA384: (48, hashes.SHA384),
    Variant.AES256_HMAC_SHA512: (64, hashes.SHA512),
}


@dataclass(frozen=True)
class SplitKey:
    """Keys derived from one combined AES-CBC-HMAC key.

    Attributes:
        mac_key: First half of the combined key, used for HMAC.
        enc_key: Second half of the combined key, used for AES.
        variant: The parameter set selected by the key length.
    """

    mac_key: bytes = field(repr=False)
    enc_key: bytes = field(repr=False)
    variant: Variant
