"""cbchmac: AEAD_AES_CBC_HMAC_SHA2 authenticated encryption.

Implements the AES-CBC + HMAC-SHA2 construction used by JSON Web Encryption
(``A128CBC-HS256``, ``A192CBC-HS384``, ``A256CBC-HS512``). Keys are raw
bytes and envelopes are raw ``IV || ciphertext || tag`` bytes; encoding them
for transport is left to the caller.

Example:
    ```python
    from cbchmac import AesCbcHmac, Variant, generate_key

    key = generate_key(Variant.AES128_HMAC_SHA256)
    aead = AesCbcHmac(key)

    envelope = aead.encrypt(b"secret message", b"associated data")
    plaintext = aead.decrypt(envelope, b"associated data")
    ```
"""

from .aead import AesCbcHmac
from .constants import (
    AAD_LENGTH_SIZE,
    BLOCK_SIZE,
    IV_SIZE,
    MAX_AAD_SIZE,
    SUPPORTED_KEY_SIZES,
)
from .crypto import generate_key, split_key
from .errors import (
    CbcHmacError,
    DecryptionError,
    InvalidKeySizeError,
    KeyClearedError,
    MalformedCiphertextError,
    RandomSourceError,
)
from .types import SplitKey, Variant

__version__ = "0.1.0"

__all__ = [
    "AAD_LENGTH_SIZE",
    "BLOCK_SIZE",
    "IV_SIZE",
    "MAX_AAD_SIZE",
    "SUPPORTED_KEY_SIZES",
    "AesCbcHmac",
    "CbcHmacError",
    "DecryptionError",
    "InvalidKeySizeError",
    "KeyClearedError",
    "MalformedCiphertextError",
    "RandomSourceError",
    "SplitKey",
    "Variant",
    "generate_key",
    "split_key",
]
