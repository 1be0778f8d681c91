"""Building blocks of the AEAD_AES_CBC_HMAC_SHA2 construction."""

from .cbc import cbc_decrypt, cbc_encrypt, generate_iv
from .keys import generate_key, split_key
from .padding import pad, unpad
from .tag import compute_tag, verify_tag

__all__ = [
    "cbc_decrypt",
    "cbc_encrypt",
    "compute_tag",
    "generate_iv",
    "generate_key",
    "pad",
    "split_key",
    "unpad",
    "verify_tag",
]
