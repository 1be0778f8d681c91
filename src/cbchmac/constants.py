"""Default constants for the AES-CBC-HMAC AEAD construction."""

# AES block size in bytes (also the PKCS#7 padding block)
BLOCK_SIZE = 16

# CBC initialization vector size in bytes
IV_SIZE = 16

# AL field: AAD length in bits, 64-bit big-endian
AAD_LENGTH_SIZE = 8

# Combined key sizes: MAC key || encryption key
SUPPORTED_KEY_SIZES = (32, 48, 64)

# Largest AAD whose bit length fits in the AL field
MAX_AAD_SIZE = 2**61
