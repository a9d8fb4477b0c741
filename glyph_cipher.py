"""
Trit glyph ciphers: one import for both schemes.

- encode_static:  static symbol substitution (optional unique-letter keyword)
- encode_trit / decode_trit:  Delta-K trit arithmetic (optional keyword)
- is_valid_substitution_key / is_valid_trit_key:  the two key rules
"""

from cipher_keys import (
    derive_keyed_order,
    is_valid_substitution_key,
    is_valid_trit_key,
    key_fingerprint,
)
from delta_k import decode_trit, encode_trit
from glyph_tables import GlyphCipherError, InvalidKeyError, MalformedCiphertextError
from static_substitution import encode_static

__all__ = [
    "GlyphCipherError",
    "InvalidKeyError",
    "MalformedCiphertextError",
    "decode_trit",
    "derive_keyed_order",
    "encode_static",
    "encode_trit",
    "is_valid_substitution_key",
    "is_valid_trit_key",
    "key_fingerprint",
]
