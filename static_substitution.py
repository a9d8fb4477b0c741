# ---------------------------------------------------------
# Static Symbol Substitution
# ---------------------------------------------------------
# Every letter is replaced by one fixed 3-glyph string from
# CIPHER_ALPHABET. A keyword shuffles which letter gets which
# string: the symbol of the i-th plain letter goes to the
# i-th letter of the keyed alphabet.
# Spaces and other non-letters are copied unchanged.
# ---------------------------------------------------------

import logging

from cipher_keys import derive_keyed_order, require_substitution_key
from glyph_tables import CIPHER_ALPHABET, ALPHABET_LENGTH, is_letter, letter_position

logger = logging.getLogger(__name__)


def keyed_cipher_alphabet(key=None):
    """
    Symbol table indexed by letter position after applying the keyword.
    Example: with key "KEY", K gets A's symbol, E gets B's, Y gets C's.
    """
    if not key:
        return CIPHER_ALPHABET
    keyed_order = derive_keyed_order(require_substitution_key(key))

    table = [None] * ALPHABET_LENGTH
    for i, ch in enumerate(keyed_order):
        table[letter_position(ch)] = CIPHER_ALPHABET[i]
    return tuple(table)


def encode_static(text, key=None):
    """
    Encrypts text with the static glyph table.
    No key (None or "") means the plain table is used.
    Raises InvalidKeyError for a key that is not all-unique letters.
    """
    alphabet = keyed_cipher_alphabet(key)
    logger.debug("static substitution: %d chars, keyed=%s", len(text), bool(key))

    ciphertext = []
    for ch in text:
        if is_letter(ch):
            ciphertext.append(alphabet[letter_position(ch)])
        else:
            ciphertext.append(ch)   # spaces included, no '/' here
    return "".join(ciphertext)
