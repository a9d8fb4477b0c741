# ---------------------------------------------------------
# Delta-K: trit arithmetic cipher
# ---------------------------------------------------------
# Each letter is written as three trits (base-3 digits) from
# TRIT_ALPHABET and each trit is drawn as a glyph.
# 1. Unkeyed: the letter's trits are emitted as they are
# 2. Keyed:   trits are combined with a cycling key letter
#             Formula: C[j] = (P[j] + K[j]) mod 3
#             Inverse: P[j] = (C[j] - K[j]) mod 3
# Spaces are written as '/', other non-letters unchanged.
# ---------------------------------------------------------

import logging

from cipher_keys import require_trit_key
from glyph_tables import (
    BASE,
    SPACE_DELIMITER,
    TRIT_ALPHABET,
    MalformedCiphertextError,
    glyph_to_trit,
    is_glyph,
    is_letter,
    letter_position,
    trits_to_glyphs,
    trits_to_position,
)

logger = logging.getLogger(__name__)


def _key_trits(key):
    # None/"" -> unkeyed; otherwise the trit triple of every key letter
    if not key:
        return None
    return [TRIT_ALPHABET[letter_position(k)] for k in require_trit_key(key)]


def encode_trit(text, key=None):
    """
    Encrypts text into glyphs, three per letter.
    With a key, the key letter only advances on letters of the text.
    """
    key_trits = _key_trits(key)
    logger.debug("delta-k encode: %d chars, keyed=%s", len(text), key_trits is not None)

    ciphertext = []
    j = 0   # index for key
    for ch in text:
        if is_letter(ch):
            p = TRIT_ALPHABET[letter_position(ch)]
            if key_trits is None:
                ciphertext.append(trits_to_glyphs(p))
            else:
                k = key_trits[j % len(key_trits)]     # repeat key cyclically
                c = [(p[i] + k[i]) % BASE for i in range(BASE)]
                ciphertext.append(trits_to_glyphs(c))
                j += 1
        elif ch == " ":
            ciphertext.append(SPACE_DELIMITER)
        else:
            ciphertext.append(ch)
    return "".join(ciphertext)


def _read_triple(glyph_text, pos):
    window = glyph_text[pos:pos + BASE]
    if len(window) < BASE or not all(is_glyph(g) for g in window):
        raise MalformedCiphertextError(
            f"incomplete glyph triple {window!r}", pos)
    return tuple(glyph_to_trit[g] for g in window)


def decode_trit(glyph_text, key=None):
    """
    Decrypts glyph text back to upper-case letters.
    Non-glyph characters ('/' included) are copied through unchanged.
    Raises MalformedCiphertextError if a glyph does not start a full
    triple, or the triple (e.g. ▲▲▲) belongs to no letter.

    Keyed decryption is the inverse of keyed encode_trit; the key
    advances once per decoded triple.
    """
    key_trits = _key_trits(key)
    logger.debug("delta-k decode: %d chars, keyed=%s", len(glyph_text), key_trits is not None)

    plaintext = []
    j = 0
    pos = 0
    while pos < len(glyph_text):
        ch = glyph_text[pos]
        if not is_glyph(ch):
            plaintext.append(ch)
            pos += 1
            continue

        c = _read_triple(glyph_text, pos)
        if key_trits is None:
            p = c
        else:
            k = key_trits[j % len(key_trits)]
            p = tuple((c[i] - k[i]) % BASE for i in range(BASE))
            j += 1

        position = trits_to_position.get(p)
        if position is None:
            raise MalformedCiphertextError(
                f"glyph triple {trits_to_glyphs(p)!r} is not in the alphabet", pos)
        plaintext.append(chr(ord("A") + position))
        pos += BASE
    return "".join(plaintext)
