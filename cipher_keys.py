# ---------------------------------------------------------
# Keyword handling for the trit glyph ciphers
# ---------------------------------------------------------
# The two schemes accept different keys on purpose:
# - Static substitution: letters only, no repeated letter
# - Delta-K (trit arithmetic): letters only, repeats allowed
# Both reject an empty key.
# ---------------------------------------------------------

import logging

from cryptography.hazmat.primitives import hashes

from glyph_tables import ALPHABET, InvalidKeyError, is_letter

logger = logging.getLogger(__name__)

# Number of hex characters shown for a key fingerprint
FINGERPRINT_LENGTH = 16


def _key_problem(key, allow_duplicates):
    # Returns a description of what is wrong with the key, or None
    if not key:
        return "key is empty"
    seen = set()
    for ch in key:
        if not is_letter(ch):
            return f"{ch!r} is not a letter"
        upper = ch.upper()
        if not allow_duplicates and upper in seen:
            return f"letter {upper!r} appears more than once"
        seen.add(upper)
    return None


def is_valid_substitution_key(key):
    """Non-empty, letters only, and no letter used twice (case-insensitive)."""
    return _key_problem(key, allow_duplicates=False) is None


def is_valid_trit_key(key):
    """Non-empty and letters only. Repeated letters are fine."""
    return _key_problem(key, allow_duplicates=True) is None


def require_substitution_key(key):
    problem = _key_problem(key, allow_duplicates=False)
    if problem is not None:
        raise InvalidKeyError(key, problem)
    return key.upper()


def require_trit_key(key):
    problem = _key_problem(key, allow_duplicates=True)
    if problem is not None:
        raise InvalidKeyError(key, problem)
    return key.upper()


def derive_keyed_order(key):
    """
    Reorders the alphabet around a keyword.
    The key's letters come first (in the order given, repeats dropped),
    followed by every unused letter in ascending order.

    >>> derive_keyed_order("KEY")
    'KEYABCDFGHIJLMNOPQRSTUVWXZ'
    """
    head = []
    for ch in key.upper():
        if ch not in head:
            head.append(ch)
    tail = [ch for ch in ALPHABET if ch not in head]
    return "".join(head + tail)


def key_fingerprint(key):
    """
    Short SHA-256 fingerprint of a keyword, so two people can check they
    typed the same key without reading it out. Case does not matter.
    """
    if not key:
        raise InvalidKeyError(key, "key is empty")
    digest = hashes.Hash(hashes.SHA256())
    digest.update(key.upper().encode("utf-8"))
    fingerprint = digest.finalize().hex()[:FINGERPRINT_LENGTH]
    logger.debug("computed key fingerprint for a %d-letter key", len(key))
    return fingerprint
