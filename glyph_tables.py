# ---------------------------------------------------------
# Glyph Alphabet: shared tables for the trit glyph ciphers
# ---------------------------------------------------------
# Holds the constant data used by both schemes:
# 1. The three glyphs (one per trit value 0, 1, 2)
# 2. The canonical trit table (letter -> 3 trits)
# 3. The canonical glyph table (letter -> 3-glyph string)
# plus the letter helpers and the error types.
# ---------------------------------------------------------

import string

ALPHABET = string.ascii_uppercase
ALPHABET_LENGTH = 26
BASE = 3

# Index 0 = ▲, index 1 = ▼, index 2 = ◆
GLYPHS = ("▲", "▼", "◆")

# Spaces become this delimiter in the Delta-K scheme only
SPACE_DELIMITER = "/"

# Letter i is the base-3 expansion of i + 1, so (0, 0, 0) is never used.
TRIT_ALPHABET = (
    (0, 0, 1), (0, 0, 2), (0, 1, 0), (0, 1, 1), (0, 1, 2),
    (0, 2, 0), (0, 2, 1), (0, 2, 2), (1, 0, 0), (1, 0, 1),
    (1, 0, 2), (1, 1, 0), (1, 1, 1), (1, 1, 2), (1, 2, 0),
    (1, 2, 1), (1, 2, 2), (2, 0, 0), (2, 0, 1), (2, 0, 2),
    (2, 1, 0), (2, 1, 1), (2, 1, 2), (2, 2, 0), (2, 2, 1),
    (2, 2, 2),
)

# Static substitution symbols, indexed by letter position (A=0 ... Z=25)
CIPHER_ALPHABET = (
    "▲▲▼", "▲▲◆", "▲▼▲", "▲▼▼", "▲▼◆", "▲◆▲", "▲◆▼", "▲◆◆",
    "▼▲▲", "▼▲▼", "▼▲◆", "▼▼▲", "▼▼▼", "▼▼◆", "▼◆▲", "▼◆▼", "▼◆◆",
    "◆▲▲", "◆▲▼", "◆▲◆", "◆▼▲", "◆▼▼", "◆▼◆", "◆◆▲", "◆◆▼", "◆◆◆",
)

# Reverse mappings: glyph -> trit value, triple -> letter position
glyph_to_trit = {g: i for i, g in enumerate(GLYPHS)}
trits_to_position = {t: i for i, t in enumerate(TRIT_ALPHABET)}


# ---------------- ERRORS ----------------
class GlyphCipherError(ValueError):
    """Base class for every failure raised by the glyph codecs."""


class InvalidKeyError(GlyphCipherError):
    """Raised when a keyword is empty, has a non-letter, or repeats a letter."""

    def __init__(self, key, reason):
        super().__init__(f"invalid key: {reason}")
        self.key = key
        self.reason = reason


class MalformedCiphertextError(GlyphCipherError):
    """Raised when glyph text holds an incomplete or unknown triple."""

    def __init__(self, message, position):
        super().__init__(f"{message} (at offset {position})")
        self.position = position


# ---------------- LETTER HELPERS ----------------
def is_letter(ch):
    # Only A-Z / a-z count; accented letters pass through the codecs untouched
    return len(ch) == 1 and ch in string.ascii_letters


def letter_position(ch):
    """
    Position of a letter in the alphabet (A=0 ... Z=25), case-insensitive.
    Formula: ord(upper(ch)) - ord('A')
    """
    if not is_letter(ch):
        raise ValueError(f"not a letter: {ch!r}")
    return ord(ch.upper()) - ord("A")


def is_glyph(ch):
    return ch in glyph_to_trit


def trits_to_glyphs(trits):
    return "".join(GLYPHS[t] for t in trits)
