import string

import pytest

from delta_k import decode_trit, encode_trit
from glyph_tables import InvalidKeyError, MalformedCiphertextError


def test_encode_unkeyed():
    # C=(0,1,0) A=(0,0,1) T=(2,0,2)
    assert encode_trit("CAT") == "▲▼▲▲▲▼◆▲◆"
    assert encode_trit("cat") == "▲▼▲▲▲▼◆▲◆"


def test_space_becomes_delimiter():
    assert encode_trit(" ") == "/"
    assert encode_trit("A B") == "▲▲▼/▲▲◆"


def test_non_letters_pass_through():
    for ch in "0123456789.,;!?-'é":
        assert encode_trit(ch) == ch
        assert encode_trit(ch, "KEY") == ch


def test_decode_unkeyed():
    assert decode_trit("▲▼▲▲▲▼◆▲◆") == "CAT"
    # '/' and punctuation are copied back unchanged
    assert decode_trit("▲▲▼/▲▲◆!") == "A/B!"


def test_every_letter_round_trips():
    for ch in string.ascii_letters:
        assert decode_trit(encode_trit(ch)) == ch.upper()


def test_encode_keyed():
    # C+D=(0,2,1)  A+O=(1,2,1)  T+G=(2,2,0)
    assert encode_trit("CAT", "DOG") == "▲◆▼▼◆▼◆◆▲"
    assert encode_trit("cat", "dog") == "▲◆▼▼◆▼◆◆▲"


def test_key_cursor_skips_non_letters():
    # B is paired with key letter B, not A again
    assert encode_trit("A B", "AB") == "▲▲◆/▲▲▼"
    assert encode_trit("A, B", "AB") == "▲▲◆,/▲▲▼"


def test_keyed_output_may_use_reserved_triple():
    # A+B=(0,0,0) is fine in keyed ciphertext
    assert encode_trit("A B", "B") == "▲▲▲/▲▲▼"
    assert decode_trit("▲▲▲/▲▲▼", "B") == "A/B"


def test_decode_keyed():
    assert decode_trit("▲◆▼▼◆▼◆◆▲", "DOG") == "CAT"
    ciphertext = encode_trit("Hello, World", "aab")
    assert decode_trit(ciphertext, "AAB") == "HELLO,/WORLD"


def test_empty_key_means_unkeyed():
    assert encode_trit("CAT", "") == encode_trit("CAT")
    assert decode_trit("▲▼▲", "") == "C"


def test_invalid_key_raises():
    with pytest.raises(InvalidKeyError):
        encode_trit("CAT", "D0G")
    with pytest.raises(InvalidKeyError):
        decode_trit("▲▼▲", "do g")


def test_reserved_triple_is_malformed():
    with pytest.raises(MalformedCiphertextError) as excinfo:
        decode_trit("▲▼▲▲▲▲")
    assert excinfo.value.position == 3


def test_incomplete_triple_is_malformed():
    with pytest.raises(MalformedCiphertextError):
        decode_trit("▲▼")
    with pytest.raises(MalformedCiphertextError) as excinfo:
        decode_trit("ab▲x▲▲")
    assert excinfo.value.position == 2


def test_malformed_is_a_value_error():
    with pytest.raises(ValueError):
        decode_trit("◆")
