import glyph_cipher


def test_facade_matches_documented_behaviour():
    assert glyph_cipher.encode_static(" ") == " "
    assert glyph_cipher.encode_trit(" ") == "/"
    assert glyph_cipher.decode_trit(glyph_cipher.encode_trit("cat")) == "CAT"
    assert not glyph_cipher.is_valid_substitution_key("aab")
    assert glyph_cipher.is_valid_trit_key("aab")
    assert glyph_cipher.derive_keyed_order("KEY").startswith("KEYABCDF")


def test_errors_share_a_base_class():
    assert issubclass(glyph_cipher.InvalidKeyError, glyph_cipher.GlyphCipherError)
    assert issubclass(glyph_cipher.MalformedCiphertextError, glyph_cipher.GlyphCipherError)
