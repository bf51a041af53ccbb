from fakepico.emoji import convert_emojis


def test_ascii_passes_through():
    text = "print('hi')\n\tx=1"
    assert convert_emojis(text) == text.encode("ascii")


def test_left_arrow_glyph():
    assert convert_emojis("\u2b05") == bytes([0x8B])


def test_variation_selector_dropped():
    assert convert_emojis("\u2b05\ufe0f\u27a1\ufe0f") == bytes([0x8B, 0x91])


def test_sans_serif_capitals_map_to_upper_case():
    capitals = "".join(chr(0x1D622 + i) for i in range(26))
    assert convert_emojis(capitals) == b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_unknown_characters_dropped():
    assert convert_emojis("a\u00e9b") == b"ab"


def test_output_length_never_exceeds_input():
    text = "\u25ae\u2588x\u25dd\u00e9"
    result = convert_emojis(text)
    assert len(result) <= len(text)
    assert result[-1:] == b"\xff"