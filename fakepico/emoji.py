"""Mapping of the console's special glyphs from Unicode to single bytes."""

from __future__ import annotations

_EMOJI = {
    0x025AE: 0x10, 0x025A0: 0x11, 0x025A1: 0x12, 0x02059: 0x13, 0x02058: 0x14,
    0x02016: 0x15, 0x025C0: 0x16, 0x025B6: 0x17, 0x0300C: 0x18, 0x0300D: 0x19,
    0x000A5: 0x1A, 0x02022: 0x1B, 0x03001: 0x1C, 0x03002: 0x1D, 0x0309B: 0x1E,
    0x0309C: 0x1F,
    0x025CB: 0x7F, 0x02588: 0x80, 0x02592: 0x81, 0x1F431: 0x82,
    0x02B07: 0x83, 0x02591: 0x84, 0x0273D: 0x85, 0x025CF: 0x86, 0x02665: 0x87,
    0x02609: 0x88, 0x0C6C3: 0x89, 0x02302: 0x8A, 0x02B05: 0x8B, 0x1F610: 0x8C,
    0x0266A: 0x8D, 0x1F17E: 0x8E, 0x025C6: 0x8F, 0x02026: 0x90, 0x027A1: 0x91,
    0x02605: 0x92, 0x029D7: 0x93, 0x02B06: 0x94, 0x002C7: 0x95, 0x02227: 0x96,
    0x0274E: 0x97, 0x025A4: 0x98, 0x025A5: 0x99, 0x03042: 0x9A, 0x03044: 0x9B,
    0x03046: 0x9C, 0x03048: 0x9D, 0x0304A: 0x9E, 0x0304B: 0x9F, 0x0304D: 0xA0,
    0x0304F: 0xA1, 0x03051: 0xA2, 0x03053: 0xA3, 0x03055: 0xA4, 0x03057: 0xA5,
    0x03059: 0xA6, 0x0305B: 0xA7, 0x0305D: 0xA8, 0x0305F: 0xA9, 0x03061: 0xAA,
    0x03064: 0xAB, 0x03066: 0xAC, 0x03068: 0xAD, 0x0306A: 0xAE, 0x0306B: 0xAF,
    0x0306C: 0xB0, 0x0306D: 0xB1, 0x0306E: 0xB2, 0x0306F: 0xB3, 0x03072: 0xB4,
    0x03075: 0xB5, 0x03078: 0xB6, 0x0307B: 0xB7, 0x0307E: 0xB8, 0x0307F: 0xB9,
    0x03080: 0xBA, 0x03081: 0xBB, 0x03082: 0xBC, 0x03084: 0xBD, 0x03086: 0xBE,
    0x03088: 0xBF, 0x03089: 0xC0, 0x0308A: 0xC1, 0x0308B: 0xC2, 0x0308C: 0xC3,
    0x0308D: 0xC4, 0x0308F: 0xC5, 0x03092: 0xC6, 0x03093: 0xC7, 0x03063: 0xC8,
    0x03083: 0xC9, 0x03085: 0xCA, 0x03087: 0xCB, 0x030A2: 0xCC, 0x030A4: 0xCD,
    0x030A6: 0xCE, 0x030A8: 0xCF, 0x030AA: 0xD0, 0x030AB: 0xD1, 0x030AD: 0xD2,
    0x030AF: 0xD3, 0x030B1: 0xD4, 0x030B3: 0xD5, 0x030B5: 0xD6, 0x030B7: 0xD7,
    0x030B9: 0xD8, 0x030BB: 0xD9, 0x030BD: 0xDA, 0x030BF: 0xDB, 0x030C1: 0xDC,
    0x030C4: 0xDD, 0x030C6: 0xDE, 0x030C8: 0xDF, 0x030CA: 0xE0, 0x030CB: 0xE1,
    0x030CC: 0xE2, 0x030CD: 0xE3, 0x030CE: 0xE4, 0x030CF: 0xE5, 0x030D2: 0xE6,
    0x030D5: 0xE7, 0x030D8: 0xE8, 0x030DB: 0xE9, 0x030DE: 0xEA, 0x030DF: 0xEB,
    0x030E0: 0xEC, 0x030E1: 0xED, 0x030E2: 0xEE, 0x030E4: 0xEF, 0x030E6: 0xF0,
    0x030E8: 0xF1, 0x030E9: 0xF2, 0x030EA: 0xF3, 0x030EB: 0xF4, 0x030EC: 0xF5,
    0x030ED: 0xF6, 0x030EF: 0xF7, 0x030F2: 0xF8, 0x030F3: 0xF9, 0x030C3: 0xFA,
    0x030E3: 0xFB, 0x030E5: 0xFC, 0x030E7: 0xFD, 0x025DC: 0xFE, 0x025DD: 0xFF,
}
# Mathematical sans-serif italic capitals stand for the upper-case glyphs.
_EMOJI.update({0x1D622 + i: 0x41 + i for i in range(26)})


def convert_emojis(text: str) -> bytes:
    """Encode text as console bytes; ASCII passes through, unknown glyphs are dropped."""
    out = bytearray()
    for ch in text:
        code = ord(ch)
        if code < 0x80:
            out.append(code)
        else:
            mapped = _EMOJI.get(code)
            if mapped is not None:
                out.append(mapped)
    return bytes(out)