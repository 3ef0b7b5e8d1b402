"""Convert legacy X keysyms of the non-Latin charsets to Unicode characters."""

from __future__ import annotations

__all__ = ["keysym_to_unicode"]

_KATAKANA: tuple[int, ...] = (
    0x0000, 0x3002, 0x300C, 0x300D, 0x3001, 0x30FB, 0x30F2, 0x30A1,
    0x30A3, 0x30A5, 0x30A7, 0x30A9, 0x30E3, 0x30E5, 0x30E7, 0x30C3,
    0x30FC, 0x30A2, 0x30A4, 0x30A6, 0x30A8, 0x30AA, 0x30AB, 0x30AD,
    0x30AF, 0x30B1, 0x30B3, 0x30B5, 0x30B7, 0x30B9, 0x30BB, 0x30BD,
    0x30BF, 0x30C1, 0x30C4, 0x30C6, 0x30C8, 0x30CA, 0x30CB, 0x30CC,
    0x30CD, 0x30CE, 0x30CF, 0x30D2, 0x30D5, 0x30D8, 0x30DB, 0x30DE,
    0x30DF, 0x30E0, 0x30E1, 0x30E2, 0x30E4, 0x30E6, 0x30E8, 0x30E9,
    0x30EA, 0x30EB, 0x30EC, 0x30ED, 0x30EF, 0x30F3, 0x309B, 0x309C,
)

_CYRILLIC: tuple[int, ...] = (
    0x0000, 0x0452, 0x0453, 0x0451, 0x0454, 0x0455, 0x0456, 0x0457, 0x0458,
    0x0459, 0x045A, 0x045B, 0x045C, 0x0000, 0x045E, 0x045F, 0x2116, 0x0402,
    0x0403, 0x0401, 0x0404, 0x0405, 0x0406, 0x0407, 0x0408, 0x0409, 0x040A,
    0x040B, 0x040C, 0x0000, 0x040E, 0x040F, 0x044E, 0x0430, 0x0431, 0x0446,
    0x0434, 0x0435, 0x0444, 0x0433, 0x0445, 0x0438, 0x0439, 0x043A, 0x043B,
    0x043C, 0x043D, 0x043E, 0x043F, 0x044F, 0x0440, 0x0441, 0x0442, 0x0443,
    0x0436, 0x0432, 0x044C, 0x044B, 0x0437, 0x0448, 0x044D, 0x0449, 0x0447,
    0x044A, 0x042E, 0x0410, 0x0411, 0x0426, 0x0414, 0x0415, 0x0424, 0x0413,
    0x0425, 0x0418, 0x0419, 0x041A, 0x041B, 0x041C, 0x041D, 0x041E, 0x041F,
    0x042F, 0x0420, 0x0421, 0x0422, 0x0423, 0x0416, 0x0412, 0x042C, 0x042B,
    0x0417, 0x0428, 0x042D, 0x0429, 0x0427, 0x042A,
)

_GREEK: tuple[int, ...] = (
    0x0000, 0x0386, 0x0388, 0x0389, 0x038A, 0x03AA, 0x0000, 0x038C, 0x038E,
    0x03AB, 0x0000, 0x038F, 0x0000, 0x0000, 0x0385, 0x2015, 0x0000, 0x03AC,
    0x03AD, 0x03AE, 0x03AF, 0x03CA, 0x0390, 0x03CC, 0x03CD, 0x03CB, 0x03B0,
    0x03CE, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0391, 0x0392, 0x0393,
    0x0394, 0x0395, 0x0396, 0x0397, 0x0398, 0x0399, 0x039A, 0x039B, 0x039C,
    0x039D, 0x039E, 0x039F, 0x03A0, 0x03A1, 0x03A3, 0x0000, 0x03A4, 0x03A5,
    0x03A6, 0x03A7, 0x03A8, 0x03A9, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x03B1, 0x03B2, 0x03B3, 0x03B4, 0x03B5, 0x03B6, 0x03B7,
    0x03B8, 0x03B9, 0x03BA, 0x03BB, 0x03BC, 0x03BD, 0x03BE, 0x03BF, 0x03C0,
    0x03C1, 0x03C3, 0x03C2, 0x03C4, 0x03C5, 0x03C6, 0x03C7, 0x03C8, 0x03C9,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
)

_TECHNICAL: tuple[int, ...] = (
    0x0000, 0x23B7, 0x250C, 0x2500, 0x2320, 0x2321, 0x2502, 0x23A1, 0x23A3,
    0x23A4, 0x23A6, 0x239B, 0x239D, 0x239E, 0x23A0, 0x23A8, 0x23AC, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x2264, 0x2260, 0x2265, 0x222B, 0x2234, 0x221D, 0x221E, 0x0000,
    0x0000, 0x2207, 0x0000, 0x0000, 0x223C, 0x2243, 0x0000, 0x0000, 0x0000,
    0x21D4, 0x21D2, 0x2261, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x221A, 0x0000, 0x0000, 0x0000, 0x2282, 0x2283, 0x2229, 0x222A, 0x2227,
    0x2228, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x2202, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0192, 0x0000, 0x0000, 0x0000,
    0x0000, 0x2190, 0x2191, 0x2192, 0x2193, 0x0000,
)

_SPECIAL: tuple[int, ...] = (
    0x25C6, 0x2592, 0x2409, 0x240C, 0x240D, 0x240A, 0x0000, 0x0000,
    0x2424, 0x240B, 0x2518, 0x2510, 0x250C, 0x2514, 0x253C, 0x23BA,
    0x23BB, 0x2500, 0x23BC, 0x23BD, 0x251C, 0x2524, 0x2534, 0x252C,
    0x2502, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
)

_PUBLISHING: tuple[int, ...] = (
    0x0000, 0x2003, 0x2002, 0x2004, 0x2005, 0x2007, 0x2008, 0x2009, 0x200A,
    0x2014, 0x2013, 0x0000, 0x0000, 0x0000, 0x2026, 0x2025, 0x2153, 0x2154,
    0x2155, 0x2156, 0x2157, 0x2158, 0x2159, 0x215A, 0x2105, 0x0000, 0x0000,
    0x2012, 0x2329, 0x0000, 0x232A, 0x0000, 0x0000, 0x0000, 0x0000, 0x215B,
    0x215C, 0x215D, 0x215E, 0x0000, 0x0000, 0x2122, 0x2613, 0x0000, 0x25C1,
    0x25B7, 0x25CB, 0x25AF, 0x2018, 0x2019, 0x201C, 0x201D, 0x211E, 0x0000,
    0x2032, 0x2033, 0x0000, 0x271D, 0x0000, 0x25AC, 0x25C0, 0x25B6, 0x25CF,
    0x25AE, 0x25E6, 0x25AB, 0x25AD, 0x25B3, 0x25BD, 0x2606, 0x2022, 0x25AA,
    0x25B2, 0x25BC, 0x261C, 0x261E, 0x2663, 0x2666, 0x2665, 0x0000, 0x2720,
    0x2020, 0x2021, 0x2713, 0x2717, 0x266F, 0x266D, 0x2642, 0x2640, 0x260E,
    0x2315, 0x2117, 0x2038, 0x201A, 0x201E, 0x0000,
)

_APL: tuple[int, ...] = (
    0x0000, 0x0000, 0x0000, 0x003C, 0x0000, 0x0000, 0x003E, 0x0000, 0x2228,
    0x2227, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x00AF, 0x0000, 0x22A5, 0x2229,
    0x230A, 0x0000, 0x005F, 0x0000, 0x0000, 0x0000, 0x2218, 0x0000, 0x2395,
    0x0000, 0x22A4, 0x25CB, 0x0000, 0x0000, 0x0000, 0x2308, 0x0000, 0x0000,
    0x222A, 0x0000, 0x2283, 0x0000, 0x2282, 0x0000, 0x22A2, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000, 0x0000,
    0x0000, 0x0000, 0x22A3, 0x0000, 0x0000, 0x0000,
)

_KOREAN: tuple[int, ...] = (
    0x0000, 0x3131, 0x3132, 0x3133, 0x3134, 0x3135, 0x3136, 0x3137, 0x3138,
    0x3139, 0x313A, 0x313B, 0x313C, 0x313D, 0x313E, 0x313F, 0x3140, 0x3141,
    0x3142, 0x3143, 0x3144, 0x3145, 0x3146, 0x3147, 0x3148, 0x3149, 0x314A,
    0x314B, 0x314C, 0x314D, 0x314E, 0x314F, 0x3150, 0x3151, 0x3152, 0x3153,
    0x3154, 0x3155, 0x3156, 0x3157, 0x3158, 0x3159, 0x315A, 0x315B, 0x315C,
    0x315D, 0x315E, 0x315F, 0x3160, 0x3161, 0x3162, 0x3163, 0x11A8, 0x11A9,
    0x11AA, 0x11AB, 0x11AC, 0x11AD, 0x11AE, 0x11AF, 0x11B0, 0x11B1, 0x11B2,
    0x11B3, 0x11B4, 0x11B5, 0x11B6, 0x11B7, 0x11B8, 0x11B9, 0x11BA, 0x11BB,
    0x11BC, 0x11BD, 0x11BE, 0x11BF, 0x11C0, 0x11C1, 0x11C2, 0x316D, 0x3171,
    0x3178, 0x317F, 0x3181, 0x3184, 0x3186, 0x318D, 0x318E, 0x11EB, 0x11F0,
    0x11F9, 0x0000, 0x0000, 0x0000, 0x0000, 0x20A9,
)

_OVERLINE = 0x203E

# Charset byte -> (table, first byte4 that indexes it, index offset).
# The katakana table is handled separately because its range is bounded.
_TABLES: dict[int, tuple[tuple[int, ...], int]] = {
    0x06: (_CYRILLIC, 0xA0),
    0x07: (_GREEK, 0xA0),
    0x08: (_TECHNICAL, 0xA0),
    0x0A: (_PUBLISHING, 0xA0),
    0x0B: (_APL, 0xA0),
    0x0E: (_KOREAN, 0xA0),
}


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be a byte, got {value!r}")


def _lookup(byte3: int, byte4: int) -> int:
    if byte3 == 0x04:
        if 0xA0 < byte4 < 0xE0:
            return _KATAKANA[byte4 - 0xA0]
        if byte4 == 0x7E:
            return _OVERLINE
        return 0
    if byte3 == 0x09:
        return _SPECIAL[byte4 - 0xE0] if byte4 >= 0xE0 else 0
    entry = _TABLES.get(byte3)
    if entry is None:
        return 0
    table, base = entry
    return table[byte4 - base] if byte4 > base else 0


def keysym_to_unicode(byte3: int, byte4: int) -> str | None:
    """Return the character for a keysym given by its charset and low byte.

    ``byte3`` selects the charset (kana, Cyrillic, Greek, technical, special,
    publishing, APL or Korean) and ``byte4`` the symbol within it. Returns
    ``None`` when the keysym has no character.
    """
    _check_byte("byte3", byte3)
    _check_byte("byte4", byte4)
    codepoint = _lookup(byte3, byte4)
    return chr(codepoint) if codepoint else None