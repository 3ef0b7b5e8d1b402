"""Map Qt key codes to keysyms, for keypad keys and for non-text keys."""

from __future__ import annotations

__all__ = ["keypad_qtcode_to_keysym", "qtcode_to_keysym"]

_KEYPAD_QTCODE_TO_KEYSYM: dict[int, int] = {
    32: 65408, 42: 65450, 43: 65451, 44: 65452, 45: 65453, 46: 65454,
    47: 65455, 48: 65456, 49: 65457, 50: 65458, 51: 65459, 52: 65460,
    53: 65461, 54: 65462, 55: 65463, 56: 65464, 57: 65465, 61: 65469,
    16777217: 65417, 16777221: 65421, 16777222: 65438, 16777223: 65439,
    16777227: 65437, 16777232: 65429, 16777233: 65436, 16777234: 65430,
    16777235: 65431, 16777236: 65432, 16777237: 65433, 16777238: 65434,
    16777239: 65435,
}

_QTCODE_TO_KEYSYM: dict[int, int] = {
    16777216: 65307, 16777217: 65289, 16777218: 65056, 16777219: 65288,
    16777220: 65293, 16777222: 65379, 16777223: 65535, 16777224: 65299,
    16777225: 65377, 16777232: 65360, 16777233: 65367, 16777234: 65361,
    16777235: 65362, 16777236: 65363, 16777237: 65364, 16777238: 65365,
    16777239: 65366, 16777248: 65505, 16777249: 65507, 16777250: 65511,
    16777251: 65513, 16777252: 65509, 16777253: 65407, 16777254: 65300,
    16777299: 65515, 16777300: 65516, 16777301: 65383, 16777302: 65517,
    16777303: 65518, 16777304: 65386, 16781571: 65027, 16781694: 65406,
}
# Function keys F1..F35.
_QTCODE_TO_KEYSYM.update((16777264 + n, 65470 + n) for n in range(35))
# Input method keys (Kanji .. Hangul_Special).
_QTCODE_TO_KEYSYM.update((16781600 + n, 65312 + n) for n in range(32))
# Dead keys (Dead_Grave .. Dead_Horn).
_QTCODE_TO_KEYSYM.update((16781904 + n, 65104 + n) for n in range(19))


def keypad_qtcode_to_keysym(qtcode: int) -> int | None:
    """Return the keypad keysym for a Qt key code, or ``None`` if there is none."""
    return _KEYPAD_QTCODE_TO_KEYSYM.get(qtcode)


def qtcode_to_keysym(qtcode: int) -> int | None:
    """Return the keysym for a non-text Qt key code, or ``None`` if there is none."""
    return _QTCODE_TO_KEYSYM.get(qtcode)