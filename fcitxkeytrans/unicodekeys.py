"""Code points that have a keysym of their own in the Unicode keysym range."""

from __future__ import annotations

__all__ = ["unicode_has_keysym"]

# Inclusive runs of code points whose keysym is the code point plus 0x1000000.
_RUNS: tuple[tuple[int, int], ...] = (
    (300, 301),
    (372, 375),
    (399, 399),
    (415, 417),
    (431, 432),
    (437, 438),
    (465, 466),
    (486, 487),
    (601, 601),
    (629, 629),
    (1170, 1171),
    (1174, 1175),
    (1178, 1181),
    (1186, 1187),
    (1198, 1203),
    (1206, 1211),
    (1240, 1241),
    (1250, 1251),
    (1256, 1257),
    (1262, 1263),
    (1329, 1366),
    (1370, 1374),
    (1377, 1415),
    (1417, 1418),
    (1619, 1621),
    (1632, 1642),
    (1648, 1648),
    (1657, 1657),
    (1662, 1662),
    (1670, 1670),
    (1672, 1672),
    (1681, 1681),
    (1688, 1688),
    (1700, 1700),
    (1705, 1705),
    (1711, 1711),
    (1722, 1722),
    (1726, 1726),
    (1729, 1729),
    (1740, 1740),
    (1746, 1746),
    (1748, 1748),
    (1776, 1785),
    (3458, 3459),
    (3461, 3478),
    (3482, 3505),
    (3507, 3515),
    (3517, 3517),
    (3520, 3526),
    (3530, 3530),
    (3535, 3540),
    (3542, 3542),
    (3544, 3551),
    (3570, 3572),
    (4304, 4342),
    (7682, 7683),
    (7690, 7691),
    (7710, 7711),
    (7734, 7735),
    (7744, 7745),
    (7766, 7767),
    (7776, 7777),
    (7786, 7787),
    (7808, 7813),
    (7818, 7819),
    (7840, 7929),
    (8304, 8304),
    (8308, 8313),
    (8320, 8329),
    (8352, 8363),
    (8706, 8706),
    (8709, 8709),
    (8712, 8713),
    (8715, 8715),
    (8730, 8732),
    (8748, 8749),
    (8757, 8757),
    (8775, 8776),
    (8802, 8803),
    (10240, 10495),
)

_CODEPOINTS: frozenset[int] = frozenset(
    codepoint for first, last in _RUNS for codepoint in range(first, last + 1)
)


def unicode_has_keysym(codepoint: int) -> bool:
    """Tell whether a code point maps directly to a Unicode keysym."""
    return codepoint in _CODEPOINTS