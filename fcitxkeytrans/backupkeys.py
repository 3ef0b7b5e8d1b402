"""Fallback map from Qt key codes of text keys to keysyms.

It is used for keys whose event carries no printable text. Upper-case
letters map to the keysym of the character that is typed unshifted.
"""

from __future__ import annotations

__all__ = ["backup_qtcode_to_keysym"]

_UNICODE_KEYSYM_BASE = 0x1000000

# Inclusive runs of Qt codes whose keysym is the code plus an offset.
_OFFSET_RUNS: tuple[tuple[int, int, int], ...] = (
    (32, 96, 0),  # ASCII punctuation, digits and capitals
    (123, 126, 0),  # braces, bar and tilde
    (913, 929, 1072),  # Greek capitals Alpha..Rho
    (932, 937, 1072),  # Greek capitals Tau..Omega
    (1488, 1514, 1808),  # Hebrew letters
    (1569, 1594, -96),  # Arabic letters
    (1600, 1618, -96),  # Arabic tatweel and marks
    (3585, 3642, -96),  # Thai consonants and vowels
    (3647, 3661, -96),  # Thai currency and marks
    (3664, 3673, -96),  # Thai digits
    (4520, 4546, -724),  # Hangul final jamo
    (12593, 12643, -8848),  # Hangul compatibility jamo
)

# Inclusive runs of Qt codes that map to keysyms in the Unicode keysym range.
_UNICODE_RUNS: tuple[tuple[int, int], ...] = (
    (300, 300), (372, 372), (374, 374), (399, 399), (415, 416),
    (431, 431), (437, 437), (465, 465), (486, 486),
    (1170, 1170), (1174, 1174), (1178, 1178), (1180, 1180), (1186, 1186),
    (1198, 1198), (1200, 1200), (1202, 1202), (1206, 1206), (1208, 1208),
    (1210, 1210), (1240, 1240), (1250, 1250), (1256, 1256), (1262, 1262),
    (1329, 1366), (1370, 1374), (1415, 1415), (1417, 1418),
    (1619, 1621), (1632, 1642), (1648, 1648), (1657, 1657), (1662, 1662),
    (1670, 1670), (1672, 1672), (1681, 1681), (1688, 1688), (1700, 1700),
    (1705, 1705), (1711, 1711), (1722, 1722), (1726, 1726), (1729, 1729),
    (1740, 1740), (1746, 1746), (1748, 1748), (1776, 1785),
    (3458, 3459), (3461, 3478), (3482, 3505), (3507, 3515), (3517, 3517),
    (3520, 3526), (3530, 3530), (3535, 3540), (3542, 3542), (3544, 3551),
    (3570, 3572), (4304, 4342),
    (7682, 7682), (7690, 7690), (7710, 7710), (7734, 7734), (7744, 7744),
    (7766, 7766), (7776, 7776), (7786, 7786), (7808, 7808), (7810, 7810),
    (7812, 7812), (7818, 7818),
    (8304, 8304), (8308, 8313), (8320, 8329), (8352, 8363),
    (8706, 8706), (8709, 8709), (8712, 8713), (8715, 8715), (8730, 8732),
    (8748, 8749), (8757, 8757), (8775, 8776), (8802, 8803),
    (10240, 10495),
)

# Capitals of Latin Extended Additional with a Unicode keysym, every other code.
_UNICODE_EVEN_RANGE = range(7840, 7929, 2)

_EXPLICIT: dict[int, int] = {
    # Latin extended capitals
    256: 960, 258: 451, 260: 417, 262: 454, 264: 710, 266: 709, 268: 456,
    270: 463, 272: 464, 274: 938, 278: 972, 280: 458, 282: 460, 284: 728,
    286: 683, 288: 725, 290: 939, 292: 678, 294: 673, 296: 933, 298: 975,
    302: 967, 304: 681, 308: 684, 310: 979, 312: 930, 313: 453, 315: 934,
    317: 421, 321: 419, 323: 465, 325: 977, 327: 466, 330: 957, 332: 978,
    336: 469, 340: 448, 342: 931, 344: 472, 346: 422, 348: 734, 350: 426,
    352: 425, 354: 478, 356: 427, 358: 940, 360: 989, 362: 990, 364: 733,
    366: 473, 368: 475, 370: 985, 377: 428, 379: 431, 381: 430, 401: 2294,
    # spacing modifiers
    711: 439, 728: 418, 729: 511, 731: 434, 733: 445,
    # Greek
    901: 1966, 902: 1953, 904: 1954, 905: 1955, 906: 1956, 908: 1959,
    910: 1960, 911: 1963, 912: 1974, 931: 2002, 938: 1957, 939: 1961,
    944: 1978,
    # Cyrillic capitals, mapped to the keysyms of the small letters
    1025: 1699, 1026: 1697, 1027: 1698, 1028: 1700, 1029: 1701, 1030: 1702,
    1031: 1703, 1032: 1704, 1033: 1705, 1034: 1706, 1035: 1707, 1036: 1708,
    1038: 1710, 1039: 1711,
    1040: 1729, 1041: 1730, 1042: 1751, 1043: 1735, 1044: 1732, 1045: 1733,
    1046: 1750, 1047: 1754, 1048: 1737, 1049: 1738, 1050: 1739, 1051: 1740,
    1052: 1741, 1053: 1742, 1054: 1743, 1055: 1744, 1056: 1746, 1057: 1747,
    1058: 1748, 1059: 1749, 1060: 1734, 1061: 1736, 1062: 1731, 1063: 1758,
    1064: 1755, 1065: 1757, 1066: 1759, 1067: 1753, 1068: 1752, 1069: 1756,
    1070: 1728, 1071: 1745,
    # Arabic punctuation
    1548: 1452, 1563: 1467, 1567: 1471,
    # Hangul final jamo (archaic)
    4587: 3832, 4592: 3833, 4601: 3834,
    # general punctuation
    8194: 2722, 8195: 2721, 8196: 2723, 8197: 2724, 8199: 2725, 8200: 2726,
    8201: 2727, 8202: 2728, 8210: 2747, 8211: 2730, 8212: 2729, 8213: 1967,
    8215: 3295, 8216: 2768, 8217: 2769, 8218: 2813, 8220: 2770, 8221: 2771,
    8222: 2814, 8224: 2801, 8225: 2802, 8226: 2790, 8229: 2735, 8230: 2734,
    8242: 2774, 8243: 2775, 8248: 2812, 8254: 1150,
    # currency, letterlike symbols and number forms
    8364: 8364, 8453: 2744, 8470: 1712, 8471: 2811, 8478: 2772, 8482: 2761,
    8531: 2736, 8532: 2737, 8533: 2738, 8534: 2739, 8535: 2740, 8536: 2741,
    8537: 2742, 8538: 2743, 8539: 2755, 8540: 2756, 8541: 2757, 8542: 2758,
    # arrows and mathematical operators
    8592: 2299, 8593: 2300, 8594: 2301, 8595: 2302, 8658: 2254, 8660: 2253,
    8711: 2245, 8728: 3018, 8733: 2241, 8734: 2242, 8743: 2270, 8744: 2271,
    8745: 2268, 8746: 2269, 8747: 2239, 8756: 2240, 8764: 2248, 8771: 2249,
    8800: 2237, 8801: 2255, 8804: 2236, 8805: 2238, 8834: 2266, 8835: 2267,
    8866: 3036, 8867: 3068, 8868: 3022,
    # technical
    8968: 3027, 8970: 3012, 8981: 2810, 8992: 2212, 8993: 2213, 9001: 2748,
    9002: 2750, 9109: 3020, 9115: 2219, 9117: 2220, 9118: 2221, 9120: 2222,
    9121: 2215, 9123: 2216, 9124: 2217, 9126: 2218, 9128: 2223, 9132: 2224,
    9143: 2209, 9146: 2543, 9147: 2544, 9148: 2546, 9149: 2547,
    # control pictures, box drawing and shapes
    9225: 2530, 9226: 2533, 9227: 2537, 9228: 2531, 9229: 2532, 9252: 2536,
    9472: 2211, 9474: 2214, 9484: 2210, 9488: 2539, 9492: 2541, 9496: 2538,
    9500: 2548, 9508: 2549, 9516: 2551, 9524: 2550, 9532: 2542, 9618: 2529,
    9642: 2791, 9643: 2785, 9644: 2779, 9645: 2786, 9646: 2783, 9647: 2767,
    9650: 2792, 9651: 2787, 9654: 2781, 9655: 2765, 9660: 2793, 9661: 2788,
    9664: 2780, 9665: 2764, 9670: 2528, 9675: 2766, 9679: 2782, 9702: 2784,
    9734: 2789, 9742: 2809, 9747: 2762, 9756: 2794, 9758: 2795, 9792: 2808,
    9794: 2807, 9827: 2796, 9829: 2798, 9830: 2797, 9837: 2806, 9839: 2805,
    10003: 2803, 10007: 2804, 10013: 2777, 10016: 2800,
    # CJK punctuation and katakana
    12289: 1188, 12290: 1185, 12300: 1186, 12301: 1187, 12443: 1246,
    12444: 1247, 12449: 1191, 12450: 1201, 12451: 1192, 12452: 1202,
    12453: 1193, 12454: 1203, 12455: 1194, 12456: 1204, 12457: 1195,
    12458: 1205, 12459: 1206, 12461: 1207, 12463: 1208, 12465: 1209,
    12467: 1210, 12469: 1211, 12471: 1212, 12473: 1213, 12475: 1214,
    12477: 1215, 12479: 1216, 12481: 1217, 12483: 1199, 12484: 1218,
    12486: 1219, 12488: 1220, 12490: 1221, 12491: 1222, 12492: 1223,
    12493: 1224, 12494: 1225, 12495: 1226, 12498: 1227, 12501: 1228,
    12504: 1229, 12507: 1230, 12510: 1231, 12511: 1232, 12512: 1233,
    12513: 1234, 12514: 1235, 12515: 1196, 12516: 1236, 12517: 1197,
    12518: 1237, 12519: 1198, 12520: 1238, 12521: 1239, 12522: 1240,
    12523: 1241, 12524: 1242, 12525: 1243, 12527: 1244, 12530: 1190,
    12531: 1245, 12539: 1189, 12540: 1200,
    # Hangul compatibility jamo (archaic)
    12653: 3823, 12657: 3824, 12664: 3825, 12671: 3826, 12673: 3827,
    12676: 3828, 12678: 3829, 12685: 3830, 12686: 3831,
    # replacement character
    65533: 3550,
}


def _build_table() -> dict[int, int]:
    table: dict[int, int] = {}
    for first, last, offset in _OFFSET_RUNS:
        table.update((code, code + offset) for code in range(first, last + 1))
    unicode_codes = [
        code for first, last in _UNICODE_RUNS for code in range(first, last + 1)
    ]
    unicode_codes.extend(_UNICODE_EVEN_RANGE)
    table.update((code, code + _UNICODE_KEYSYM_BASE) for code in unicode_codes)
    table.update(_EXPLICIT)
    return table


_BACKUP_QTCODE_TO_KEYSYM: dict[int, int] = _build_table()


def backup_qtcode_to_keysym(qtcode: int) -> int | None:
    """Return the fallback keysym for a Qt key code, or ``None`` if there is none."""
    return _BACKUP_QTCODE_TO_KEYSYM.get(qtcode)