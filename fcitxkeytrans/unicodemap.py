"""Map Unicode code points to the legacy X keysyms that type them."""

from __future__ import annotations

__all__ = ["unicode_to_keysym"]

# Inclusive runs of code points whose keysym is the code point plus an offset.
_OFFSET_RUNS: tuple[tuple[int, int, int], ...] = (
    (32, 126, 0),  # ASCII printable
    (160, 255, 0),  # Latin-1 supplement
    (913, 929, 1072),  # Greek capitals Alpha..Rho
    (932, 937, 1072),  # Greek capitals Tau..Omega
    (945, 961, 1072),  # Greek small alpha..rho
    (964, 969, 1072),  # Greek small tau..omega
    (1488, 1514, 1808),  # Hebrew letters
    (1569, 1594, -96),  # Arabic letters
    (1600, 1618, -96),  # Arabic tatweel and marks
    (3585, 3642, -96),  # Thai consonants and vowels
    (3647, 3661, -96),  # Thai currency and marks
    (3664, 3673, -96),  # Thai digits
    (4520, 4546, -724),  # Hangul final jamo
    (12593, 12643, -8848),  # Hangul compatibility jamo
)

_CYRILLIC_CAPITALS: dict[int, int] = {
    1040: 1761, 1041: 1762, 1042: 1783, 1043: 1767, 1044: 1764, 1045: 1765,
    1046: 1782, 1047: 1786, 1048: 1769, 1049: 1770, 1050: 1771, 1051: 1772,
    1052: 1773, 1053: 1774, 1054: 1775, 1055: 1776, 1056: 1778, 1057: 1779,
    1058: 1780, 1059: 1781, 1060: 1766, 1061: 1768, 1062: 1763, 1063: 1790,
    1064: 1787, 1065: 1789, 1066: 1791, 1067: 1785, 1068: 1784, 1069: 1788,
    1070: 1760, 1071: 1777,
}

_EXPLICIT: dict[int, int] = {
    # Latin extended
    256: 960, 257: 992, 258: 451, 259: 483, 260: 417, 261: 433, 262: 454,
    263: 486, 264: 710, 265: 742, 266: 709, 267: 741, 268: 456, 269: 488,
    270: 463, 271: 495, 272: 464, 273: 496, 274: 938, 275: 954, 278: 972,
    279: 1004, 280: 458, 281: 490, 282: 460, 283: 492, 284: 728, 285: 760,
    286: 683, 287: 699, 288: 725, 289: 757, 290: 939, 291: 955, 292: 678,
    293: 694, 294: 673, 295: 689, 296: 933, 297: 949, 298: 975, 299: 1007,
    302: 967, 303: 999, 304: 681, 305: 697, 308: 684, 309: 700, 310: 979,
    311: 1011, 312: 930, 313: 453, 314: 485, 315: 934, 316: 950, 317: 421,
    318: 437, 321: 419, 322: 435, 323: 465, 324: 497, 325: 977, 326: 1009,
    327: 466, 328: 498, 330: 957, 331: 959, 332: 978, 333: 1010, 336: 469,
    337: 501, 340: 448, 341: 480, 342: 931, 343: 947, 344: 472, 345: 504,
    346: 422, 347: 438, 348: 734, 349: 766, 350: 426, 351: 442, 352: 425,
    353: 441, 354: 478, 355: 510, 356: 427, 357: 443, 358: 940, 359: 956,
    360: 989, 361: 1021, 362: 990, 363: 1022, 364: 733, 365: 765, 366: 473,
    367: 505, 368: 475, 369: 507, 370: 985, 371: 1017, 377: 428, 378: 444,
    379: 431, 380: 447, 381: 430, 382: 446, 402: 2294,
    # spacing modifiers
    711: 439, 728: 418, 729: 511, 731: 434, 733: 445,
    # Greek
    901: 1966, 902: 1953, 904: 1954, 905: 1955, 906: 1956, 908: 1959,
    910: 1960, 911: 1963, 912: 1974, 931: 2002, 938: 1957, 939: 1961,
    940: 1969, 941: 1970, 942: 1971, 943: 1972, 944: 1978, 962: 2035,
    963: 2034, 970: 1973, 971: 1977, 972: 1975, 973: 1976, 974: 1979,
    # Cyrillic
    1025: 1715, 1026: 1713, 1027: 1714, 1028: 1716, 1029: 1717, 1030: 1718,
    1031: 1719, 1032: 1720, 1033: 1721, 1034: 1722, 1035: 1723, 1036: 1724,
    1038: 1726, 1039: 1727,
    1105: 1699, 1106: 1697, 1107: 1698, 1108: 1700, 1109: 1701, 1110: 1702,
    1111: 1703, 1112: 1704, 1113: 1705, 1114: 1706, 1115: 1707, 1116: 1708,
    1118: 1710, 1119: 1711,
    # Arabic punctuation
    1548: 1452, 1563: 1467, 1567: 1471,
    # Hangul final jamo (archaic)
    4587: 3832, 4592: 3833, 4601: 3834,
    # general punctuation, letterlike symbols and number forms
    8194: 2722, 8195: 2721, 8196: 2723, 8197: 2724, 8199: 2725, 8200: 2726,
    8201: 2727, 8202: 2728, 8210: 2747, 8211: 2730, 8212: 2729, 8213: 1967,
    8215: 3295, 8216: 2768, 8217: 2769, 8218: 2813, 8220: 2770, 8221: 2771,
    8222: 2814, 8224: 2801, 8225: 2802, 8226: 2790, 8229: 2735, 8230: 2734,
    8242: 2774, 8243: 2775, 8248: 2812, 8254: 1150, 8361: 3839, 8364: 8364,
    8453: 2744, 8470: 1712, 8471: 2811, 8478: 2772, 8482: 2761, 8531: 2736,
    8532: 2737, 8533: 2738, 8534: 2739, 8535: 2740, 8536: 2741, 8537: 2742,
    8538: 2743, 8539: 2755, 8540: 2756, 8541: 2757, 8542: 2758,
    # arrows and mathematical operators
    8592: 2299, 8593: 2300, 8594: 2301, 8595: 2302, 8658: 2254, 8660: 2253,
    8706: 2287, 8711: 2245, 8728: 3018, 8730: 2262, 8733: 2241, 8734: 2242,
    8743: 2270, 8744: 2271, 8745: 2268, 8746: 2269, 8747: 2239, 8756: 2240,
    8764: 2248, 8771: 2249, 8800: 2237, 8801: 2255, 8804: 2236, 8805: 2238,
    8834: 2266, 8835: 2267, 8866: 3036, 8867: 3068, 8868: 3022, 8869: 3010,
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
        table.update((cp, cp + offset) for cp in range(first, last + 1))
    table.update(_CYRILLIC_CAPITALS)
    # Small Cyrillic letters sit 32 code points and 32 keysyms from capitals.
    table.update(
        (cp + 32, keysym - 32) for cp, keysym in _CYRILLIC_CAPITALS.items()
    )
    table.update(_EXPLICIT)
    return table


_UNICODE_TO_KEYSYM: dict[int, int] = _build_table()


def unicode_to_keysym(codepoint: int) -> int | None:
    """Return the legacy keysym for a code point, or ``None`` if there is none."""
    return _UNICODE_TO_KEYSYM.get(codepoint)