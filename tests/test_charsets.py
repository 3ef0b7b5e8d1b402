import pytest

from fcitxkeytrans.charsets import keysym_to_unicode


@pytest.mark.parametrize(
    "byte3, byte4, expected",
    [
        (0x04, 0xA1, "\u3002"),
        (0x04, 0x7E, "\u203e"),
        (0x06, 0xC1, "\u0430"),
        (0x07, 0xC1, "\u0391"),
        (0x09, 0xE0, "\u25c6"),
        (0x0E, 0xA1, "\u3131"),
        (0x0E, 0xFF, "\u20a9"),
    ],
)
def test_known_characters(byte3, byte4, expected):
    assert keysym_to_unicode(byte3, byte4) == expected


@pytest.mark.parametrize(
    "byte3, byte4",
    [
        (0x04, 0xA0),  # first katakana slot is below the range
        (0x04, 0xE0),  # katakana range is exclusive at the top
        (0x06, 0xA0),
        (0x06, 0xAD),  # hole in the Cyrillic table
        (0x09, 0xDF),
        (0x05, 0xC1),  # charset without a table
        (0x00, 0x41),
    ],
)
def test_unmapped_returns_none(byte3, byte4):
    assert keysym_to_unicode(byte3, byte4) is None


@pytest.mark.parametrize("byte3", [0x04, 0x06, 0x07, 0x08, 0x09, 0x0A, 0x0B, 0x0E])
def test_every_result_is_single_character(byte3):
    results = [keysym_to_unicode(byte3, byte4) for byte4 in range(256)]
    mapped = [r for r in results if r is not None]
    assert mapped
    assert all(len(r) == 1 and r != "\x00" for r in mapped)


def test_special_table_covers_top_of_range():
    assert keysym_to_unicode(0x09, 0xFF) is None
    assert keysym_to_unicode(0x09, 0xF8) == "\u2502"


@pytest.mark.parametrize("byte3, byte4", [(256, 0), (0, 256), (-1, 0xA1)])
def test_out_of_range_bytes_raise(byte3, byte4):
    with pytest.raises(ValueError):
        keysym_to_unicode(byte3, byte4)