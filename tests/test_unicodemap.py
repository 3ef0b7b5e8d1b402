import pytest

from fcitxkeytrans.unicodemap import unicode_to_keysym


@pytest.mark.parametrize("codepoint", [32, 65, 97, 126, 160, 200, 255])
def test_latin1_maps_to_itself(codepoint):
    assert unicode_to_keysym(codepoint) == codepoint


@pytest.mark.parametrize("codepoint", [0, 31, 127, 159, 276, 1037, 10240])
def test_unmapped_codepoints_return_none(codepoint):
    assert unicode_to_keysym(codepoint) is None


def test_pinned_values_from_the_table():
    assert unicode_to_keysym(8364) == 8364
    assert unicode_to_keysym(65533) == 3550
    assert unicode_to_keysym(1488) == 3296


def test_hebrew_letters_are_consecutive():
    first = unicode_to_keysym(1488)
    assert [unicode_to_keysym(cp) for cp in range(1488, 1515)] == list(
        range(first, first + 27)
    )


def test_cyrillic_small_letters_follow_capitals():
    for capital in range(1040, 1072):
        assert unicode_to_keysym(capital + 32) == unicode_to_keysym(capital) - 32


def test_thai_digits_are_consecutive():
    zero = unicode_to_keysym(3664)
    assert [unicode_to_keysym(cp) for cp in range(3664, 3674)] == list(
        range(zero, zero + 10)
    )


def test_greek_sigma_variants_differ():
    assert unicode_to_keysym(962) == 2035
    assert unicode_to_keysym(963) == 2034


def test_hangul_compatibility_jamo_are_consecutive():
    first = unicode_to_keysym(12593)
    assert [unicode_to_keysym(cp) for cp in range(12593, 12644)] == list(
        range(first, first + 51)
    )