import pytest

from fcitxkeytrans.unicodekeys import unicode_has_keysym


@pytest.mark.parametrize(
    "codepoint", [300, 301, 399, 1370, 1417, 3517, 7840, 7929, 8363, 10240, 10495]
)
def test_listed_codepoints(codepoint):
    assert unicode_has_keysym(codepoint) is True


@pytest.mark.parametrize("codepoint", [0, 65, 299, 302, 1369, 8364, 10239, 10496])
def test_unlisted_codepoints(codepoint):
    assert unicode_has_keysym(codepoint) is False


def test_braille_block_is_complete():
    assert all(unicode_has_keysym(c) for c in range(10240, 10496))


def test_ascii_has_no_direct_keysym():
    assert not any(unicode_has_keysym(c) for c in range(128))


def test_georgian_range_bounds():
    assert all(unicode_has_keysym(c) for c in range(4304, 4343))
    assert not unicode_has_keysym(4303)
    assert not unicode_has_keysym(4343)