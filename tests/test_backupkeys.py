import pytest

from fcitxkeytrans.backupkeys import backup_qtcode_to_keysym
from fcitxkeytrans.unicodekeys import unicode_has_keysym


@pytest.mark.parametrize(
    ("qtcode", "keysym"),
    [
        (32, 32),
        (65, 65),
        (96, 96),
        (126, 126),
        (256, 960),
        (300, 16777516),
        (401, 2294),
        (913, 1985),
        (1025, 1699),
        (1040, 1729),
        (1071, 1745),
        (1170, 16778386),
        (1488, 3296),
        (1569, 1473),
        (3585, 3489),
        (4520, 3796),
        (7840, 16785056),
        (8361, 16785577),
        (8364, 8364),
        (10240, 16787456),
        (10495, 16787711),
        (12593, 3745),
        (12686, 3831),
        (65533, 3550),
    ],
)
def test_pinned_entries(qtcode, keysym):
    assert backup_qtcode_to_keysym(qtcode) == keysym


@pytest.mark.parametrize("qtcode", [0, 31, 97, 122, 127, 257, 402, 1072, 8869, 65534])
def test_missing_entries(qtcode):
    assert backup_qtcode_to_keysym(qtcode) is None


def test_lowercase_ascii_letters_absent():
    assert all(backup_qtcode_to_keysym(code) is None for code in range(97, 123))


def test_unicode_keysyms_only_for_codes_that_have_them():
    for code in range(0, 70000):
        keysym = backup_qtcode_to_keysym(code)
        if keysym is not None and keysym >= 0x1000000:
            assert keysym - 0x1000000 == code
            assert unicode_has_keysym(code)


def test_braille_block_is_complete():
    keysyms = [backup_qtcode_to_keysym(code) for code in range(10240, 10496)]
    assert None not in keysyms
    assert len(set(keysyms)) == 256