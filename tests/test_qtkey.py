import string

import pytest

from fcitxkeytrans.qtkey import QtKey, keysym_to_qt_key, lookup_keysym


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_ascii_lowercase_is_uppercased(letter):
    assert keysym_to_qt_key(ord(letter), letter) == ord(letter.upper())


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_printable_ascii_maps_to_itself(char):
    assert keysym_to_qt_key(ord(char), char) == ord(char)


@pytest.mark.parametrize("keysym", [0, 0x09, 0x1F, 0x7F])
def test_non_printable_ascii_gives_zero(keysym):
    assert keysym_to_qt_key(keysym, "") == 0


def test_single_character_text_is_uppercased():
    assert keysym_to_qt_key(0xE9, "é") == ord("É")


def test_text_without_simple_uppercase_keeps_codepoint():
    assert keysym_to_qt_key(0xDF, "ß") == ord("ß")


def test_dead_key_ignores_text():
    assert keysym_to_qt_key(0xFE51, "´") == QtKey.Dead_Acute


def test_control_text_falls_back_to_table():
    assert keysym_to_qt_key(0xFF0D, "\r") == QtKey.Return
    assert keysym_to_qt_key(0xFFFF, "\x7f") == QtKey.Delete


def test_multi_character_text_falls_back_to_table():
    assert keysym_to_qt_key(0xFF09, "ab") == QtKey.Tab


def test_non_bmp_text_is_not_a_single_character():
    assert keysym_to_qt_key(0x1001F600, "\U0001F600") == 0


def test_hardcoded_sysreq_keysyms():
    assert lookup_keysym(0x1005FF60) == QtKey.SysReq
    assert lookup_keysym(0x1007FF00) == QtKey.SysReq


def test_left_and_right_modifiers_share_qt_key():
    assert lookup_keysym(0xFFE1) == lookup_keysym(0xFFE2) == QtKey.Shift
    assert lookup_keysym(0xFFE3) == lookup_keysym(0xFFE4) == QtKey.Control
    assert lookup_keysym(0xFFE9) == lookup_keysym(0xFFEA) == QtKey.Alt


def test_clear_and_keypad_begin():
    assert lookup_keysym(0xFF0B) == QtKey.Delete
    assert lookup_keysym(0xFF9D) == QtKey.Clear


@pytest.mark.parametrize("n", range(10))
def test_keypad_digits(n):
    assert lookup_keysym(0xFFB0 + n) == ord(str(n))


@pytest.mark.parametrize("n", range(35))
def test_function_keys(n):
    assert lookup_keysym(0xFFBE + n) == QtKey[f"F{n + 1}"]


def test_keypad_function_keys_match_plain_ones():
    for n in range(4):
        assert lookup_keysym(0xFF91 + n) == lookup_keysym(0xFFBE + n)


def test_mode_switch_aliases():
    assert lookup_keysym(0xFF7E) == QtKey.Mode_switch


def test_launcher_keys():
    assert lookup_keysym(0x1008FF33) == QtKey.Launch0
    assert lookup_keysym(0x1008FF40) == QtKey.Launch2
    assert lookup_keysym(0x1008FF4E) == QtKey.LaunchG


def test_unknown_keysym_gives_zero():
    assert lookup_keysym(0x12345678) == 0
    assert keysym_to_qt_key(0x12345678, "") == 0


def test_every_table_result_is_a_qt_key():
    for keysym in (0xFF1B, 0xFE20, 0xFF67, 0xFE03, 0x1008FF2F, 0xFF62):
        result = lookup_keysym(keysym)
        assert result in set(QtKey)


@pytest.mark.parametrize("keysym", [-1, 1 << 32])
def test_out_of_range_keysym_raises(keysym):
    with pytest.raises(ValueError):
        lookup_keysym(keysym)
    with pytest.raises(ValueError):
        keysym_to_qt_key(keysym, "a")