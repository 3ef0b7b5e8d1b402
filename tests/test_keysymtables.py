import pytest

from fcitxkeytrans.keysymtables import translate_keysym
from fcitxkeytrans.qtkey import QtKey, lookup_keysym


@pytest.mark.parametrize(
    ("keysym", "qtkey"),
    [
        (0xFF1B, QtKey.Escape),
        (0xFF0D, QtKey.Return),
        (0xFF0B, QtKey.Delete),
        (0x1005FF60, QtKey.SysReq),
        (0x1007FF00, QtKey.SysReq),
        (0x1000FF74, QtKey.Backtab),
        (0x1005FF10, QtKey.F11),
        (0x1005FF11, QtKey.F12),
        (0xFF9D, QtKey.Clear),
        (0xFF23, QtKey.Henkan),
        (0xFE62, QtKey.Dead_Horn),
        (0x1008FF55, QtKey.Clear),
        (0x1008FF33, QtKey.Launch0),
        (0x1008FF40, QtKey.Launch2),
        (0x1008FF4F, QtKey.LaunchH),
        (0x1008FF2F, QtKey.Sleep),
    ],
)
def test_pinned_entries(keysym, qtkey):
    assert translate_keysym(keysym) == int(qtkey)


def test_keypad_multiply_is_asterisk():
    assert translate_keysym(0xFFAA) == ord("*")


@pytest.mark.parametrize(
    "keysym",
    [0, 0x41, 0xFFBE, 0xFFB0, 0xFF15, 0xFF31, 0xFF69, 0x1008FF31, 0x12345678],
)
def test_unknown_keysyms_give_minus_one(keysym):
    assert translate_keysym(keysym) == -1


@pytest.mark.parametrize(
    "keysym",
    [0xFF09, 0xFE20, 0xFF50, 0xFFE1, 0xFFE9, 0xFE50, 0xFF37, 0x1008FF26, 0x1008FF94],
)
def test_agrees_with_platform_key_table(keysym):
    assert translate_keysym(keysym) == lookup_keysym(keysym)


def test_modifier_pairs_share_a_key():
    assert translate_keysym(0xFFE1) == translate_keysym(0xFFE2)
    assert translate_keysym(0xFFE3) == translate_keysym(0xFFE4)
    assert translate_keysym(0xFFE9) == translate_keysym(0xFFEA)