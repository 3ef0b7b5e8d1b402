import pytest

from fcitxkeytrans.keypadkeys import keypad_qtcode_to_keysym, qtcode_to_keysym


def test_keypad_pinned_values():
    assert keypad_qtcode_to_keysym(32) == 65408
    assert keypad_qtcode_to_keysym(16777221) == 65421
    assert keypad_qtcode_to_keysym(61) == 65469


def test_keypad_digits_are_consecutive():
    zero = keypad_qtcode_to_keysym(48)
    assert [keypad_qtcode_to_keysym(code) for code in range(48, 58)] == list(
        range(zero, zero + 10)
    )


@pytest.mark.parametrize("qtcode", [0, 33, 65, 16777216, 16777264])
def test_keypad_unknown_returns_none(qtcode):
    assert keypad_qtcode_to_keysym(qtcode) is None


def test_qtcode_pinned_values():
    assert qtcode_to_keysym(16777216) == 65307
    assert qtcode_to_keysym(16777223) == 65535
    assert qtcode_to_keysym(16781571) == 65027


def test_function_keys_are_consecutive():
    f1 = qtcode_to_keysym(16777264)
    assert [qtcode_to_keysym(16777264 + n) for n in range(35)] == list(
        range(f1, f1 + 35)
    )


def test_dead_keys_are_consecutive():
    grave = qtcode_to_keysym(16781904)
    assert [qtcode_to_keysym(16781904 + n) for n in range(19)] == list(
        range(grave, grave + 19)
    )


@pytest.mark.parametrize("qtcode", [0, 32, 65, 16777221, 16777299 + 100])
def test_qtcode_unknown_returns_none(qtcode):
    assert qtcode_to_keysym(qtcode) is None


def test_shared_codes_differ_between_tables():
    assert keypad_qtcode_to_keysym(16777217) == 65417
    assert qtcode_to_keysym(16777217) == 65289