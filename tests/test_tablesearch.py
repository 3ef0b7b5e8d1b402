import pytest

from fcitxkeytrans.tablesearch import lookup

TABLE = ((1, 10), (2, 20), (2, 21), (3, 30), (7, 70))


@pytest.mark.parametrize("code, expected", [(1, 10), (3, 30), (7, 70)])
def test_finds_present_keys(code, expected):
    assert lookup(TABLE, code) == expected


def test_duplicate_key_returns_first_entry():
    assert lookup(TABLE, 2) == 20


@pytest.mark.parametrize("code", [0, 4, 6, 8, -5])
def test_missing_keys_give_none(code):
    assert lookup(TABLE, code) is None


def test_empty_table():
    assert lookup((), 1) is None


def test_every_entry_found_in_list_table():
    table = [(n * 3, n) for n in range(50)]
    assert [lookup(table, code) for code, _ in table] == list(range(50))