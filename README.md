# fcitxkeytrans

Lookup tables and small helpers for moving keyboard input between X keysyms
(as used by Fcitx), Qt key codes and Unicode characters. Every lookup is a
plain function over fixed tables; nothing talks to a display server or to Qt.

## Installation

```
pip install fcitxkeytrans
```

The package has no runtime dependencies.

## Keysyms to Qt key codes

`fcitxkeytrans.qtkey` holds the `QtKey` enumeration of Qt key code values and
two functions:

```python
from fcitxkeytrans.qtkey import QtKey, keysym_to_qt_key, lookup_keysym

keysym_to_qt_key(ord("a"), "a")   # 0x41: ASCII keysyms give their upper case
keysym_to_qt_key(0xFF1B)          # QtKey.Escape (0x01000000)
keysym_to_qt_key(0x0100, "\u00e9")  # 0xC9: one printable character is upper-cased
lookup_keysym(0xFFAB)             # QtKey.Plus (0x2B), keypad '+'
lookup_keysym(0x1234)             # 0: not in the table
```

`keysym_to_qt_key(keysym, text="")` returns 0 for unprintable ASCII keysyms
and for keysyms that neither produce a single printable character nor appear
in the table. Dead keys are always looked up in the table. Both functions
raise `ValueError` for a keysym outside 0..0xFFFFFFFF.

`fcitxkeytrans.keysymtables.translate_keysym(keysym)` is a second table for
keys that produce no text. It returns the Qt key code, or -1 when the keysym
has none (Hangul keys, for instance, are not in it):

```python
from fcitxkeytrans.keysymtables import translate_keysym

translate_keysym(0xFF0D)  # QtKey.Return
translate_keysym(0xFFAA)  # 0x2A, keypad '*' as Asterisk
translate_keysym(0xFF31)  # -1
```

## Qt key codes to keysyms

Each returns the keysym, or `None` when the code is not in its table.

- `fcitxkeytrans.keypadkeys.keypad_qtcode_to_keysym(qtcode)`: keys pressed on
  the numeric keypad, e.g. `keypad_qtcode_to_keysym(0x30)` is `0xFFB0` (KP_0).
- `fcitxkeytrans.keypadkeys.qtcode_to_keysym(qtcode)`: non-text keys such as
  Escape, the function keys F1 to F35, input method keys and dead keys.
- `fcitxkeytrans.backupkeys.backup_qtcode_to_keysym(qtcode)`: a fallback for
  text keys whose event carried no printable text; capital letters map to the
  keysym of the unshifted character.

## Unicode and keysyms

```python
from fcitxkeytrans.charsets import keysym_to_unicode
from fcitxkeytrans.unicodekeys import unicode_has_keysym
from fcitxkeytrans.unicodemap import unicode_to_keysym

unicode_to_keysym(ord("\u00e9"))   # 233
unicode_to_keysym(0x4E00)          # None
unicode_has_keysym(0x2800)         # True: keysym is 0x1000000 + code point
keysym_to_unicode(0x06, 0xC1)      # "\u0430", Cyrillic small a
keysym_to_unicode(0x05, 0x10)      # None
```

- `unicode_to_keysym(codepoint)` gives the legacy keysym that types a
  character, or `None`.
- `unicode_has_keysym(codepoint)` tells whether a code point is one of those
  that map directly into the Unicode keysym range.
- `keysym_to_unicode(byte3, byte4)` converts a legacy keysym, given by its
  charset byte and low byte, to a character for the kana, Cyrillic, Greek,
  technical, special, publishing, APL and Korean charsets. It returns `None`
  when there is no character and raises `ValueError` when either argument is
  not a byte.

## Searching sorted tables

`fcitxkeytrans.tablesearch.lookup(table, key)` binary-searches a sequence of
`(code, value)` pairs sorted by code and returns the value of the first entry
with that code, or `None`:

```python
from fcitxkeytrans.tablesearch import lookup

lookup([(1, 10), (3, 30), (3, 31)], 3)  # 30
lookup([(1, 10), (3, 30)], 2)           # None
```

## What the package does not do

It translates single codes through its tables only. It does not turn a whole
Qt key event (key code, modifier flags and text together) into a keysym and
modifier state, or back; it has no enumerations for Fcitx capability, text
format or key state flags; and it has no registry or base classes for addon
configuration widgets. It provides no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```