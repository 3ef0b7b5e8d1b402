"""Lookup tables between X keysyms, Qt key codes and Unicode characters."""

__version__ = "5.1.10"