import string

import pytest

from vigenere.cipher import shift_letter, vigenere
from vigenere.key import parse_key
from vigenere.util import ConfigurationError


def test_shift():
    assert vigenere("A", [3]) == ("D", 1)
    assert vigenere("a", [25]) == ("z", 1)
    assert vigenere("z", [1]) == ("a", 1)
    assert vigenere("D", [-3]) == ("A", 1)


def test_large_and_negative_shifts():
    assert shift_letter("A", 27) == "B"
    assert shift_letter("a", -27) == "z"


def test_shift_letter_ignores_non_letters():
    assert shift_letter("-", 3) == "-"
    assert shift_letter("\xe9", 1) == "\xe9"


def test_non_letters_untouched():
    text, position = vigenere("a-b c!1\n", [1, 2])
    assert text == "b-d d!1\n"
    assert position == 3


def test_position_offsets_the_key():
    assert vigenere("AA", [0, 1], position=1) == ("BA", 3)


def test_case_is_kept():
    assert vigenere("Hello", [1])[0] == "Ifmmp"


def test_roundtrip():
    plain = "Attack at dawn, Zebra-Yankee/42!"
    key = parse_key("LEMON")
    inverse = parse_key("LEMON", decode=True)
    cipher, end = vigenere(plain, key, position=5)
    assert cipher != plain
    assert vigenere(cipher, inverse, position=5) == (plain, end)


def test_roundtrip_all_letters():
    key = parse_key("3,-40,xyz")
    for letters in (string.ascii_uppercase, string.ascii_lowercase):
        cipher, _ = vigenere(letters * 3, key)
        assert vigenere(cipher, [-k for k in key])[0] == letters * 3


def test_empty_key():
    with pytest.raises(ConfigurationError):
        vigenere("abc", [])
