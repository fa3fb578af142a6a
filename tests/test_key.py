import pytest

from vigenere.key import parse_key
from vigenere.util import ConfigurationError


def test_single_number():
    assert parse_key("3") == (3,)


def test_letters():
    assert parse_key("A,B,C") == (0, 1, 2)
    assert parse_key("abc") == (0, 1, 2)
    assert parse_key("KeY") == (10, 4, 24)


def test_mixed_tokens():
    assert parse_key("3,A") == (3, 0)
    assert parse_key("-2,zz,7") == (-2, 25, 25, 7)


def test_decode_negates():
    assert parse_key("3,A,b", decode=True) == (-3, 0, -1)


def test_number_prefix_wins():
    assert parse_key("12ab") == (12,)
    assert parse_key(" 4") == (4,)


def test_junk_is_skipped():
    assert parse_key("a1b!,?,5") == (0, 1, 5)


@pytest.mark.parametrize("keystring", ["", ",", ",,", "!?", "#"])
def test_empty_key(keystring):
    with pytest.raises(ConfigurationError):
        parse_key(keystring)


def test_only_ascii_digits_are_numbers():
    with pytest.raises(ConfigurationError):
        parse_key("\u0663")
    assert parse_key("\u0663,b") == (1,)
