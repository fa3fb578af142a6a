import re
import string

LETTERS = frozenset(string.ascii_letters)


class VigenereError(Exception):
    pass


class ConfigurationError(VigenereError):
    """The settings for a run cannot produce any output."""


class InvalidArgumentError(VigenereError):
    """An option got a value of the wrong kind."""


def is_letter(c):
    # str.isalpha() would also accept non-ASCII letters
    return c in LETTERS


_leading_int = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def leading_int(text):
    """Return the integer at the start of `text`, or None.

    Leading whitespace is skipped and anything after the digits is ignored,
    so "12ab" gives 12 while "ab12" gives None.
    """
    if (m := _leading_int.match(text)) is None:
        return None
    return int(m.group(1))


def parse_int(value, what):
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {what}: {value}")
    if isinstance(value, int):
        return value
    if (n := leading_int(str(value))) is None:
        raise InvalidArgumentError(f"Invalid {what}: {value}")
    return n
