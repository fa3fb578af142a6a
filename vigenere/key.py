import logging
import string

from .util import ConfigurationError, leading_int

logger = logging.getLogger(__name__)


def _letter_values(token):
    for c in token:
        if c in string.ascii_uppercase:
            yield ord(c) - ord("A")
        elif c in string.ascii_lowercase:
            yield ord(c) - ord("a")
        else:
            logger.debug(f"ignoring {c!r} in key token {token!r}")


def parse_key(keystring, decode=False):
    """Turn a key specification into a tuple of shifts.

    The specification is a comma separated list of tokens. A token starting
    with an integer gives that shift, any other token gives one shift per
    letter ('a' and 'A' are 0). Everything is negated when decoding.

    Raises ConfigurationError if no shift could be read.
    """
    sign = -1 if decode else 1
    key = []
    for token in keystring.split(","):
        if (n := leading_int(token)) is not None:
            key.append(n * sign)
        else:
            key.extend(v * sign for v in _letter_values(token))
    if not key:
        raise ConfigurationError(f"No usable key in {keystring!r}")
    logger.debug(f"parsed key {key}")
    return tuple(key)
