import io

from .util import ConfigurationError

ALPHABET_SIZE = 26


def _base(c):
    if "A" <= c <= "Z":
        return ord("A")
    if "a" <= c <= "z":
        return ord("a")
    return None


def shift_letter(c, shift):
    """Shift an ASCII letter; any other character is returned as is."""
    if (base := _base(c)) is None:
        return c
    # python's % is never negative for a positive modulus
    return chr(base + (ord(c) - base + shift) % ALPHABET_SIZE)


def vigenere(text, key, position=0):
    """Apply the running key to every ASCII letter of `text`.

    `position` counts the letters enciphered so far in the run; the k-th
    letter is shifted by key[k % len(key)]. Other characters are copied
    as they are and do not move the position. Decoding is the same call
    with every shift of the key negated.

    Returns the new text along with the advanced position.
    """
    if not key:
        raise ConfigurationError("The key must not be empty")
    out = io.StringIO()
    for c in text:
        if _base(c) is None:
            out.write(c)
            continue
        out.write(shift_letter(c, key[position % len(key)]))
        position += 1
    return out.getvalue(), position
