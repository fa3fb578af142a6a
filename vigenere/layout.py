"""Output layouts applied to a line before it is enciphered.

Two layouts exist, picked once per run by make_formatter():

    LineWrapper     words wrapped to a column width, or not at all
    BlockGrouper    letters only, in fixed size blocks and rows

Both provide format(text, position), where position is the number of
letters seen so far in the run.
"""

import logging
import string

from .config import Case
from .util import ConfigurationError, is_letter

logger = logging.getLogger(__name__)

SEPARATORS = " \n-/"

# only ASCII letters change case
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def change_case(text, case):
    if case == Case.UPPER:
        return text.translate(_TO_UPPER)
    if case == Case.LOWER:
        return text.translate(_TO_LOWER)
    return text


def break_lines(text, cols):
    """Greedy word wrap keeping the original separators.

    A word that does not fit goes to the next line. Hyphens, slashes and
    newlines stay at the end of the line when there is room, otherwise they
    start the next one. A width of zero or less does not wrap at all.
    """
    unbounded = cols <= 0
    output = []
    word = []
    sep = None
    i = 0
    for c in text + " ":
        if c not in SEPARATORS:
            word.append(c)
            continue
        w = "".join(word)
        n = len(w)
        if i == 0:
            output.append(w)
            i += n
        elif unbounded or i + n < cols:
            output.append(sep + w)
            i += n + 1
        elif sep == " ":
            output.append("\n" + w)
            i = n
        elif i < cols:
            output.append(sep + "\n" + w)
            i = n
        else:
            output.append("\n" + sep + w)
            i = n if sep == "\n" else n + 1
        word = []
        sep = c
    return "".join(output) + "\n"


def blocks_per_row(block_size, cols):
    if block_size < 0:
        if cols <= 0:
            raise ConfigurationError(
                "A negative block size needs a positive number of columns"
            )
        return 1
    per_row = (cols + 1) // (block_size + 1)
    if per_row < 1:
        raise ConfigurationError(
            f"{cols} columns cannot hold a block of {block_size} letters"
        )
    return per_row


def group_blocks(text, block_size, cols, start=0):
    """Keep only the letters of `text`, grouped into blocks and rows.

    Blocks are separated by a space and a row holds as many blocks as fit in
    `cols`. A negative block size makes each row a single block of `cols`
    letters. `start` is the number of letters already laid out, so a run can
    be formatted one line at a time.
    """
    per_row = blocks_per_row(block_size, cols)
    if block_size < 0:
        block_size = cols
    output = []
    i = start
    for c in text:
        if not is_letter(c):
            continue
        output.append(c)
        i += 1
        if block_size > 0 and i % block_size == 0:
            output.append("\n" if (i // block_size) % per_row == 0 else " ")
    return "".join(output)


class Formatter:
    def format(self, text, position):
        raise NotImplementedError


class LineWrapper(Formatter):
    def __init__(self, cols):
        self.cols = cols

    def format(self, text, position):
        return break_lines(text, self.cols)


class BlockGrouper(Formatter):
    def __init__(self, block_size, cols):
        # fail before anything is enciphered
        blocks_per_row(block_size, cols)
        self.block_size = block_size
        self.cols = cols

    def format(self, text, position):
        return group_blocks(text, self.block_size, self.cols, start=position)


def make_formatter(config):
    if config.block != 0:
        formatter = BlockGrouper(config.block, config.cols)
    else:
        formatter = LineWrapper(config.cols)
    logger.debug(f"using {formatter.__class__.__name__}")
    return formatter
