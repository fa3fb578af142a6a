"""A Vigenère cipher with word-wrap and block-grouping output formats."""

__version__ = "1.0"

from .cipher import vigenere
from .config import Case, Config
from .key import parse_key
from .layout import break_lines, change_case, group_blocks, make_formatter
from .pipeline import Pipeline
from .util import ConfigurationError, InvalidArgumentError, VigenereError
