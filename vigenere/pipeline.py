import logging

from .cipher import vigenere
from .config import Case
from .key import parse_key
from .layout import BlockGrouper, change_case, make_formatter

logger = logging.getLogger(__name__)


class Pipeline:
    """Formats and enciphers the lines of one run.

    The pipeline owns the count of letters enciphered so far, which carries
    over from one line to the next.
    """

    def __init__(self, key, formatter, case=Case.DEFAULT, position=0):
        self.key = tuple(key)
        self.formatter = formatter
        self.case = case
        self.position = position
        self.last = ""

    @classmethod
    def from_config(cls, config, keystring=None):
        formatter = make_formatter(config)
        if keystring is None:
            keystring = config.key
        key = parse_key(keystring, config.decode)
        return cls(key, formatter, case=config.case)

    def process(self, line):
        text = change_case(line, self.case)
        text = self.formatter.format(text, self.position)
        text, self.position = vigenere(text, self.key, self.position)
        if text:
            self.last = text
        return text

    def run(self, lines):
        for line in lines:
            yield self.process(line)
        logger.debug(f"{self.position} letters processed")

    def finish(self):
        """Return what is needed to end the output on a newline."""
        blocks = isinstance(self.formatter, BlockGrouper)
        if blocks and self.last[-1:] not in ("", "\n"):
            return "\n"
        return ""
