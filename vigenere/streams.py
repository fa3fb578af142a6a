import logging
import sys

logger = logging.getLogger(__name__)

# bytes that are not UTF-8 are carried through as they are, never as letters
ENCODING = "utf-8"


def open_input(path):
    """Open the input file, or return None to read from the console."""
    if path is None:
        return None
    try:
        return open(path, "r", encoding=ENCODING, errors="surrogateescape")
    except OSError as e:
        logger.warning(
            f"Could not open {path} ({e.strerror}), reading from the console"
        )
        return None


def open_output(path):
    """Open the output file, or return None to write to stdout."""
    if path is None:
        return None
    try:
        return open(path, "w", encoding=ENCODING, errors="surrogateescape")
    except OSError as e:
        logger.warning(f"Could not open {path} ({e.strerror}), writing to stdout")
        return None


def console_output():
    """Return stdout, set up to write back the input bytes that were not UTF-8."""
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    return sys.stdout


def read_lines(file):
    for line in file:
        yield line.rstrip("\n")


def prompt(label):
    """Read one line from the console; end of input reads as an empty line."""
    try:
        return input(label)
    except EOFError:
        return ""
