import argparse
import contextlib
import logging
import sys

from . import __version__
from .config import Case, Config, load_config
from .pipeline import Pipeline
from .streams import console_output, open_input, open_output, prompt, read_lines
from .util import VigenereError

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="vigenere",
        description="Apply a Vigenère cipher to some text.",
    )
    parser.add_argument("text", nargs="*", help="the text to apply the cipher to")
    parser.add_argument(
        "--version", "-v", action="version", version=f"Version {__version__}"
    )
    parser.add_argument("--input", "-i", help="the file to apply the cipher to")
    parser.add_argument("--output", "-o", help="the file to save the output to")
    parser.add_argument(
        "--key",
        "-k",
        help=(
            "the key to use for the cipher; letters or comma separated "
            "integers may be used, a key of length 1 is just a shift cipher"
        ),
    )
    parser.add_argument(
        "--decode",
        "-d",
        action="store_const",
        const=True,
        help="apply the inverse key to decode the cipher",
    )
    parser.add_argument(
        "--upper",
        "-u",
        dest="case",
        action="store_const",
        const=Case.UPPER,
        help="convert the output to upper case",
    )
    parser.add_argument(
        "--lower",
        "-l",
        dest="case",
        action="store_const",
        const=Case.LOWER,
        help="convert the output to lower case",
    )
    parser.add_argument(
        "--block",
        "-b",
        help=(
            "the number of letters to group together in a block [default: 0]; "
            "0 means no grouping, -1 removes all spaces"
        ),
    )
    parser.add_argument(
        "--cols", "-c", help="the maximum number of columns [default: -1]"
    )
    parser.add_argument("--config", help="path to a config.toml")
    parser.add_argument(
        "--debug", action="store_const", const=True, help="log debug messages"
    )

    return parser.parse_args(argv)


def build_config(args):
    cfg_override = {}
    if args.config is not None:
        cfg_override = load_config(args.config)
    for name in ("key", "decode", "case", "block", "cols", "debug"):
        if (value := getattr(args, name)) is not None:
            cfg_override[name] = value
    return Config(**cfg_override)


def run(args, cfg):
    keystring = cfg.key or prompt("Key: ")
    pipeline = Pipeline.from_config(cfg, keystring)

    with contextlib.ExitStack() as stack:
        infile = open_input(args.input)
        if infile is not None:
            stack.enter_context(infile)
        outfile = open_output(args.output)
        if outfile is not None:
            stack.enter_context(outfile)
        out = outfile or console_output()

        if infile is not None:
            lines = read_lines(infile)
        elif args.text:
            lines = [" ".join(args.text)]
        else:
            lines = [prompt(" In: ")]
            if outfile is None:
                out.write("Out: ")

        for line in pipeline.run(lines):
            out.write(line)
        out.write(pipeline.finish())


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        cfg = build_config(args)
        if cfg.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        run(args, cfg)
    except VigenereError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
