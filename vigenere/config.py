from dataclasses import dataclass, fields

import tomli

from .util import ConfigurationError, parse_int


class Case:
    DEFAULT = "default"
    UPPER = "upper"
    LOWER = "lower"

    ALL = (DEFAULT, UPPER, LOWER)


@dataclass
class Config:
    """Settings for one run, from a config file and the command line."""

    key: str = ""  # empty means to ask for it on the console
    decode: bool = False

    case: str = Case.DEFAULT

    # 0: no blocks, -1: one block per row
    block: int = 0
    # -1 means no limit
    cols: int = -1

    debug: bool = False

    def __post_init__(self):
        if self.case not in Case.ALL:
            raise ConfigurationError(
                f"Unknown case {self.case!r}, use one of {', '.join(Case.ALL)}"
            )
        self.block = parse_int(self.block, "block size")
        self.cols = parse_int(self.cols, "number of columns")
        for name in ("decode", "debug"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(
                    f"{name} must be true or false, not {getattr(self, name)!r}"
                )
        self.key = str(self.key)


def load_config(path):
    """Read the Config keyword arguments stored in a TOML file."""
    try:
        with open(path, "rb") as file:
            values = tomli.load(file)
    except OSError as e:
        raise ConfigurationError(f"Could not read {path}: {e.strerror}") from e
    except tomli.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e
    known = {f.name for f in fields(Config)}
    if unknown := sorted(set(values) - known):
        raise ConfigurationError(f"Unknown settings in {path}: {', '.join(unknown)}")
    return values
