from __future__ import annotations

from optbox.commands.command import Command
from optbox.parser.errors import InvalidOptionError
from optbox.parser.errors import OptionError
from optbox.parser.errors import OptParseError
from optbox.parser.option import Option
from optbox.parser.optparser import ParsedArgs
from optbox.parser.optparser import parse_args


__version__ = "0.3.0"

__all__ = [
    "Command",
    "InvalidOptionError",
    "OptParseError",
    "Option",
    "OptionError",
    "ParsedArgs",
    "parse_args",
]
