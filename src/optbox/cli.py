from __future__ import annotations

import json
import logging
import sys

from typing import Sequence

from optbox import __version__
from optbox.commands.command import Command
from optbox.config import Settings
from optbox.parser.formatters import IndentedHelpFormatter
from optbox.parser.optparser import POSITIONAL
from optbox.parser.optparser import ParsedArgs
from optbox.parser.optparser import parse_args


logger = logging.getLogger(__name__)


def _show(args: ParsedArgs) -> int:
    if "raw" in args:
        booleans = [
            name.strip()
            for value in args.get("boolean", [])
            for name in value.split(",")
            if name.strip()
        ]
        logger.debug("Tokenizing %r with booleans %r", args[POSITIONAL], booleans)
        args = parse_args(args[POSITIONAL], booleans)

    print(json.dumps(args, indent=2))

    return 0


def build_command(settings: Settings | None = None) -> Command:
    settings = settings or Settings.from_env()

    return (
        Command("optbox", formatter=IndentedHelpFormatter(width=settings.width))
        .description(
            "Print the options and arguments optbox reads from the command line. "
            "With --raw, the arguments given after -- are run through the "
            "tokenizer as-is."
        )
        .version(__version__)
        .option("-r, --raw", "Tokenize the arguments after --", flag=True)
        .option("-b, --boolean", "Comma-separated names that never take a value")
        .action(_show)
    )


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level_number, format="%(levelname)s %(name)s: %(message)s"
    )

    if argv is None:
        argv = sys.argv[1:]

    result = build_command(settings).parse(argv)

    return result or 0
