from __future__ import annotations

import logging
import sys

from typing import TYPE_CHECKING
from typing import Any
from typing import Callable
from typing import Iterable

from optbox.parser.formatters import TabbedHelpFormatter
from optbox.parser.option import Option
from optbox.parser.optparser import POSITIONAL
from optbox.parser.optparser import ParsedArgs
from optbox.parser.optparser import parse_args


if TYPE_CHECKING:
    from optbox.parser.formatters import HelpFormatter


logger = logging.getLogger(__name__)

Handler = Callable[[ParsedArgs], Any]
Output = Callable[[str], Any]

HELP_OPTION = "-h, --help"
VERSION_OPTION = "-v, --version"


def _noop(args: ParsedArgs) -> None:
    pass


class Command:
    """
    A command line program: its declared options, a handler and some
    metadata used to render help.

    Declarations are chained:

        program = (
            Command("pizza")
            .description("Order a pizza.")
            .version("1.0.0")
            .option("-p, --peppers", "Add peppers", ["green"])
            .action(order)
        )
        program.parse(["-p", "red", "margherita"])
    """

    def __init__(
        self,
        name: str,
        *,
        formatter: HelpFormatter | None = None,
        output: Output | None = None,
    ) -> None:
        self.name = name
        self.formatter: HelpFormatter = formatter or TabbedHelpFormatter()
        self._output = output
        self._description: str | None = None
        self._version: str | None = None
        self._handler: Handler = _noop
        self._options: dict[str, Option] = {}
        self._index: dict[str, Option] = {}

        self.option(HELP_OPTION, "Prints help message")

    # -- Declaration methods -------------------------------------------

    def description(self, description: str) -> Command:
        self._description = description
        return self

    def get_description(self) -> str | None:
        return self._description

    def version(self, version: str) -> Command:
        """
        Set the command version. The version is printed when
        -v or --version is given.
        """
        self._version = version
        self.option(VERSION_OPTION, "Prints current version")
        return self

    def get_version(self) -> str | None:
        return self._version

    def option(
        self,
        spec: str,
        description: str = "",
        default: Iterable[str] = (),
        *,
        flag: bool = False,
    ) -> Command:
        """
        Declare an option from a comma-separated alias spec,
        eg. "-p, --peppers". Declaring the same spec twice replaces
        the first declaration.
        """
        option = Option.from_spec(spec, description, default, flag)

        self._options[spec] = option
        self._rebuild_index()

        logger.debug("Declared option %s on %s", option, self.name)

        return self

    def action(self, handler: Handler) -> Command:
        self._handler = handler
        return self

    def _rebuild_index(self) -> None:
        self._index = {}
        for option in self._options.values():
            for identifier in option.trimmed_identifiers:
                self._index[identifier] = option

    # -- Option query methods ------------------------------------------

    @property
    def options(self) -> list[Option]:
        return list(self._options.values())

    def get_option(self, alias: str) -> Option | None:
        return self._index.get(alias.lstrip("-"))

    def has_option(self, alias: str) -> bool:
        return alias.lstrip("-") in self._index

    def _boolean_names(self) -> list[str]:
        return [
            identifier
            for option in self._options.values()
            if option.flag
            for identifier in option.trimmed_identifiers
        ]

    # -- Parsing methods -----------------------------------------------

    def parse(self, args: Iterable[str] | None = None) -> Any:
        """
        Parse 'args' (default: sys.argv[1:]) and call the handler with
        the resolved options.

        Help and version flags short-circuit: their text is written to
        the output and the handler is not called. Returns whatever the
        handler returns, or None when it was not called.
        """
        if args is None:
            args = sys.argv[1:]

        parsed = parse_args(args, self._boolean_names())

        if "help" in parsed or "h" in parsed:
            self._write(self.help())
            return None

        if self._version and ("version" in parsed or "v" in parsed):
            self._write(self._version)
            return None

        return self._handler(self.resolve(parsed))

    def resolve(self, parsed: ParsedArgs) -> ParsedArgs:
        """
        Reconcile tokenized arguments with the declared options.

        Every alias of a declared option ends up holding the same values:
        those of the alias given last with a value, or an empty list if
        none of them was given a value.
        When no alias was given the option default is used, if any.
        Keys that belong to no declared option are dropped.
        """
        resolved: ParsedArgs = {POSITIONAL: list(parsed.get(POSITIONAL, []))}
        positions = {key: i for i, key in enumerate(parsed)}

        for option in self._options.values():
            identifiers = option.trimmed_identifiers
            given = [identifier for identifier in identifiers if identifier in parsed]
            valued = [identifier for identifier in given if parsed[identifier]]

            if valued:
                # parse_args() orders keys by their last value
                values = parsed[max(valued, key=positions.__getitem__)]
            elif given:
                values = []
            elif option.default:
                values = list(option.default)
            else:
                continue

            for identifier in identifiers:
                resolved[identifier] = list(values)

        unknown = [
            key for key in parsed if key != POSITIONAL and key not in self._index
        ]
        if unknown:
            logger.debug("Ignoring unknown option(s) %s", ", ".join(unknown))

        return resolved

    # -- Feedback methods ----------------------------------------------

    def help(self) -> str:
        return self.formatter.format_help(self)

    def _write(self, text: str) -> None:
        if self._output is None:
            print(text, file=sys.stdout)
        else:
            self._output(text)
