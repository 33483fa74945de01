from __future__ import annotations

import logging

from typing import Iterable


logger = logging.getLogger(__name__)

# Maps a bare option key (no leading dashes) to its values.
ParsedArgs = dict[str, list[str]]

# Key holding the positional arguments.
POSITIONAL = "_"

# Everything after this token is positional.
TERMINATOR = "--"


def parse_args(args: Iterable[str], booleans: Iterable[str] = ()) -> ParsedArgs:
    """
    parse_args(args : [string], booleans : [string] = ())
    -> { string : [string] }

    Regroup every option found in 'args' into a dictionary keyed by the
    option name stripped of its dashes. Arguments that are not claimed as
    an option value are stored under the "_" key, which is always present.

    An option takes at most one value: the token that directly follows it,
    unless that token is itself an option. Names listed in 'booleans'
    never take a value. A dash followed by several characters is a stack
    of short flags ("-pfo" is "-p -f -o"), none of which take a value.

    When an option is given more than once only its last value is kept.
    A key moves to the end of the result each time it receives a value,
    so among several keys the last one holding a value was given last.

    >>> parse_args(["-p", "8080", "-h", "localhost", "index.html"])
    {'_': ['index.html'], 'p': ['8080'], 'h': ['localhost']}
    """
    booleans = frozenset(booleans)
    parsed: ParsedArgs = {POSITIONAL: []}
    current: str | None = None

    rargs = list(args)
    while rargs:
        arg = rargs.pop(0)

        if arg == TERMINATOR:
            # all remaining args are positional
            parsed[POSITIONAL].extend(rargs)
            break
        elif arg[0:2] == "--":
            current = _register(parsed, arg[2:], booleans)
        elif arg[:1] == "-" and len(arg) > 1:
            opts = arg[1:]
            if len(opts) > 1:
                for ch in opts:
                    parsed.setdefault(ch, [])
                current = None
            else:
                current = _register(parsed, opts, booleans)
        elif current is not None:
            # re-insert so keys stay ordered by their last value
            del parsed[current]
            parsed[current] = [arg]
            current = None
        else:
            parsed[POSITIONAL].append(arg)

    logger.debug("Parsed %d option(s) from %r", len(parsed) - 1, parsed)

    return parsed


def _register(parsed: ParsedArgs, opt: str, booleans: frozenset[str]) -> str | None:
    parsed.setdefault(opt, [])
    if opt in booleans:
        return None
    return opt
