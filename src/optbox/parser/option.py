from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Iterable

from optbox.parser.errors import InvalidOptionError


@dataclass(frozen=True)
class Option:
    """
    A declared option.

    Instance attributes:
      identifiers : (string*)
        every alias of the option as declared, eg. ("-p", "--peppers")
      description : string
        help text shown next to the aliases
      default : (string*)
        values used when none of the aliases is given on the command line
        (a single string is taken as a one-value default)
      flag : bool
        if true the option never consumes the next token as its value
    """

    identifiers: tuple[str, ...]
    description: str = ""
    default: tuple[str, ...] = field(default=())
    flag: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "identifiers", tuple(self.identifiers))
        if isinstance(self.default, str):
            object.__setattr__(self, "default", (self.default,))
        else:
            object.__setattr__(self, "default", tuple(self.default))

        if not self.identifiers:
            raise InvalidOptionError("at least one option string must be supplied")

        for identifier in self.identifiers:
            if not self.validate_identifier(identifier):
                raise InvalidOptionError(
                    f"invalid option string {identifier!r}: "
                    "must be of the form -x or --xxx (x any non-dash char)",
                    self.name,
                )

    @classmethod
    def from_spec(
        cls,
        spec: str,
        description: str = "",
        default: Iterable[str] = (),
        flag: bool = False,
    ) -> Option:
        """
        Build an option from a comma-separated alias spec
        such as "-p, --peppers".
        """
        identifiers = tuple(part.strip() for part in spec.split(",") if part.strip())
        if not identifiers:
            raise InvalidOptionError(f"invalid option spec {spec!r}: no aliases")

        return cls(identifiers, description, default, flag)

    @staticmethod
    def validate_identifier(identifier: str) -> bool:
        if len(identifier) == 2:
            return identifier[0] == "-" and identifier[1] != "-"

        return len(identifier) > 2 and identifier[:2] == "--" and identifier[2] != "-"

    @property
    def name(self) -> str:
        return ", ".join(self.identifiers)

    @property
    def trimmed_identifiers(self) -> tuple[str, ...]:
        return tuple(identifier.lstrip("-") for identifier in self.identifiers)

    def takes_value(self) -> bool:
        return not self.flag

    def __str__(self) -> str:
        return self.name
