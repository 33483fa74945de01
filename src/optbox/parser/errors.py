from __future__ import annotations


class OptParseError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(OptParseError):
    """
    Raised if an Option is declared with invalid or
    inconsistent arguments.
    """

    def __init__(self, msg: str, option_id: str = "") -> None:
        super().__init__(msg)
        self.option_id = option_id

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class InvalidOptionError(OptionError):
    """
    Raised if an option alias (or a whole alias spec) is malformed.
    """
