from __future__ import annotations

import textwrap

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING

from optbox.config import DEFAULT_WIDTH


if TYPE_CHECKING:
    from optbox.commands.command import Command
    from optbox.parser.option import Option


USAGE_TEMPLATE = "{name} [options] [arguments]"


class HelpFormatter(ABC):
    """
    Abstract base class for formatting command help. Command instances
    use TabbedHelpFormatter unless told otherwise.

    Every format_* method returns its chunk without a trailing newline;
    format_help() joins the sections with a blank line.
    """

    def __init__(self, width: int | None = None) -> None:
        self.width: int = width or DEFAULT_WIDTH

    @abstractmethod
    def format_usage(self, name: str) -> str:
        raise NotImplementedError("subclasses must implement")

    @abstractmethod
    def format_heading(self, heading: str) -> str:
        raise NotImplementedError("subclasses must implement")

    @abstractmethod
    def format_option(self, option: Option) -> str:
        raise NotImplementedError("subclasses must implement")

    def format_description(self, description: str | None = None) -> str:
        return description or ""

    def format_options(self, options: list[Option]) -> str:
        if not options:
            return ""

        lines = [self.format_heading("Options")]
        lines.extend(self.format_option(option) for option in options)
        return "\n".join(lines)

    def format_help(self, command: Command) -> str:
        sections = [self.format_usage(command.name)]

        description = self.format_description(command.get_description())
        if description:
            sections.append(description)

        options = self.format_options(command.options)
        if options:
            sections.append(options)

        return "\n\n".join(sections)


class TabbedHelpFormatter(HelpFormatter):
    """Format help with tab separated option rows."""

    def format_usage(self, name: str) -> str:
        return "Usage: " + USAGE_TEMPLATE.format(name=name)

    def format_heading(self, heading: str) -> str:
        return f"{heading}:"

    def format_option(self, option: Option) -> str:
        return f"\t{option.name}\t{option.description}"


class IndentedHelpFormatter(HelpFormatter):
    """Format help with aligned and wrapped option rows."""

    def __init__(
        self,
        indent_increment: int = 2,
        max_help_position: int = 24,
        width: int | None = None,
    ) -> None:
        super().__init__(width)
        self.indent_increment = indent_increment
        self.max_help_position = min(
            max_help_position, max(self.width - 20, indent_increment * 2)
        )
        self.help_position = self.max_help_position

    def format_usage(self, name: str) -> str:
        return "Usage: " + USAGE_TEMPLATE.format(name=name)

    def format_heading(self, heading: str) -> str:
        return f"{heading}:"

    def format_description(self, description: str | None = None) -> str:
        if not description:
            return ""
        return textwrap.fill(description, max(self.width, 11))

    def format_options(self, options: list[Option]) -> str:
        # Compute the help column once for the whole block.
        max_len = max((len(option.name) for option in options), default=0)
        self.help_position = min(
            max_len + self.indent_increment + 2, self.max_help_position
        )
        return super().format_options(options)

    def format_option(self, option: Option) -> str:
        # The help for each option is written on the same line as its
        # aliases when they fit:
        #   -p, --peppers         Add peppers
        #
        # Otherwise it starts on the next line, at the help column:
        #   -b, --bbq-sauce-with-extra-onions
        #                         Add bbq sauce
        indent = " " * self.indent_increment
        opt_width = self.help_position - self.indent_increment - 2
        help_width = max(self.width - self.help_position, 11)

        help_lines = textwrap.wrap(option.description, help_width)
        if not help_lines:
            return f"{indent}{option.name}"

        if len(option.name) > opt_width:
            lines = [f"{indent}{option.name}"]
            remaining = help_lines
        else:
            lines = [f"{indent}{option.name:<{opt_width}}  {help_lines[0]}"]
            remaining = help_lines[1:]

        lines.extend(" " * self.help_position + line for line in remaining)
        return "\n".join(lines)
