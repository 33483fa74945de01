from __future__ import annotations

import pytest

from optbox.parser.optparser import parse_args


def test_parse_args_options_with_values() -> None:
    args = parse_args(["-p", "8080", "-h", "localhost", "index.html"])

    assert args == {"_": ["index.html"], "p": ["8080"], "h": ["localhost"]}


def test_parse_args_short_options_with_arguments() -> None:
    args = parse_args(["-p", "-o", "foo", "bar"])

    assert args == {"_": ["bar"], "p": [], "o": ["foo"]}


def test_parse_args_long_options_with_arguments() -> None:
    args = parse_args(["--peppers", "--onions", "foo", "bar"])

    assert args == {"_": ["bar"], "peppers": [], "onions": ["foo"]}


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["foo"],
        ["foo", "bar", "baz"],
        ["index.html", "", "x-y"],
    ],
)
def test_parse_args_positionals_only(tokens: list[str]) -> None:
    assert parse_args(tokens) == {"_": tokens}


def test_parse_args_always_has_positional_key() -> None:
    assert parse_args(["--verbose"]) == {"_": [], "verbose": []}


def test_parse_args_stacked_short_options() -> None:
    assert parse_args(["-pfo"]) == {"_": [], "p": [], "f": [], "o": []}


def test_parse_args_stacked_short_options_never_take_a_value() -> None:
    args = parse_args(["-pf", "foo"])

    assert args == {"_": ["foo"], "p": [], "f": []}


def test_parse_args_stacked_short_options_keep_existing_values() -> None:
    args = parse_args(["-p", "red", "-pf"])

    assert args == {"_": [], "p": ["red"], "f": []}


def test_parse_args_boolean_short_options() -> None:
    args = parse_args(["-p", "-o", "foo", "bar"], ["p", "o"])

    assert args == {"_": ["foo", "bar"], "p": [], "o": []}


def test_parse_args_boolean_long_options() -> None:
    args = parse_args(["--peppers", "--onions", "foo", "bar"], {"peppers", "onions"})

    assert args == {"_": ["foo", "bar"], "peppers": [], "onions": []}


def test_parse_args_boolean_hint_does_not_add_keys() -> None:
    assert parse_args(["foo"], ["p"]) == {"_": ["foo"]}


def test_parse_args_terminator() -> None:
    args = parse_args(["-i", "--", "index.html"])

    assert args == {"_": ["index.html"], "i": []}


def test_parse_args_terminator_keeps_dashed_tokens_positional() -> None:
    args = parse_args(["-p", "red", "--", "-o", "--onions", "--", "bar"])

    assert args == {"_": ["-o", "--onions", "--", "bar"], "p": ["red"]}


def test_parse_args_last_value_wins() -> None:
    args = parse_args(["-p", "foo", "-p", "bar"])

    assert args == {"_": [], "p": ["bar"]}


def test_parse_args_repeated_option_without_value_keeps_previous_value() -> None:
    args = parse_args(["--size", "large", "--size"])

    assert args == {"_": [], "size": ["large"]}


def test_parse_args_single_dash_is_a_value() -> None:
    assert parse_args(["-"]) == {"_": ["-"]}
    assert parse_args(["-f", "-"]) == {"_": [], "f": ["-"]}


def test_parse_args_option_takes_a_single_value() -> None:
    args = parse_args(["--file", "a.txt", "b.txt"])

    assert args == {"_": ["b.txt"], "file": ["a.txt"]}


def test_parse_args_does_not_modify_input() -> None:
    tokens = ["-p", "red", "--", "x"]

    parse_args(tokens)

    assert tokens == ["-p", "red", "--", "x"]


def test_parse_args_accepts_any_iterable() -> None:
    args = parse_args(iter(["-p", "red"]), iter(["o"]))

    assert args == {"_": [], "p": ["red"]}


def test_parse_args_orders_keys_by_last_value() -> None:
    args = parse_args(["-p", "red", "--peppers", "blue", "-p", "green", "-o"])

    assert list(args) == ["_", "peppers", "p", "o"]
