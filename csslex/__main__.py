"""csslex CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from csslex import __version__
from csslex.at_rules import stringify_at_rule, tokenize_at_rule
from csslex.display import default_options, format_tokens
from csslex.parse import stringify, tokenize
from csslex.selectors import stringify_selector, tokenize_selector
from csslex.tokens import Tokens

MODES = {
    "auto": (tokenize, stringify),
    "selector": (tokenize_selector, stringify_selector),
    "at-rule": (tokenize_at_rule, stringify_at_rule),
}

mode_option = click.option(
    "--mode",
    type=click.Choice(list(MODES)),
    default="auto",
    show_default=True,
    help="Lexer to use; `auto` picks the at-rule lexer for input starting with `@`.",
)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read().strip()
    return source


def _tokenize(source: str, mode: str) -> Tokens:
    lex, _ = MODES[mode]
    return lex(_read_source(source))


@click.group()
@click.version_option(version=__version__, prog_name="csslex")
@click.option("--verbose", is_flag=True, help="Log lexer decisions to stderr.")
def cli(verbose: bool) -> None:
    """csslex - tokenize and normalize CSS selectors and at-rule preludes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command(name="tokenize")
@click.argument("source")
@mode_option
@click.option("--plain", is_flag=True, help="Do not color the token kinds.")
@click.option("--no-content", is_flag=True, help="Leave out the source text of each token.")
def tokenize_command(source: str, mode: str, plain: bool, no_content: bool) -> None:
    """Print the tokens of SOURCE, one per line. Use `-` to read standard input."""
    tokens = _tokenize(source, mode)
    if not tokens:
        click.echo("(no tokens)", err=True)
        return
    options = default_options({"color": not plain, "show_content": not no_content})
    click.echo(format_tokens(tokens, options))


@cli.command(name="normalize")
@click.argument("source")
@mode_option
def normalize_command(source: str, mode: str) -> None:
    """Print the canonical form of SOURCE. Use `-` to read standard input."""
    _, render = MODES[mode]
    click.echo(render(_tokenize(source, mode)))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
