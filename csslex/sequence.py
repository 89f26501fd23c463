"""Composing token sequences.

Sequences are tuples and are never modified: every function here returns a
new tuple, so builders branching off the same prefix never see each other's
tokens.
"""

from __future__ import annotations
from collections.abc import Sequence

from csslex.at_rules import stringify_at_rule, tokenize_at_rule
from csslex.selectors import tokenize_selector
from csslex.tokens import CommaToken, Token, Tokens

__all__ = ["join_selectors", "append", "group", "compound", "extend_at_rule"]


def join_selectors(selectors: Sequence[str]) -> str:
    """`['.a', '.b']` -> `'.a, .b'`"""
    if len(selectors) == 0:
        raise ValueError("At least one selector must be provided")
    for selector in selectors:
        if not isinstance(selector, str):
            raise TypeError(f"Selector must be a string, got {type(selector).__name__}")
    return ", ".join(selectors)


def append(tokens: Tokens, *extra: Token) -> Tokens:
    return (*tokens, *extra)


def group(tokens: Tokens, selector: str) -> Tokens:
    """Add `selector` to the selector list: `.btn` + `.link` -> `.btn, .link`."""
    return append(tokens, CommaToken(), *tokenize_selector(selector))


def compound(tokens: Tokens, selector: str) -> Tokens:
    """Continue the current selector with `selector`: `.btn` + `.link` -> `.btn.link`.

    Leading whitespace in `selector` becomes a descendant combinator. Nothing
    checks that the result is valid CSS, e.g. a type selector after a class.
    """
    return append(tokens, *tokenize_selector(selector))


def extend_at_rule(tokens: Tokens, parameter: str) -> Tokens:
    """Add `parameter` to an at-rule prelude: `@media screen` + `and (color)`."""
    return tokenize_at_rule(f"{stringify_at_rule(tokens)} {parameter}")
