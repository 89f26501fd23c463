"""Choose between the selector and the at-rule lexers."""

from __future__ import annotations
from collections.abc import Sequence
import logging

from csslex.at_rules import stringify_at_rule, tokenize_at_rule
from csslex.selectors import stringify_selector, tokenize_selector
from csslex.tokens import Token, Tokens

__all__ = ["tokenize", "stringify", "is_at_rule"]

logger = logging.getLogger(__name__)


def is_at_rule(tokens: Sequence[Token]) -> bool:
    return len(tokens) > 0 and tokens[0].kind == "at-rule-name"


def tokenize(source: str) -> Tokens:
    """Tokenize a selector, or an at-rule prelude when `source` starts with `@`.

    Never raises for malformed CSS; anything unrecognized is skipped.
    """
    if not isinstance(source, str):
        raise TypeError(
            f"Unexpected input to tokenize. Expected a string, got {type(source).__name__}."
        )

    if source.lstrip().startswith("@"):
        logger.debug("tokenizing %r as an at-rule prelude", source)
        return tokenize_at_rule(source)
    logger.debug("tokenizing %r as a selector", source)
    return tokenize_selector(source)


def stringify(tokens: Sequence[Token]) -> str:
    """Build the canonical string of a token sequence from either lexer."""
    if isinstance(tokens, str) or not isinstance(tokens, Sequence):
        raise TypeError(
            f"Unexpected input to stringify. Expected a sequence of tokens, got {type(tokens).__name__}."
        )

    if is_at_rule(tokens):
        return stringify_at_rule(tokens)
    return stringify_selector(tokens)
