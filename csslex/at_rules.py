""" CSS AT-RULE PRELUDE LEXING
https://www.w3.org/TR/css-syntax-3/#at-rules

References:
    - [@media](https://developer.mozilla.org/en-US/docs/Web/CSS/@media)
    - [@container](https://developer.mozilla.org/en-US/docs/Web/CSS/@container)
    - [@supports](https://developer.mozilla.org/en-US/docs/Web/CSS/@supports)
    - [@import](https://developer.mozilla.org/en-US/docs/Web/CSS/@import)
    - [@namespace](https://developer.mozilla.org/en-US/docs/Web/CSS/@namespace)

@media screen and (min-width: 768px)
<at-rule-name/> <identifier/> <operator/> <delimiter/><identifier/><delimiter/> <dimension/><delimiter/>
"""

from __future__ import annotations
from collections.abc import Iterable

from csslex.lexer import Check, Reader
from csslex.tokens import (
    AtRuleNameToken,
    DelimiterToken,
    DimensionToken,
    FunctionToken,
    HashToken,
    IdentifierToken,
    NumberToken,
    OperatorToken,
    PercentageToken,
    StringToken,
    Token,
    Tokens,
    UrlToken,
)

__all__ = ["AtRuleLexer", "tokenize_at_rule", "stringify_at_rule"]

LOGICAL_OPERATORS = ("and", "or", "not")
DELIMITERS = "(),:/"


class AtRuleLexer(Reader):
    """Single left to right scan of an at-rule prelude into tokens.

    Whitespace separates tokens but is never emitted.
    """

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        while not self.eof():
            token = self.consume()
            if token is not None:
                return token
        raise StopIteration

    def process(self) -> Tokens:
        """Tokenize the entire prelude at once."""
        return tuple(self)

    def _consume_hash_(self) -> HashToken:
        start = self.index
        self.index += 1
        value = self._consume_ident_()
        return HashToken(content=self.slice(start), value=value)

    def _consume_numeric_(self) -> NumberToken | PercentageToken | DimensionToken:
        """Consume a number and produce a Number, Percentage, or Dimension token."""
        start = self.index
        value, _ = self._consume_number_()
        if Check.ident_start(self.peek()):
            unit = self._consume_ident_()
            return DimensionToken(content=self.slice(start), value=value, unit=unit)
        elif self.peek() == "%":
            self.index += 1
            return PercentageToken(content=self.slice(start), value=value)
        return NumberToken(content=self.slice(start), value=value)

    def _consume_ident_like_(self) -> IdentifierToken | OperatorToken | FunctionToken | UrlToken:
        ident = self._consume_ident_()
        # Never functions, `not (...)` negates the condition that follows
        if ident in LOGICAL_OPERATORS:
            return OperatorToken(content=ident, operator=ident)

        self.skip_whitespace()
        if self.peek() != "(":
            return IdentifierToken(content=ident, value=ident)

        self.index += 1
        argument = self._consume_until_(")", nested=True)
        close = ""
        if self.peek() == ")":
            close = self.next() or ""
        # Whitespace before `(` is dropped; an unterminated argument stays open.
        content = f"{ident}({argument}{close}"
        if ident == "url":
            return UrlToken(content=content, value=argument.strip())
        return FunctionToken(content=content, name=ident, argument=argument)

    def _consume_operator_(self) -> OperatorToken:
        operator = self.next() or ''
        if self.peek() == "=":
            operator += self.next() or ''
        return OperatorToken(content=operator, operator=operator)

    def consume(self) -> Token | None:
        """Consume code points and return the next token, or `None` if they
        produced no token."""
        current = self.peek()
        if Check.whitespace(current):
            self.skip_whitespace()
            return None
        elif current == "@":
            self.index += 1
            name = self._consume_ident_()
            return AtRuleNameToken(content=f"@{name}", name=name)
        elif current is not None and current in "\"'":
            value = self._consume_string_()
            return StringToken(content=value, value=value)
        elif current == "#":
            return self._consume_hash_()
        elif Check.starts_with_number(current, self.peek(2), self.peek(3)):
            return self._consume_numeric_()
        elif Check.ident_start(current):
            return self._consume_ident_like_()
        elif current is not None and current in "<>=":
            return self._consume_operator_()
        elif current is not None and current in DELIMITERS:
            self.index += 1
            return DelimiterToken(content=current, delimiter=current)

        self.index += 1
        return None


def tokenize_at_rule(source: str) -> Tokens:
    """Tokenize an at-rule prelude, e.g. `@media screen and (min-width: 768px)`."""
    return AtRuleLexer(source).process()


def stringify_at_rule(tokens: Iterable[Token]) -> str:
    """Join token contents with single spaces: `@media screen and ( min-width : 768px )`."""
    return " ".join(token.content for token in tokens)
