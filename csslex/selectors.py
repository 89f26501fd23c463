""" CSS SELECTOR LEXING
https://www.w3.org/TR/selectors-4/#grammar

References:
    - [combinators](https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_selectors/Selectors_and_combinators)
    - [attribute selectors](https://developer.mozilla.org/en-US/docs/Web/CSS/Attribute_selectors)
    - [namespaces](https://developer.mozilla.org/en-US/docs/Web/CSS/Namespace_separator)

.class       | class
#id          | id
[ns|attr=v]  | attribute
:name(arg)   | pseudo-class
::name(arg)  | pseudo-element
*, ns|*      | universal
ns|name      | type-selector
> + ~ || ' ' | combinator
,            | comma
"""

from __future__ import annotations
from collections.abc import Iterable

from csslex.lexer import Check, Reader
from csslex.tokens import (
    AttributeToken,
    ClassToken,
    CombinatorToken,
    CommaToken,
    IdToken,
    PseudoClassToken,
    PseudoElementToken,
    Token,
    Tokens,
    TypeSelectorToken,
    UniversalToken,
)

__all__ = ["SelectorLexer", "tokenize_selector", "stringify_selector"]

COMBINATORS = ">+~"
OPERATOR_STARTS = "~|^$*"
CASE_FLAGS = "iIsS"


class SelectorLexer(Reader):
    """Single left to right scan of a selector (list) into tokens.

    Characters that start no known construct are skipped without a token.
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
        """Tokenize the entire source at once."""
        return tuple(self)

    def _combinator_ahead_(self) -> str | None:
        if self.peek() == "|" and self.peek(2) == "|":
            return "||"
        if (peek := self.peek()) is not None and peek in COMBINATORS:
            return peek
        return None

    def _consume_whitespace_(self) -> CombinatorToken | None:
        self.skip_whitespace()
        if (combinator := self._combinator_ahead_()) is not None:
            self.index += len(combinator)
            self.skip_whitespace()
            return CombinatorToken(content=combinator)
        if not self.eof() and self.peek() != ",":
            return CombinatorToken(content=" ")
        return None

    def _consume_combinator_(self, combinator: str) -> CombinatorToken:
        self.index += len(combinator)
        self.skip_whitespace()
        return CombinatorToken(content=combinator)

    def _consume_attribute_(self) -> AttributeToken:
        start = self.index
        self.index += 1  # [
        self.skip_whitespace()

        # `ns|` but never the `|=` operator
        namespace = self._consume_namespace_()
        if namespace is None and self.peek() == "|" and self.peek(2) not in ("=", "|"):
            # `[|name]`: explicitly no namespace
            namespace = ""
            self.index += 1
        name = self._consume_ident_(extended=True)
        self.skip_whitespace()

        operator = value = case_sensitive = None
        if (peek := self.peek()) is not None and peek in OPERATOR_STARTS and self.peek(2) == "=":
            operator = peek + "="
            self.index += 2
        elif peek == "=":
            operator = "="
            self.index += 1

        if operator is not None:
            self.skip_whitespace()
            if (peek := self.peek()) is not None and peek in "\"'":
                value = self._consume_string_()
            else:
                value = self._consume_ident_(extended=True) or None
            self.skip_whitespace()
            if (
                (peek := self.peek()) is not None
                and peek in CASE_FLAGS
                and (self.peek(2) in (None, "]") or Check.whitespace(self.peek(2)))
            ):
                case_sensitive = peek
                self.index += 1
                self.skip_whitespace()

        # Anything left before `]` is not part of the grammar.
        self._consume_until_("]")
        if self.peek() == "]":
            self.index += 1

        return AttributeToken(
            content=self.slice(start),
            name=name,
            namespace=namespace,
            operator=operator,
            value=value,
            case_sensitive=case_sensitive,
        )

    def _consume_pseudo_(self) -> PseudoClassToken | PseudoElementToken:
        start = self.index
        element = self.peek(2) == ":"
        self.index += 2 if element else 1
        name = self._consume_ident_(extended=True)

        argument = None
        if self.peek() == "(":
            self.index += 1
            argument = self._consume_until_(")", nested=True)
            if self.peek() == ")":
                self.index += 1

        if element:
            return PseudoElementToken(content=self.slice(start), name=name, argument=argument)
        return PseudoClassToken(content=self.slice(start), name=name, argument=argument)

    def _consume_qualified_(self) -> TypeSelectorToken | UniversalToken:
        """A type or universal selector, optionally prefixed with a namespace."""
        start = self.index
        namespace = self._consume_namespace_()
        if namespace is None and self.peek() == "|":
            # `|name`: explicitly no namespace
            namespace = ""
            self.index += 1

        if self.peek() == "*":
            self.index += 1
            return UniversalToken(content=self.slice(start), namespace=namespace)

        name = self._consume_ident_(extended=True)
        return TypeSelectorToken(content=self.slice(start), name=name, namespace=namespace)

    def consume(self) -> Token | None:
        """Consume code points and return the next token, or `None` if they
        produced no token."""
        current = self.peek()
        if Check.whitespace(current):
            return self._consume_whitespace_()
        elif current == ",":
            self.index += 1
            self.skip_whitespace()
            return CommaToken()
        elif (combinator := self._combinator_ahead_()) is not None:
            return self._consume_combinator_(combinator)
        elif current == "#":
            start = self.index
            self.index += 1
            name = self._consume_ident_(extended=True)
            return IdToken(content=self.slice(start), name=name)
        elif current == ".":
            start = self.index
            self.index += 1
            name = self._consume_ident_(extended=True)
            return ClassToken(content=self.slice(start), name=name)
        elif current == "[":
            return self._consume_attribute_()
        elif current == ":":
            return self._consume_pseudo_()
        elif current == "*":
            if self.peek(2) == "|":
                return self._consume_qualified_()
            self.index += 1
            return UniversalToken(content="*")
        elif current == "|" and self.peek(2) != "=":
            return self._consume_qualified_()
        elif Check.ident(current, extended=True) or Check.escape(current, self.peek(2)):
            return self._consume_qualified_()

        self.index += 1
        return None


def tokenize_selector(source: str) -> Tokens:
    """Tokenize a selector or selector list, e.g. `div > .card:hover, a[href]`."""
    return SelectorLexer(source).process()


def _normalize_(token: Token) -> str:
    if token.kind == "combinator":
        trimmed = token.content.strip()
        if trimmed == "":
            return " "
        return f" {trimmed} "
    elif token.kind == "comma":
        return ", "
    return token.content


def stringify_selector(tokens: Iterable[Token]) -> str:
    """Join tokens back into a selector, with spaces around combinators and after commas."""
    return "".join(_normalize_(token) for token in tokens)
