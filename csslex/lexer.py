""" CHARACTER CHECKS AND PRIMITIVE READERS
https://www.w3.org/TR/css-syntax-3/#tokenizer-definitions

Shared by the selector and the at-rule lexers. Every reader works on a single
cursor (`Reader.index`) into an immutable source string, so a token's verbatim
`content` is always `source[start:index]`.
"""

from __future__ import annotations

__all__ = ["Check", "Reader"]

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isascii() and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and current != '' and ord(current) > 127

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current != '' and current in '0123456789'

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current != '' and current in ' \t\n\r\f'

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or current in ('-', '_'))

    @staticmethod
    def ident(current: str | None, extended: bool = False) -> bool:
        if current is None:
            return False
        if Check.letter(current) or Check.digit(current) or current in ('-', '_'):
            return True
        return extended and Check.non_ascii(current)

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in ('+', '-'):
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


class Reader:
    """A cursor over a source string with the reading primitives both lexers share.

    Readers never raise on malformed input: a construct that is cut short (an
    unterminated quote, a missing `)`) simply stops at the end of the source.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.index = 0

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead, `peek()` being the current one."""
        index = self.index + amount - 1
        if index < len(self.source):
            return self.source[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.source):
            self.index += 1
            return self.source[self.index - 1]
        return None

    def eof(self) -> bool:
        return self.index >= len(self.source)

    def slice(self, start: int) -> str:
        return self.source[start:self.index]

    def skip_whitespace(self) -> None:
        while Check.whitespace(self.peek()):
            self.index += 1

    def _consume_ident_(self, extended: bool = False) -> str:
        """Read an identifier; in extended mode non-ASCII code points and
        backslash escapes (kept verbatim) are part of it too."""
        start = self.index
        while not self.eof():
            current = self.peek()
            if Check.ident(current, extended):
                self.index += 1
            elif extended and Check.escape(current, self.peek(2)):
                self.index += 2
            else:
                break
        return self.slice(start)

    def _consume_string_(self) -> str:
        """Read a quoted string starting at its opening quote, quotes included."""
        start = self.index
        quote = self.next()
        escaped = False
        while (current := self.next()) is not None:
            if escaped:
                escaped = False
            elif current == "\\":
                escaped = True
            elif current == quote:
                break
        return self.slice(start)

    def _consume_number_(self) -> tuple[int | float, str]:
        """Read an optionally signed integer or decimal number.

        Returns:
            tuple[int | float, str]: The numeric value and its source text.
        """
        start = self.index
        decimal = False
        if (peek := self.peek()) is not None and peek in "+-":
            self.index += 1
        while Check.digit(self.peek()):
            self.index += 1
        if self.peek() == "." and Check.digit(self.peek(2)):
            decimal = True
            self.index += 1
            while Check.digit(self.peek()):
                self.index += 1
        raw = self.slice(start)
        return (float(raw) if decimal else int(raw)), raw

    def _consume_namespace_(self) -> str | None:
        """Read an `ns|` or `*|` prefix.

        A `|` that starts `|=` or `||` is not a namespace separator. When no
        prefix is found the cursor is left where it was.
        """
        start = self.index
        if self.peek() == "*":
            self.index += 1
        else:
            self._consume_ident_(extended=True)
        if self.index > start and self.peek() == "|" and self.peek(2) not in ("=", "|"):
            namespace = self.slice(start)
            self.index += 1
            return namespace
        self.index = start
        return None

    def _consume_until_(self, end: str, nested: bool = False) -> str:
        """Read up to `end`, which is left unconsumed.

        Quoted strings and backslash escapes are opaque. With `nested` the
        reader counts parentheses and stops at the `)` closing the one the
        cursor sits just after.
        """
        start = self.index
        depth = 1
        while (current := self.peek()) is not None:
            if current == "\\":
                self.index += 2 if self.peek(2) is not None else 1
                continue
            if current in "\"'":
                self._consume_string_()
                continue
            if nested and current == "(":
                depth += 1
            elif nested and current == ")":
                depth -= 1
                if depth == 0:
                    break
            elif not nested and current == end:
                break
            self.index += 1
        return self.slice(start)
