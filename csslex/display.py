from __future__ import annotations
from dataclasses import fields
from typing import Literal, TypedDict
from conterm.pretty import Markup

from csslex.tokens import Kind, Token

__all__ = ["DisplayOptions", "DEFAULTS", "default_options", "format_token", "format_tokens"]

RESET = "\x1b[0m"

Color = Literal["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

class DisplayOptions(TypedDict, total=False):
    color: bool
    show_content: bool
    label_width: int

DEFAULTS: DisplayOptions = {
    "color": True,
    "show_content": True,
    "label_width": 14,
}

KIND_COLORS: dict[Kind, Color] = {
    "type-selector": "cyan",
    "universal": "cyan",
    "id": "cyan",
    "class": "cyan",
    "attribute": "blue",
    "pseudo-class": "magenta",
    "pseudo-element": "magenta",
    "combinator": "yellow",
    "comma": "yellow",
    "at-rule-name": "magenta",
    "identifier": "cyan",
    "string": "green",
    "hash": "green",
    "number": "green",
    "dimension": "green",
    "percentage": "green",
    "function": "blue",
    "url": "green",
    "operator": "yellow",
    "delimiter": "white",
}

def default_options(origin: DisplayOptions | dict | None = None) -> DisplayOptions:
    options = dict(origin or {})
    for key, value in DEFAULTS.items():
        options[key] = options.get(key, value)
    return options

def format_token(token: Token, options: DisplayOptions | None = None) -> str:
    """One line describing a token: its kind followed by the fields that are set.

    Example:
        `attribute      name='href' operator='^=' value='"https"'  [href^="https"]`
    """
    options = default_options(options)
    label = token.kind.ljust(options["label_width"])
    if options["color"]:
        # Only the kind goes through markup; contents may hold `[` and `]`.
        label = Markup.parse(f"[{KIND_COLORS.get(token.kind, 'white')}]{label}", mar=False) + RESET

    parts = [
        f"{field.name}={getattr(token, field.name)!r}"
        for field in fields(token)
        if field.name not in ("kind", "content") and getattr(token, field.name) is not None
    ]
    line = label + " ".join(parts)
    if options["show_content"]:
        # the descendant combinator would vanish as a bare space
        content = token.content if token.content.strip() else repr(token.content)
        line = f"{line}  {content}" if parts else f"{line}{content}"
    return line.rstrip()

def format_tokens(tokens: tuple[Token, ...], options: DisplayOptions | None = None) -> str:
    return "\n".join(format_token(token, options) for token in tokens)
