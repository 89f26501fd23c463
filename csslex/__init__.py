"""
References:
    - [selectors](https://www.w3.org/TR/selectors-4/)
    - [at-rules](https://developer.mozilla.org/en-US/docs/Web/CSS/At-rule)
    - [syntax](https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing)

<selector>      div.card > a[href^="https"]:hover, .btn
<at-rule>       @media screen and (min-width: 768px)

selector => type, universal, id, class, attribute, pseudo-class, pseudo-element,
            combinator, comma
at-rule  => at-rule-name, identifier, string, hash, number, dimension, percentage,
            function, url, operator, delimiter

tokenize(str) -> tuple[Token, ...] -> stringify(...) -> canonical str
"""
from csslex.at_rules import stringify_at_rule, tokenize_at_rule
from csslex.parse import is_at_rule, stringify, tokenize
from csslex.selectors import stringify_selector, tokenize_selector
from csslex.sequence import append, compound, extend_at_rule, group, join_selectors
from csslex.tokens import *
from csslex.tokens import __all__ as _token_names

__version__ = "0.1.0"

__all__ = [
    "tokenize",
    "stringify",
    "is_at_rule",
    "tokenize_selector",
    "stringify_selector",
    "tokenize_at_rule",
    "stringify_at_rule",

    "join_selectors",
    "append",
    "group",
    "compound",
    "extend_at_rule",
    *_token_names,
]
