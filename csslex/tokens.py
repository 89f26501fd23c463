from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal
from typing_extensions import TypeAliasType

__all__ = [
    "Token",
    "Tokens",
    "Kind",

    "TypeSelectorToken",
    "UniversalToken",
    "IdToken",
    "ClassToken",
    "AttributeToken",
    "PseudoClassToken",
    "PseudoElementToken",
    "CombinatorToken",
    "CommaToken",

    "AtRuleNameToken",
    "IdentifierToken",
    "StringToken",
    "HashToken",
    "NumberToken",
    "DimensionToken",
    "PercentageToken",
    "FunctionToken",
    "UrlToken",
    "OperatorToken",
    "DelimiterToken",

    "SELECTOR_KINDS",
    "AT_RULE_KINDS",
]

AttributeOperator = Literal['=', '~=', '|=', '^=', '$=', '*=']
CaseFlag = Literal['i', 'I', 's', 'S']

# Selectors

@dataclass(frozen=True, kw_only=True)
class TypeSelectorToken:
    kind: Literal['type-selector'] = field(default='type-selector', init=False)
    content: str
    name: str
    namespace: str | None = None

@dataclass(frozen=True, kw_only=True)
class UniversalToken:
    kind: Literal['universal'] = field(default='universal', init=False)
    content: str
    namespace: str | None = None

@dataclass(frozen=True, kw_only=True)
class IdToken:
    kind: Literal['id'] = field(default='id', init=False)
    content: str
    name: str

@dataclass(frozen=True, kw_only=True)
class ClassToken:
    kind: Literal['class'] = field(default='class', init=False)
    content: str
    name: str

@dataclass(frozen=True, kw_only=True)
class AttributeToken:
    """`[name]`, `[ns|name op value flag]`.

    Optional parts are `None` unless they were present in the source; `value`
    keeps its quotes when it was quoted.
    """
    kind: Literal['attribute'] = field(default='attribute', init=False)
    content: str
    name: str
    namespace: str | None = None
    operator: AttributeOperator | None = None
    value: str | None = None
    case_sensitive: CaseFlag | None = None

@dataclass(frozen=True, kw_only=True)
class PseudoClassToken:
    kind: Literal['pseudo-class'] = field(default='pseudo-class', init=False)
    content: str
    name: str
    argument: str | None = None

@dataclass(frozen=True, kw_only=True)
class PseudoElementToken:
    kind: Literal['pseudo-element'] = field(default='pseudo-element', init=False)
    content: str
    name: str
    argument: str | None = None

@dataclass(frozen=True, kw_only=True)
class CombinatorToken:
    """One of `>`, `+`, `~`, `||`, or a single space for the descendant combinator."""
    kind: Literal['combinator'] = field(default='combinator', init=False)
    content: str

@dataclass(frozen=True, kw_only=True)
class CommaToken:
    kind: Literal['comma'] = field(default='comma', init=False)
    content: str = ','

# At-rule preludes

@dataclass(frozen=True, kw_only=True)
class AtRuleNameToken:
    kind: Literal['at-rule-name'] = field(default='at-rule-name', init=False)
    content: str
    name: str

@dataclass(frozen=True, kw_only=True)
class IdentifierToken:
    kind: Literal['identifier'] = field(default='identifier', init=False)
    content: str
    value: str

@dataclass(frozen=True, kw_only=True)
class StringToken:
    kind: Literal['string'] = field(default='string', init=False)
    content: str
    value: str  # quotes included

@dataclass(frozen=True, kw_only=True)
class HashToken:
    kind: Literal['hash'] = field(default='hash', init=False)
    content: str
    value: str

@dataclass(frozen=True, kw_only=True)
class NumberToken:
    kind: Literal['number'] = field(default='number', init=False)
    content: str
    value: int | float

@dataclass(frozen=True, kw_only=True)
class DimensionToken:
    kind: Literal['dimension'] = field(default='dimension', init=False)
    content: str
    value: int | float
    unit: str

@dataclass(frozen=True, kw_only=True)
class PercentageToken:
    kind: Literal['percentage'] = field(default='percentage', init=False)
    content: str
    value: int | float

@dataclass(frozen=True, kw_only=True)
class FunctionToken:
    kind: Literal['function'] = field(default='function', init=False)
    content: str
    name: str
    argument: str

@dataclass(frozen=True, kw_only=True)
class UrlToken:
    kind: Literal['url'] = field(default='url', init=False)
    content: str
    value: str

@dataclass(frozen=True, kw_only=True)
class OperatorToken:
    """Comparison (`<`, `>`, `=`, `<=`, `>=`) or logical (`and`, `or`, `not`) operator."""
    kind: Literal['operator'] = field(default='operator', init=False)
    content: str
    operator: str

@dataclass(frozen=True, kw_only=True)
class DelimiterToken:
    kind: Literal['delimiter'] = field(default='delimiter', init=False)
    content: str
    delimiter: Literal['(', ')', ',', ':', '/']

Token = TypeAliasType(
    "Token",
    TypeSelectorToken
    | UniversalToken
    | IdToken
    | ClassToken
    | AttributeToken
    | PseudoClassToken
    | PseudoElementToken
    | CombinatorToken
    | CommaToken
    | AtRuleNameToken
    | IdentifierToken
    | StringToken
    | HashToken
    | NumberToken
    | DimensionToken
    | PercentageToken
    | FunctionToken
    | UrlToken
    | OperatorToken
    | DelimiterToken,
)

# Sequences are tuples; extending one always builds a new tuple.
Tokens = TypeAliasType("Tokens", tuple[Token, ...])

Kind = Literal[
    'type-selector', 'universal', 'id', 'class', 'attribute', 'pseudo-class',
    'pseudo-element', 'combinator', 'comma',
    'at-rule-name', 'identifier', 'string', 'hash', 'number', 'dimension',
    'percentage', 'function', 'url', 'operator', 'delimiter',
]

SELECTOR_KINDS: frozenset[Kind] = frozenset({
    'type-selector', 'universal', 'id', 'class', 'attribute',
    'pseudo-class', 'pseudo-element', 'combinator', 'comma',
})
AT_RULE_KINDS: frozenset[Kind] = frozenset({
    'at-rule-name', 'identifier', 'string', 'hash', 'number', 'dimension',
    'percentage', 'function', 'url', 'operator', 'delimiter',
})
