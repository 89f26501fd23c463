"""Tests for the at-rule prelude lexer and stringifier."""

import pytest

from csslex.at_rules import stringify_at_rule, tokenize_at_rule
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
    UrlToken,
)


MEDIA = AtRuleNameToken(content="@media", name="media")


def ident(value):
    return IdentifierToken(content=value, value=value)


def delim(value):
    return DelimiterToken(content=value, delimiter=value)


def op(value):
    return OperatorToken(content=value, operator=value)


# ---------------------------------------------------------------------------
# @media
# ---------------------------------------------------------------------------


class TestMedia:
    def test_name_only(self):
        assert tokenize_at_rule("@media") == (MEDIA,)

    def test_feature_query(self):
        assert tokenize_at_rule("@media screen and (min-width: 768px)") == (
            MEDIA,
            ident("screen"),
            op("and"),
            delim("("),
            ident("min-width"),
            delim(":"),
            DimensionToken(content="768px", value=768, unit="px"),
            delim(")"),
        )

    def test_stringify_spreads_punctuation(self):
        tokens = tokenize_at_rule("@media screen and (min-width: 768px)")
        assert stringify_at_rule(tokens) == "@media screen and ( min-width : 768px )"

    def test_or(self):
        tokens = tokenize_at_rule("@media (orientation: portrait) or (orientation: landscape)")
        assert tokens[6] == op("or")

    def test_not(self):
        assert tokenize_at_rule("@media not print") == (MEDIA, op("not"), ident("print"))

    def test_logical_operator_before_parenthesis_is_not_a_function(self):
        assert tokenize_at_rule("@supports not(display: flex)")[1:3] == (op("not"), delim("("))

    def test_ratio(self):
        assert tokenize_at_rule("@media (aspect-ratio: 16/9)")[4:7] == (
            NumberToken(content="16", value=16),
            delim("/"),
            NumberToken(content="9", value=9),
        )

    def test_decimal_dimension(self):
        (token,) = tokenize_at_rule("@media (min-resolution: 2.5dppx)")[4:5]
        assert token == DimensionToken(content="2.5dppx", value=2.5, unit="dppx")


# ---------------------------------------------------------------------------
# @container
# ---------------------------------------------------------------------------


class TestContainer:
    @pytest.mark.parametrize("operator", [">", "<", "=", ">=", "<="])
    def test_comparison(self, operator):
        tokens = tokenize_at_rule(f"@container (width {operator} 400px)")
        assert tokens[3] == op(operator)

    def test_range(self):
        tokens = tokenize_at_rule("@container (400px <= width <= 800px)")
        assert [token.kind for token in tokens] == [
            "at-rule-name", "delimiter", "dimension", "operator",
            "identifier", "operator", "dimension", "delimiter",
        ]

    def test_name_followed_by_query_is_a_function(self):
        assert tokenize_at_rule("@container sidebar (min-width: 300px)") == (
            AtRuleNameToken(content="@container", name="container"),
            FunctionToken(
                content="sidebar(min-width: 300px)", name="sidebar", argument="min-width: 300px"
            ),
        )


# ---------------------------------------------------------------------------
# Other at-rules
# ---------------------------------------------------------------------------


class TestOtherAtRules:
    def test_keyframes(self):
        assert tokenize_at_rule("@keyframes slide-in") == (
            AtRuleNameToken(content="@keyframes", name="keyframes"),
            ident("slide-in"),
        )

    def test_vendor_prefixed_name(self):
        (name, _) = tokenize_at_rule("@-webkit-keyframes fade")
        assert name == AtRuleNameToken(content="@-webkit-keyframes", name="-webkit-keyframes")

    def test_quoted_keyframes_name(self):
        assert tokenize_at_rule('@keyframes "my-animation"')[1] == StringToken(
            content='"my-animation"', value='"my-animation"'
        )

    def test_custom_property(self):
        assert tokenize_at_rule("@property --my-color")[1] == ident("--my-color")

    def test_font_face(self):
        assert tokenize_at_rule("@font-face") == (
            AtRuleNameToken(content="@font-face", name="font-face"),
        )

    def test_page_pseudo_class(self):
        assert tokenize_at_rule("@page :first")[1:] == (delim(":"), ident("first"))

    def test_layer_list(self):
        tokens = tokenize_at_rule("@layer reset, base, components")
        assert tokens[1:] == (
            ident("reset"), delim(","), ident("base"), delim(","), ident("components"),
        )
        assert stringify_at_rule(tokens) == "@layer reset , base , components"

    def test_charset(self):
        assert tokenize_at_rule('@charset "UTF-8"')[1] == StringToken(
            content='"UTF-8"', value='"UTF-8"'
        )

    def test_supports_selector_function(self):
        assert tokenize_at_rule("@supports selector(:has(> img))")[1] == FunctionToken(
            content="selector(:has(> img))", name="selector", argument=":has(> img)"
        )

    def test_import_with_layer(self):
        assert tokenize_at_rule('@import "theme.css" layer(theme)')[1:] == (
            StringToken(content='"theme.css"', value='"theme.css"'),
            FunctionToken(content="layer(theme)", name="layer", argument="theme"),
        )


class TestNamespace:
    def test_default_namespace_url(self):
        assert tokenize_at_rule("@namespace url(http://www.w3.org/1999/xhtml)") == (
            AtRuleNameToken(content="@namespace", name="namespace"),
            UrlToken(
                content="url(http://www.w3.org/1999/xhtml)", value="http://www.w3.org/1999/xhtml"
            ),
        )

    def test_prefixed_namespace(self):
        assert tokenize_at_rule("@namespace svg url(http://www.w3.org/2000/svg)")[1:] == (
            ident("svg"),
            UrlToken(content="url(http://www.w3.org/2000/svg)", value="http://www.w3.org/2000/svg"),
        )

    def test_url_value_is_stripped(self):
        (token,) = tokenize_at_rule("url( a.css )")
        assert token == UrlToken(content="url( a.css )", value="a.css")

    def test_quoted_url(self):
        (token,) = tokenize_at_rule('url("font.woff2")')
        assert token.value == '"font.woff2"'


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestValues:
    def test_hash(self):
        assert tokenize_at_rule("#ff0000") == (HashToken(content="#ff0000", value="ff0000"),)

    def test_percentage(self):
        assert tokenize_at_rule("50%") == (PercentageToken(content="50%", value=50),)

    def test_signed_numbers(self):
        assert tokenize_at_rule("-1 +.5") == (
            NumberToken(content="-1", value=-1),
            NumberToken(content="+.5", value=0.5),
        )

    def test_whitespace_between_function_name_and_parenthesis(self):
        (token,) = tokenize_at_rule("calc (1px + 2px)")
        assert token == FunctionToken(content="calc(1px + 2px)", name="calc", argument="1px + 2px")

    def test_round_trip_of_every_value_kind(self):
        source = '@import "a.css" url(b.css) 10 2.5em 50% #fff calc(1px + (2px * 3))'
        tokens = tokenize_at_rule(source)
        assert [token.kind for token in tokens] == [
            "at-rule-name", "string", "url", "number", "dimension",
            "percentage", "hash", "function",
        ]
        assert stringify_at_rule(tokens) == source
        assert tokenize_at_rule(stringify_at_rule(tokens)) == tokens


# ---------------------------------------------------------------------------
# Leniency
# ---------------------------------------------------------------------------


class TestUnknownCharacters:
    def test_skipped(self):
        assert tokenize_at_rule("@layer a.b {") == (
            AtRuleNameToken(content="@layer", name="layer"),
            ident("a"),
            ident("b"),
        )

    def test_unterminated_string(self):
        assert tokenize_at_rule('@import "a.css')[1] == StringToken(content='"a.css', value='"a.css')

    def test_unterminated_function(self):
        assert tokenize_at_rule("rgb(1, 2")[0] == FunctionToken(
            content="rgb(1, 2", name="rgb", argument="1, 2"
        )

    def test_unterminated_url(self):
        assert tokenize_at_rule("url(a.css") == (UrlToken(content="url(a.css", value="a.css"),)

    def test_unterminated_function_is_stable(self):
        tokens = tokenize_at_rule("@media min-width ( (")
        assert tokens[1] == FunctionToken(content="min-width( (", name="min-width", argument=" (")
        assert tokenize_at_rule(stringify_at_rule(tokens)) == tokens

    def test_empty(self):
        assert tokenize_at_rule("") == ()
        assert stringify_at_rule(()) == ""
