"""Tests for the parse/print bridge."""

from decimal import Decimal

import pytest

from json_core import JsonConstructionError, arr, obj
from json_core.bridge import (
    from_builtins,
    parse,
    parse_or_none,
    pretty_json,
    print_json,
    to_builtins,
)
from json_core.config import BridgeConfig
from json_core.errors import ParseFailure
from json_core.values import JArray, JAssoc, JBool, JNumber, JString, Null

TREES = [
    Null,
    JBool(False),
    JNumber(0),
    JNumber(Decimal("-12.75")),
    JNumber(Decimal("1e400")),
    JNumber(Decimal("0.1")),
    JString(""),
    JString('quote " backslash \\ newline \n tab \t'),
    JString("prénom Brešar ßoë 日本"),
    JArray(()),
    JAssoc({}),
    obj(("a", [1, 2, {"b": None}]), ("c", {"d": [True, False, "x"]})),
    arr([[[]]], {}, "", 0),
]


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tree", TREES)
def test_parse_print_round_trip(tree):
    assert parse(print_json(tree)) == tree


@pytest.mark.parametrize("tree", TREES)
def test_parse_pretty_round_trip(tree):
    assert parse(pretty_json(tree)) == tree


@pytest.mark.parametrize("tree", TREES)
def test_method_forms(tree):
    assert tree.print() == print_json(tree)
    assert tree.pretty() == pretty_json(tree)
    assert str(tree) == tree.print()


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

def test_print_compact():
    assert print_json(obj(("a", [1, 2]))) == '{"a":[1,2]}'


def test_print_scalars():
    assert print_json(Null) == "null"
    assert print_json(JBool(True)) == "true"
    assert print_json(JNumber(Decimal("2.50"))) == "2.50"
    assert print_json(JString("é")) == '"é"'


def test_pretty_two_spaces():
    assert pretty_json(obj(("a", 1))) == '{\n  "a": 1\n}'


def test_pretty_custom_indent():
    text = pretty_json(obj(("a", 1)), BridgeConfig(indent=4))
    assert text == '{\n    "a": 1\n}'


def test_print_sorted_keys():
    tree = obj(("b", 1), ("a", 2))
    assert print_json(tree) == '{"b":1,"a":2}'
    assert print_json(tree, BridgeConfig(sort_keys=True)) == '{"a":2,"b":1}'


def test_config_rejects_negative_indent():
    with pytest.raises(ValueError):
        BridgeConfig(indent=-1)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_all_variants():
    result = parse('[null, true, 1, 2.5, "s", [], {"k": {}}]')
    assert result == JArray(
        (Null, JBool(True), JNumber(1), JNumber(Decimal("2.5")), JString("s"),
         JArray(()), JAssoc({"k": JAssoc({})}))
    )


def test_parse_keeps_decimal_exact():
    result = parse("0.10000000000000000000001")
    assert result.as_number() == Decimal("0.10000000000000000000001")
    assert result.as_double() is None


def test_parse_exponent_then_narrow():
    assert parse("1e2").as_long() == 100


def test_parse_bytes():
    assert parse(b'{"a": 1}') == obj(("a", 1))


@pytest.mark.parametrize("text", ["", "{bad", "[1,]", "NaN", "{'a': 1}", "tru"])
def test_parse_failure_is_returned(text):
    result = parse(text)
    assert isinstance(result, ParseFailure)
    assert result.message
    assert parse_or_none(text) is None


def test_parse_or_none_success():
    assert parse_or_none("[]") == JArray(())


# ---------------------------------------------------------------------------
# Builtins
# ---------------------------------------------------------------------------

def test_to_builtins():
    tree = obj(("a", [1, None]), ("b", True))
    assert to_builtins(tree) == {"a": [Decimal(1), None], "b": True}


def test_from_builtins():
    assert from_builtins({"a": [1, 0.5, None, "s", False]}) == obj(
        ("a", [1, Decimal("0.5"), None, "s", False])
    )


def test_from_builtins_rejects_unknown():
    with pytest.raises(JsonConstructionError):
        from_builtins(object())
    with pytest.raises(JsonConstructionError):
        from_builtins({1: "a"})


# ---------------------------------------------------------------------------
# Nesting depth and unrepresentable text
# ---------------------------------------------------------------------------

def test_parse_too_deep_is_a_failure():
    text = "[" * 5000 + "]" * 5000
    assert isinstance(parse(text), ParseFailure)
    assert parse_or_none(text) is None


def test_deep_tree_prints_and_parses_back():
    text = "[" * 500 + "]" * 500
    tree = parse(text)
    assert print_json(tree) == text
    assert print_json(parse(pretty_json(tree))) == text


def test_deep_object_prints():
    text = '{"a":' * 500 + "{}" + "}" * 500
    assert print_json(parse(text)) == text


def test_from_builtins_deep_nesting():
    value: list = []
    for _ in range(5000):
        value = [value]
    tree = from_builtins(value)
    depth = 0
    while tree.as_array():
        tree = tree.nav(0)
        depth += 1
    assert depth == 5000


def test_parse_lone_surrogate_escape_is_a_failure():
    assert isinstance(parse('"\\ud800"'), ParseFailure)
    assert parse_or_none('{"\\udfff": 1}') is None
