"""Tests for path navigation and list helpers."""

from decimal import Decimal

from json_core import arr, navigate, obj
from json_core.navigation import concat_map_or_fail, fold_each_or_fail
from json_core.values import JNumber, Null


def test_navigate_key_then_index():
    doc = obj(("a", [1, 2]))
    assert navigate(doc, "a", 1) == JNumber(2)


def test_navigate_missing_key():
    doc = obj(("a", [1, 2]))
    assert navigate(doc, "missing") is None


def test_navigate_missing_midway():
    doc = obj(("a", [1, 2]))
    assert navigate(doc, "b", 0) is None
    assert navigate(doc, "a", 5, "c") is None


def test_navigate_from_none():
    assert navigate(None, "a") is None


def test_navigate_empty_path():
    doc = obj(("a", 1))
    assert navigate(doc) is doc
    assert navigate(None) is None


def test_navigate_nested():
    doc = obj(("org", {"boss": {"name": "Joe", "reports": ["Ann", "Bo"]}}))
    assert navigate(doc, "org", "boss", "reports", 0).as_string() == "Ann"


def test_navigate_through_null():
    doc = obj(("a", None))
    assert navigate(doc, "a") is Null
    assert navigate(doc, "a", "b") is None


# ---------------------------------------------------------------------------
# concat_map_or_fail
# ---------------------------------------------------------------------------

def test_concat_map_or_fail():
    values = [arr(1, 2), arr(), arr(3)]
    result = concat_map_or_fail(values, lambda j: j.as_long())
    assert result == [1, 2, 3]


def test_concat_map_or_fail_non_array():
    values = [arr(1), obj(("a", 1))]
    assert concat_map_or_fail(values, lambda j: j.as_long()) is None


def test_concat_map_or_fail_element_failure():
    values = [arr(1), arr("x")]
    assert concat_map_or_fail(values, lambda j: j.as_long()) is None


# ---------------------------------------------------------------------------
# fold_each_or_fail
# ---------------------------------------------------------------------------

def test_fold_each_or_fail():
    values = [JNumber(1), JNumber(Decimal("2.5"))]
    total = fold_each_or_fail(values, Decimal(0), lambda acc, j: None if j.as_number() is None else acc + j.as_number())
    assert total == Decimal("3.5")


def test_fold_each_or_fail_stops():
    values = [JNumber(1), Null, JNumber(3)]
    assert fold_each_or_fail(values, 0, lambda acc, j: None if j.as_long() is None else acc + j.as_long()) is None
