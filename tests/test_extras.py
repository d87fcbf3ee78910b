import pytest

from hbsdata.errors import RenderError, RenderErrorKind
from hbsdata.extras import (
    all_truthy,
    any_truthy,
    compare_json,
    eq,
    gt,
    gte,
    length,
    logical_not,
    lookup,
    lt,
    lte,
    ne,
)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([None, 4], False),
        ([None, 4, 5, 6], False),
        ([1, 2, 3, 4], True),
        ([1, 2, 3, 4, 0], False),
    ],
)
def test_and(values, expected):
    assert all_truthy(values) is expected


@pytest.mark.parametrize(
    "values, expected",
    [
        ([gt(3, 5), gt(5, 3)], True),
        ([None, 4], True),
        ([None, 4, 5, 6], True),
        ([1, 2, 3, 4], True),
        ([1, 2, 3, 4, 0], True),
        ([None, 2, 3, 4, 0], True),
        ([[], []], False),
        ([[1], []], True),
        ([[1], [2]], True),
        ([[1], [2], [3]], True),
        ([[1], [2], [3], [4]], True),
        ([[1], [2], [3], [4], []], True),
    ],
)
def test_or(values, expected):
    assert any_truthy(values) is expected


def test_cmp():
    assert gt(5, 3) is True
    assert gt(3, 5) is False
    assert logical_not([]) is True


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (5, 5, True),
        (5, 6, False),
        ("foo", "foo", True),
        ("foo", "Foo", False),
        ([5], [5], True),
        ([5], [4], False),
        (5, "5", False),
        (5, [5], False),
    ],
)
def test_eq(x, y, expected):
    assert eq(x, y) is expected


def test_eq_keeps_json_types_apart():
    assert eq(True, 1) is False
    assert eq(5, 5.0) is False
    assert eq({"a": [1, None]}, {"a": [1, None]}) is True
    assert eq(None, None) is True


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (5, 6, True),
        (5, 5, False),
        ("foo", "foo", False),
        ("foo", "Foo", True),
    ],
)
def test_ne(x, y, expected):
    assert ne(x, y) is expected


def test_nested_conditions():
    assert gt(5, 3) is True
    assert logical_not(gt(5, 3)) is False


def test_len():
    assert length([1, 2, 3]) == 3
    assert length({"a": 1, "b": 2}) == 2
    assert length("tomcat") == 6
    assert length(3) == 0


def test_len_counts_bytes_of_strings():
    assert length("你好") == 6


@pytest.mark.parametrize(
    "op, x, y, expected",
    [
        (gt, 5, 3, True),
        (gt, 3, 5, False),
        (gte, 5, 5, True),
        (lt, 3, 5, True),
        (lte, 5, 5, True),
        (lt, 9007199254740992, 9007199254740993, True),
        (gt, 5.5, 3.3, True),
        (gt, 3.3, 5.5, False),
        (gte, 5.5, 5.5, True),
        (lt, 3.3, 5.5, True),
        (lte, 5.5, 5.5, True),
        (gt, "b", "a", True),
        (lt, "a", "b", True),
        (gte, "a", "a", True),
        (gt, 53, "35", True),
        (lt, 53, "35", False),
        (lt, "35", 53, True),
        (gte, "53", 53, True),
        (lt, -1, 0, True),
        (lt, "-1", 0, True),
        (lt, "-1.00", 0, True),
        (gt, "1.00", 0, True),
        (gt, 0, -1, True),
        (gt, 0, "-1", True),
        (gt, 0, "-1.00", True),
        (lt, 0, "1.00", True),
        (gt, 18446744073709551615, -1, True),
        (gt, True, False, True),
        (lt, False, True, True),
    ],
)
def test_comparisons(op, x, y, expected):
    assert op(x, y) is expected


def test_unorderable_values():
    assert compare_json(1, [1]) is None
    assert compare_json(True, 1) is None
    assert compare_json(5, "abc") is None
    assert compare_json(float("nan"), 1) is None
    assert gt(5, "abc") is False
    assert gte(float("nan"), 1) is False
    assert lte([1], [1]) is False


def test_compare_json_orderings():
    assert compare_json(1, 2) == -1
    assert compare_json(2, 2.0) == 0
    assert compare_json("b", "a") == 1
    assert compare_json("10", 9) == 1


def test_lookup():
    v1 = [1, 2, 3]
    v2 = [9, 8, 7]
    assert "".join(str(lookup(v2, index)) for index, _ in enumerate(v1)) == "987"
    assert "".join(str(lookup(v2, 1)) for _ in v1) == "888"
    assert lookup({"a": "world"}, "a") == "world"
    assert lookup(None, 1) is None
    assert lookup(v1, 3) is None


def test_lookup_missing_params():
    with pytest.raises(RenderError) as first:
        lookup()
    assert first.value.kind is RenderErrorKind.PARAM_NOT_FOUND_FOR_INDEX
    assert first.value.details == ("lookup", 0)
    with pytest.raises(RenderError) as second:
        lookup([1, 2, 3])
    assert second.value.details == ("lookup", 1)


def test_lookup_index_types():
    assert lookup([1, 2], True) is None
    assert lookup([1, 2], 1.0) is None
    assert lookup({"a": 1}, 0) is None


def test_strict_lookup():
    assert lookup([], 1) is None
    assert lookup([None], 0) is None

    with pytest.raises(RenderError) as err:
        lookup([], 1, strict=True)
    assert err.value.kind is RenderErrorKind.MISSING_VARIABLE
    assert lookup([None], 0, strict=True) is None