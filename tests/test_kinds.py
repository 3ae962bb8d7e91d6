"""
Tests for classifying Python values into JSON kinds
"""
from decimal import Decimal

import pytest

from jsonhighlight.kinds import JsonKind, classify_value, is_container


@pytest.mark.parametrize(
    "value, kind",
    [
        ({"a": 1}, JsonKind.OBJECT),
        ({}, JsonKind.OBJECT),
        ([1, 2], JsonKind.ARRAY),
        ((1, 2), JsonKind.ARRAY),
        ("text", JsonKind.STRING),
        ("", JsonKind.STRING),
        (0, JsonKind.NUMBER),
        (-1.5, JsonKind.NUMBER),
        (Decimal("1.10"), JsonKind.NUMBER),
        (True, JsonKind.BOOLEAN),
        (False, JsonKind.BOOLEAN),
        (None, JsonKind.NULL),
        ({1, 2}, JsonKind.UNKNOWN),
        (object(), JsonKind.UNKNOWN),
        (b"bytes", JsonKind.UNKNOWN),
    ],
)
def test_classify_value(value, kind):
    assert classify_value(value) is kind


def test_bool_is_never_a_number():
    assert classify_value(True) is not JsonKind.NUMBER


def test_kind_values_are_marker_names():
    assert [kind.value for kind in JsonKind] == [
        "object", "array", "string", "number", "boolean", "null", "unknown",
    ]


def test_is_container():
    assert is_container(JsonKind.OBJECT)
    assert is_container(JsonKind.ARRAY)
    assert not is_container(JsonKind.STRING)
    assert not is_container(JsonKind.UNKNOWN)
