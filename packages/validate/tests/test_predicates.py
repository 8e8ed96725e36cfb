"""Tests for the basic JSON type predicates and sentinels."""

import copy
from collections import OrderedDict

from jsonknobs_validate import (
    MAX_SAFE_INTEGER,
    UNDEFINED,
    array,
    boolean,
    integer,
    is_object,
    is_plain_object,
    number,
    plain_array,
    string,
)


class TestScalars:
    """Test scalar predicates."""

    def test_boolean(self):
        assert boolean(True) and boolean(False)
        assert not boolean(1)
        assert not boolean(None)

    def test_number(self):
        assert number(0)
        assert number(-1.5)
        assert number(10**300)
        assert not number(10**400)
        assert not number(-(10**400))
        assert not number(float("nan"))
        assert not number(float("inf"))
        assert not number(float("-inf"))
        assert not number(True)
        assert not number("1")

    def test_integer(self):
        assert integer(123)
        assert integer(3.0)
        assert integer(MAX_SAFE_INTEGER)
        assert integer(-MAX_SAFE_INTEGER)
        assert not integer(MAX_SAFE_INTEGER + 1)
        assert not integer(float(2**60))
        assert not integer(123.4)
        assert not integer(False)
        assert not integer(float("nan"))
        assert not integer(float("inf"))

    def test_string(self):
        assert string("")
        assert not string(b"")
        assert not string(None)


class TestContainers:
    """Test container predicates."""

    def test_array(self):
        assert array([])
        assert not array(())
        assert not array({})

    def test_plain_array(self):
        class Items(list):
            pass

        assert plain_array([1])
        assert array(Items())
        assert not plain_array(Items())

    def test_is_object(self):
        assert is_object({})
        assert is_object(OrderedDict())
        assert not is_object([])
        assert not is_object(None)

    def test_is_plain_object(self):
        assert is_plain_object({"a": 1})
        assert not is_plain_object(OrderedDict(a=1))
        assert not is_plain_object({1: "a"})
        assert not is_plain_object([])


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_falsy_and_distinct_from_none(self):
        assert not UNDEFINED
        assert UNDEFINED is not None
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_singleton(self):
        assert type(UNDEFINED)() is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
