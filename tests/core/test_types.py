"""Tests for the UNDEFINED sentinel and type names."""

import copy
import pickle

from objreflect import UNDEFINED, TypeName, is_null
from objreflect.core.types import _Undefined


def test_undefined_is_singleton():
    """Only one UNDEFINED exists, even through copies and pickling.

    Why: Lookups compare against UNDEFINED by identity.
    """
    assert _Undefined() is UNDEFINED
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy({"k": UNDEFINED})["k"] is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_undefined_is_falsy_and_not_none():
    assert not UNDEFINED
    assert UNDEFINED is not None
    assert repr(UNDEFINED) == "UNDEFINED"


def test_is_null_covers_none_and_undefined():
    assert is_null(None)
    assert is_null(UNDEFINED)
    assert not is_null(0)
    assert not is_null("")
    assert not is_null({})


def test_type_names_compare_as_strings():
    """Type names are plain strings to callers."""
    assert TypeName.ARRAY == "Array"
    assert TypeName.UNDEFINED == "Undefined"
    assert "RegExp" in {TypeName.REGEXP}
