"""Core type definitions for objreflect."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Final, final


@final
class _Undefined:
    """Marker for "no value here".

    Distinct from ``None``: a member holding ``None`` exists, a member holding
    ``UNDEFINED`` is treated as never set.
    """

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self


UNDEFINED: Final = _Undefined()
"""The absent value returned by lookups that find nothing."""


def is_null(value: Any) -> bool:
    """Check whether a value is a null target (``None`` or ``UNDEFINED``)."""
    return value is None or value is UNDEFINED


class TypeName(StrEnum):
    """Canonical type names reported by ``Reflection.type()``."""

    ARRAY = "Array"
    BOOLEAN = "Boolean"
    BYTES = "Bytes"
    DATE = "Date"
    ERROR = "Error"
    FUNCTION = "Function"
    NULL = "Null"
    NUMBER = "Number"
    OBJECT = "Object"
    REGEXP = "RegExp"
    SET = "Set"
    STRING = "String"
    UNDEFINED = "Undefined"
