"""Default introspector for Python values.

Own members by value kind:
- Mappings: string keys, in insertion order
- Lists and tuples: decimal index strings ("0", "1", ...)
- Objects: instance state from ``vars()`` or filled ``__slots__``, minus dunders
- Everything else (str, numbers, dates, ...): none

Class attributes are inherited, so methods defined on a class are not own
members of its instances.
"""

from __future__ import annotations

import datetime
import functools
import inspect
import numbers
import re
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from objreflect.core.types import UNDEFINED, TypeName, is_null

# Checked in order; bool before Number since bool subclasses int
_KIND_TABLE: tuple[tuple[type | tuple[type, ...], TypeName], ...] = (
    (bool, TypeName.BOOLEAN),
    (numbers.Number, TypeName.NUMBER),
    (str, TypeName.STRING),
    ((bytes, bytearray, memoryview), TypeName.BYTES),
    ((list, tuple), TypeName.ARRAY),
    ((datetime.date, datetime.time), TypeName.DATE),
    (re.Pattern, TypeName.REGEXP),
    ((set, frozenset), TypeName.SET),
    (BaseException, TypeName.ERROR),
    (functools.partial, TypeName.FUNCTION),
)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _slot_names(cls: type) -> Iterator[str]:
    """Yield slot names declared anywhere in the class hierarchy."""
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__"):
                yield name


def _instance_state(value: Any) -> Mapping[str, Any] | None:
    try:
        return vars(value)
    except TypeError:
        return None


def _index(sequence: list[Any] | tuple[Any, ...], key: str) -> int | None:
    """Parse key as a canonical index into sequence ("01" and "-1" are not)."""
    if not (key.isascii() and key.isdigit()) or (key[0] == "0" and len(key) > 1):
        return None
    if len(key) > len(str(len(sequence))):
        return None
    position = int(key)
    return position if position < len(sequence) else None


class DefaultIntrospector:
    """Introspector for mappings, sequences and plain Python objects.

    Args:
        include_private: When False, names starting with "_" are hidden from
            enumeration, ownership checks and writes.
    """

    __slots__ = ("_include_private",)

    def __init__(self, include_private: bool = True) -> None:
        self._include_private = include_private

    def _visible(self, key: str) -> bool:
        return self._include_private or not key.startswith("_")

    def own_keys(self, value: Any) -> list[str]:
        if is_null(value):
            return []
        if isinstance(value, Mapping):
            keys = [key for key in value if isinstance(key, str)]
        elif isinstance(value, (list, tuple)):
            keys = [str(position) for position in range(len(value))]
        elif isinstance(value, (str, bytes, bytearray)):
            return []
        else:
            state = _instance_state(value)
            if state is not None:
                keys = [key for key in state if isinstance(key, str)]
            else:
                keys = [name for name in _slot_names(type(value)) if hasattr(value, name)]
            keys = [key for key in keys if not _is_dunder(key)]
        return [key for key in keys if self._visible(key)]

    def is_own(self, value: Any, key: str) -> bool:
        if is_null(value) or not isinstance(key, str) or not self._visible(key):
            return False
        if isinstance(value, Mapping):
            return key in value
        if isinstance(value, (list, tuple)):
            return _index(value, key) is not None
        if isinstance(value, (str, bytes, bytearray)) or _is_dunder(key):
            return False
        state = _instance_state(value)
        if state is not None:
            return key in state
        return key in set(_slot_names(type(value))) and hasattr(value, key)

    def kind_of(self, value: Any) -> TypeName:
        if value is UNDEFINED:
            return TypeName.UNDEFINED
        if value is None:
            return TypeName.NULL
        for kinds, name in _KIND_TABLE:
            if isinstance(value, kinds):
                return name
        if inspect.isroutine(value) or inspect.isclass(value):
            return TypeName.FUNCTION
        return TypeName.OBJECT

    def read(self, value: Any, key: str) -> Any:
        if isinstance(value, Mapping):
            return value[key]
        if isinstance(value, (list, tuple)):
            return value[int(key)]
        # Instance state wins over class descriptors of the same name
        if not inspect.isclass(value):
            state = _instance_state(value)
            if state is not None and key in state:
                return state[key]
        return getattr(value, key)

    def write(self, value: Any, key: str, member: Any) -> bool:
        if is_null(value) or not self._visible(key):
            return False
        if isinstance(value, MutableMapping):
            value[key] = member
            return True
        if isinstance(value, list):
            position = _index(value, key)
            if position is not None:
                value[position] = member
                return True
            if key == str(len(value)):
                value.append(member)
                return True
            return False
        if isinstance(value, (Mapping, tuple, str, bytes, bytearray)) or _is_dunder(key):
            return False
        try:
            setattr(value, key, member)
        except (AttributeError, TypeError):
            return False
        return True

    def new_container(self) -> dict[str, Any]:
        return {}
