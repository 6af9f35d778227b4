"""Path accessor over arbitrary Python values.

Usage:
    config = {"db": {"host": "localhost"}, "reload": lambda: "ok"}
    ref = reflect(config)

    ref.get("db.host")          # "localhost"
    ref.set("db.pool.size", 5)  # creates config["db"]["pool"]
    ref.owns("db.port")         # False
    ref.call("reload")          # "ok"
    ref.methods()               # ["reload"]
    ref.properties()            # ["db"]
    ref.type()                  # "Object"
"""

from __future__ import annotations

import copy
import logging
import warnings
from collections.abc import Iterable
from typing import Any

from objreflect.config import ReflectionSettings, get_settings
from objreflect.core import UNDEFINED, DefaultIntrospector, Introspector, TypeName, is_null

logger = logging.getLogger(__name__)


class Reflection:
    """Thin view over one target value.

    The target is held by reference: writes through the accessor mutate it in
    place, and several accessors over the same value see each other's writes.
    No operation raises for a null target (None or UNDEFINED) or an empty path;
    each degrades to UNDEFINED, False, [] or None instead.

    Args:
        target: Value to inspect. Defaults to UNDEFINED.
        settings: Path separator and visibility options. Defaults to the
            process-wide settings loaded from the environment.
        introspector: Strategy for discovering and writing members. Defaults
            to DefaultIntrospector.
    """

    __slots__ = ("_target", "_type", "_separator", "_introspector")

    def __init__(
        self,
        target: Any = UNDEFINED,
        settings: ReflectionSettings | None = None,
        introspector: Introspector | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._target = target
        self._separator = settings.path_separator
        self._introspector: Introspector = introspector or DefaultIntrospector(
            include_private=settings.include_private
        )
        self._type = self._introspector.kind_of(target)

    @property
    def target(self) -> Any:
        """The wrapped value."""
        return self._target

    def __repr__(self) -> str:
        return f"Reflection({self._target!r})"

    def _segments(self, path: Any) -> list[str] | None:
        if not path or not isinstance(path, str) or is_null(self._target):
            return None
        return path.split(self._separator)

    def _resolve(self, path: Any) -> Any:
        """Walk path left to right, stopping at the first segment not owned."""
        segments = self._segments(path)
        if segments is None:
            return UNDEFINED

        context = self._target
        for segment in segments:
            if not self._introspector.is_own(context, segment):
                return UNDEFINED
            context = self._introspector.read(context, segment)
        return context

    def _names(self, callables: bool) -> list[str]:
        if is_null(self._target):
            return []
        return [
            key
            for key in self._introspector.own_keys(self._target)
            if callable(self._introspector.read(self._target, key)) is callables
        ]

    def get(self, path: str) -> Any:
        """Get the member at path.

        Args:
            path: Dotted path, e.g. "db.host".

        Returns:
            The member, or UNDEFINED if any segment is not owned.
        """
        return self._resolve(path)

    def owns(self, path: str) -> bool:
        """Check if path resolves to a member.

        A member holding None is owned; a member holding UNDEFINED is not.
        """
        return self._resolve(path) is not UNDEFINED

    def set(self, path: str, value: Any) -> None:
        """Assign value at path, creating empty containers for missing segments.

        Writes that cannot land (a scalar in the way, a read-only container)
        leave the target unchanged and emit a RuntimeWarning.

        Args:
            path: Dotted path, e.g. "db.pool.size".
            value: Value to assign.
        """
        segments = self._segments(path)
        if segments is None:
            logger.debug("set(%r) ignored on %s target", path, self._type)
            return

        introspector = self._introspector
        context = self._target
        for segment in segments[:-1]:
            member = (
                introspector.read(context, segment)
                if introspector.is_own(context, segment)
                else UNDEFINED
            )
            if member is UNDEFINED:
                member = introspector.new_container()
                if not introspector.write(context, segment, member):
                    self._warn_unwritable(path, context, segment)
                    return
            context = member

        if not introspector.write(context, segments[-1], value):
            self._warn_unwritable(path, context, segments[-1])

    def _warn_unwritable(self, path: str, context: Any, segment: str) -> None:
        warnings.warn(
            f"set({path!r}) had no effect: cannot assign {segment!r} "
            f"on {type(context).__name__}",
            RuntimeWarning,
            stacklevel=3,
        )

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke the callable member at name with the given arguments.

        The member is invoked as stored on its direct owner: bound methods keep
        their receiver, plain functions kept in a mapping get none.

        Args:
            name: Dotted path to the callable, e.g. "handlers.on_save".
            *args: Positional arguments for the callable.
            **kwargs: Keyword arguments for the callable.

        Returns:
            The callable's return value, or UNDEFINED if name does not resolve
            to a callable member. Exceptions raised by the callable propagate.
        """
        member = self._resolve(name)
        if member is UNDEFINED or not callable(member):
            logger.debug("call(%r) skipped: no callable member", name)
            return UNDEFINED
        return member(*args, **kwargs)

    def clone(self) -> Any:
        """Shallow copy of the target.

        Top-level members are shared by reference, so reassigning one on the
        copy leaves the original alone while nested containers stay shared.
        Values the copy protocol refuses, or hands back unchanged while they
        hold own members (classes, functions with attributes), are copied into
        a new dict of their own members instead.

        Returns:
            The copy, or None for a null target.
        """
        if is_null(self._target):
            return None
        try:
            duplicate = copy.copy(self._target)
        except (TypeError, copy.Error):
            logger.debug("clone() copying members of uncopyable %r", self._target)
            return self._copy_members()
        if duplicate is self._target and self._introspector.own_keys(self._target):
            return self._copy_members()
        return duplicate

    def _copy_members(self) -> dict[str, Any]:
        return {
            key: self._introspector.read(self._target, key)
            for key in self._introspector.own_keys(self._target)
        }

    def methods(self) -> list[str]:
        """Names of own members whose value is callable, in enumeration order."""
        return self._names(callables=True)

    def properties(self) -> list[str]:
        """Names of own members whose value is not callable, in enumeration order."""
        return self._names(callables=False)

    def members(
        self,
        include: TypeName | str | Iterable[TypeName | str] = (),
        exclude: TypeName | str | Iterable[TypeName | str] = (),
    ) -> list[str]:
        """Names of own members filtered by the type name of their value.

        Args:
            include: Keep only members of these kinds. Empty keeps all. A
                single name such as "Number" is accepted.
            exclude: Drop members of these kinds. Applied before include.

        Returns:
            Matching names in enumeration order.
        """
        if is_null(self._target):
            return []
        included = frozenset((include,) if isinstance(include, str) else include)
        excluded = frozenset((exclude,) if isinstance(exclude, str) else exclude)

        names: list[str] = []
        for key in self._introspector.own_keys(self._target):
            kind = self._introspector.kind_of(self._introspector.read(self._target, key))
            if kind in excluded or (included and kind not in included):
                continue
            names.append(key)
        return names

    def type(self) -> str:
        """Canonical type name of the target, computed at construction."""
        return self._type


def reflect(
    target: Any = UNDEFINED,
    settings: ReflectionSettings | None = None,
    introspector: Introspector | None = None,
) -> Reflection:
    """Wrap target in a Reflection accessor."""
    return Reflection(target, settings=settings, introspector=introspector)
