"""Introspector protocol for swappable host models.

The introspector abstracts how members of a value are discovered and touched,
enabling:
- Python mappings, sequences and plain objects (default)
- Custom record types, proxies or foreign object models

Usage:
    introspector = DefaultIntrospector()
    ref = Reflection(target, introspector=introspector)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from objreflect.core.types import TypeName


@runtime_checkable
class Introspector(Protocol):
    """Capability interface used by Reflection to inspect and mutate values."""

    def own_keys(self, value: Any) -> list[str]:
        """Direct member names of value, in enumeration order."""
        ...

    def is_own(self, value: Any, key: str) -> bool:
        """Check if key is a direct member of value."""
        ...

    def kind_of(self, value: Any) -> TypeName:
        """Canonical type name of value's runtime kind."""
        ...

    def read(self, value: Any, key: str) -> Any:
        """Read a direct member. Only called when is_own(value, key) is True."""
        ...

    def write(self, value: Any, key: str, member: Any) -> bool:
        """Assign a direct member. Returns False if value cannot hold it."""
        ...

    def new_container(self) -> Any:
        """Create the empty composite used to fill missing path segments."""
        ...
