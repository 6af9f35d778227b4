"""Path accessor: read, write, call and enumerate members of any value."""

from objreflect.reflection.accessor import Reflection, reflect

__all__ = [
    "Reflection",
    "reflect",
]
