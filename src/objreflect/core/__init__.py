"""Core functionalities: the absent sentinel, type names and introspection.

Architecture Note:
    core/ contains stateless building blocks with no knowledge of paths.
    For the path accessor built on top of them, see reflection/.
"""

from objreflect.core.introspection import DefaultIntrospector
from objreflect.core.protocol import Introspector
from objreflect.core.types import UNDEFINED, TypeName, is_null

__all__ = [
    "UNDEFINED",
    "TypeName",
    "is_null",
    "Introspector",
    "DefaultIntrospector",
]
