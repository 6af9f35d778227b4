"""objreflect: Path-based introspection for arbitrary Python values.

Usage:
    from objreflect import reflect, UNDEFINED

    settings = {"db": {"host": "localhost"}}
    ref = reflect(settings)

    ref.get("db.host")           # "localhost"
    ref.get("db.port")           # UNDEFINED
    ref.set("cache.ttl", 60)     # settings["cache"] == {"ttl": 60}
    ref.type()                   # "Object"
"""

import logging

__version__ = "0.1.0"

# Config
from objreflect.config import ReflectionSettings

# Core primitives
from objreflect.core import (
    UNDEFINED,
    DefaultIntrospector,
    Introspector,
    TypeName,
    is_null,
)

# Accessor
from objreflect.reflection import Reflection, reflect

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "UNDEFINED",
    "TypeName",
    "is_null",
    "Introspector",
    "DefaultIntrospector",
    # Accessor
    "Reflection",
    "reflect",
    # Config
    "ReflectionSettings",
]
