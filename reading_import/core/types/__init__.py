# reading_import/core/types/__init__.py

"""Type definitions: JSON aliases, collaborator protocols and result types"""

# Local imports
from reading_import.core.types.json import JSONDict
from reading_import.core.types.json import JSONList
from reading_import.core.types.json import JSONPrimitive
from reading_import.core.types.json import JSONType
from reading_import.core.types.protocols import CatalogReader
from reading_import.core.types.protocols import Clock
from reading_import.core.types.protocols import SessionStore
from reading_import.core.types.protocols import WallClock
from reading_import.core.types.results import SideEffectResult

__all__ = [
    "CatalogReader",
    "Clock",
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "SessionStore",
    "SideEffectResult",
    "WallClock",
]
