"""
kba_plugin.errors

Domain-specific exceptions.

Responsibilities:
- Signal programming errors in entity declarations, collections and plugin wiring.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class EntityTypeMismatchError(TypeError):
    """
    Raised when a collection receives an element of the wrong class.
    """

    collection: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.collection} expects {self.expected}, got {self.actual}"


@dataclass(eq=False)
class ImmutableFieldError(AttributeError):
    entity: str
    field: str

    def __str__(self) -> str:
        return f"{self.entity}.{self.field} cannot be changed once set"


class InvalidDefinitionError(ValueError):
    """
    Raised at boot when an entity definition is malformed or registered twice.
    """


class PluginNotFoundError(LookupError):
    pass


# --- Module Notes -----------------------------------------------------------
# SQL errors are never wrapped here; they propagate from SQLAlchemy unchanged.
