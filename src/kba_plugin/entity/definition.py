"""
kba_plugin.entity.definition

Entity definitions and the registry that wires them at boot.

Responsibilities:
- Define the `EntityDefinition` capability: name, entity class, collection class,
  and a static field description.
- Validate definitions against their ORM tables and register them by entity name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from kba_plugin.entity.fields import FieldCollection, FieldFlag, date_time_field
from kba_plugin.errors import InvalidDefinitionError
from kba_plugin.observability.logging import get_logger

if TYPE_CHECKING:
    from kba_plugin.entity.collection import EntityCollection

log = get_logger(__name__)


class EntityDefinition(ABC):
    """
    Declares the shape of one record kind.

    Subclasses implement `define_fields()`; callers use `describe_fields()`, which
    appends the default `created_at`/`updated_at` fields and is computed once.
    """

    ENTITY_NAME: ClassVar[str]

    def __init__(self) -> None:
        self._fields: FieldCollection | None = None

    @property
    def entity_name(self) -> str:
        return self.ENTITY_NAME

    @property
    @abstractmethod
    def entity_class(self) -> type: ...

    @property
    @abstractmethod
    def collection_class(self) -> type[EntityCollection]: ...

    @abstractmethod
    def define_fields(self) -> FieldCollection: ...

    def default_fields(self) -> FieldCollection:
        return FieldCollection(
            [
                date_time_field("created_at", "created_at").with_flags(FieldFlag.required),
                date_time_field("updated_at", "updated_at"),
            ]
        )

    def describe_fields(self) -> FieldCollection:
        if self._fields is None:
            self._fields = self.define_fields().merge(self.default_fields())
        return self._fields

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entity_name={self.entity_name!r})"


class DefinitionRegistry:
    def __init__(self) -> None:
        self._definitions: dict[str, EntityDefinition] = {}

    def register(self, definition: EntityDefinition) -> None:
        name = definition.entity_name
        if name in self._definitions:
            raise InvalidDefinitionError(f"entity already registered: {name}")

        fields = definition.describe_fields()
        if not fields.primary_keys():
            raise InvalidDefinitionError(f"{name}: no primary key field")

        # Every declared field must map onto a real column of the entity's table.
        table = getattr(definition.entity_class, "__table__", None)
        if table is not None:
            missing = [s for s in fields.storage_names() if s not in table.columns]
            if missing:
                raise InvalidDefinitionError(f"{name}: unknown columns {missing}")

        self._definitions[name] = definition
        log.info("definition.registered", entity=name, fields=len(fields))

    def get(self, entity_name: str) -> EntityDefinition:
        try:
            return self._definitions[entity_name]
        except KeyError:
            raise InvalidDefinitionError(f"entity not registered: {entity_name}") from None

    def get_by_entity_class(self, entity_class: type) -> EntityDefinition | None:
        for definition in self._definitions.values():
            if definition.entity_class is entity_class:
                return definition
        return None

    def entity_names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, entity_name: object) -> bool:
        return entity_name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


# --- Module Notes -----------------------------------------------------------
# Registration is the only validation point: malformed declarations fail kernel
# boot instead of surfacing later as query errors.
