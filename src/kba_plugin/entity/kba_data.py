"""
kba_plugin.entity.kba_data

KBAData entity declaration.

Responsibilities:
- Declare the `k_b_a_data` fields (id, name, description, active).
- Bind the definition to the `KBAData` ORM model and `KBADataCollection`.
"""

from __future__ import annotations

from kba_plugin.db.models import KBAData
from kba_plugin.entity.collection import EntityCollection
from kba_plugin.entity.definition import EntityDefinition
from kba_plugin.entity.fields import (
    FieldCollection,
    FieldFlag,
    bool_field,
    id_field,
    string_field,
)


class KBADataCollection(EntityCollection[KBAData]):
    expected_class = KBAData

    def active(self) -> KBADataCollection:
        return self.filter(lambda e: e.active is True)


class KBADataDefinition(EntityDefinition):
    ENTITY_NAME = "k_b_a_data"

    @property
    def entity_class(self) -> type[KBAData]:
        return KBAData

    @property
    def collection_class(self) -> type[KBADataCollection]:
        return KBADataCollection

    def define_fields(self) -> FieldCollection:
        return FieldCollection(
            [
                id_field("id", "id").with_flags(FieldFlag.required, FieldFlag.primary_key),
                string_field("name", "name"),
                string_field("description", "description"),
                bool_field("active", "active"),
            ]
        )
