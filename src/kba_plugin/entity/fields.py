"""
kba_plugin.entity.fields

Field description API used by entity definitions.

Responsibilities:
- Describe a field's property name, storage column, semantic type and flags.
- Group fields into an immutable, ordered `FieldCollection`.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from kba_plugin.errors import InvalidDefinitionError


class FieldType(enum.StrEnum):
    id = "id"
    string = "string"
    bool = "bool"
    date_time = "date_time"


class FieldFlag(enum.StrEnum):
    required = "required"
    primary_key = "primary_key"


@dataclass(frozen=True, slots=True)
class Field:
    property_name: str
    storage_name: str
    type: FieldType
    flags: frozenset[FieldFlag] = frozenset()

    def with_flags(self, *flags: FieldFlag) -> Field:
        return replace(self, flags=self.flags | frozenset(flags))

    @property
    def is_required(self) -> bool:
        return FieldFlag.required in self.flags

    @property
    def is_primary_key(self) -> bool:
        return FieldFlag.primary_key in self.flags


def id_field(storage_name: str, property_name: str) -> Field:
    return Field(property_name=property_name, storage_name=storage_name, type=FieldType.id)


def string_field(storage_name: str, property_name: str) -> Field:
    return Field(property_name=property_name, storage_name=storage_name, type=FieldType.string)


def bool_field(storage_name: str, property_name: str) -> Field:
    return Field(property_name=property_name, storage_name=storage_name, type=FieldType.bool)


def date_time_field(storage_name: str, property_name: str) -> Field:
    return Field(property_name=property_name, storage_name=storage_name, type=FieldType.date_time)


class FieldCollection:
    """
    Ordered, read-only set of fields keyed by property name.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[Field] = ()) -> None:
        by_name: dict[str, Field] = {}
        for field in fields:
            if field.property_name in by_name:
                raise InvalidDefinitionError(f"duplicate field: {field.property_name}")
            by_name[field.property_name] = field
        self._fields = by_name

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, property_name: object) -> bool:
        return property_name in self._fields

    def get(self, property_name: str) -> Field | None:
        return self._fields.get(property_name)

    def primary_keys(self) -> list[Field]:
        return [f for f in self._fields.values() if f.is_primary_key]

    def storage_names(self) -> list[str]:
        return [f.storage_name for f in self._fields.values()]

    def merge(self, other: Iterable[Field]) -> FieldCollection:
        return FieldCollection([*self, *other])

    def __repr__(self) -> str:
        return f"FieldCollection({list(self._fields)})"
