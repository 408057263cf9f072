"""
kba_plugin.entity.collection

Typed entity containers.

Responsibilities:
- Keep entities keyed by id in insertion order.
- Reject elements that are not instances of the collection's expected class.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, ClassVar, Generic, TypeVar

from kba_plugin.errors import EntityTypeMismatchError

T = TypeVar("T")


class EntityCollection(Generic[T]):
    """
    Ordered container of entities of one class, keyed by their `id`.
    """

    expected_class: ClassVar[type]

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._elements: dict[Any, T] = {}
        for element in elements:
            self.add(element)

    def _validate(self, element: object) -> None:
        if not isinstance(element, self.expected_class):
            raise EntityTypeMismatchError(
                collection=type(self).__name__,
                expected=self.expected_class.__name__,
                actual=type(element).__name__,
            )

    def add(self, entity: T) -> None:
        self._validate(entity)
        key = getattr(entity, "id")
        if key is None:
            raise ValueError(f"{type(self).__name__}.add requires an entity with an id")
        self._elements[key] = entity

    def set(self, key: Any, entity: T) -> None:
        self._validate(entity)
        self._elements[key] = entity

    def get(self, key: Any) -> T | None:
        return self._elements.get(key)

    def has(self, key: Any) -> bool:
        return key in self._elements

    def remove(self, key: Any) -> None:
        self._elements.pop(key, None)

    def first(self) -> T | None:
        return next(iter(self._elements.values()), None)

    def last(self) -> T | None:
        return next(reversed(self._elements.values()), None)

    def keys(self) -> list[Any]:
        return list(self._elements)

    def ids(self) -> list[Any]:
        return [getattr(e, "id") for e in self._elements.values()]

    def elements(self) -> dict[Any, T]:
        return dict(self._elements)

    def filter(self, predicate) -> EntityCollection[T]:
        return type(self)(e for e in self._elements.values() if predicate(e))

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, key: object) -> bool:
        return key in self._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements.values())!r})"
