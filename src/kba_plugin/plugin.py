"""
kba_plugin.plugin

Plugin declaration and lookup.

Responsibilities:
- Define what a plugin contributes (entity definitions, migration steps).
- Declare the KBA data plugin and resolve plugins by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from kba_plugin.entity.definition import EntityDefinition
from kba_plugin.entity.kba_data import KBADataDefinition
from kba_plugin.errors import PluginNotFoundError
from kba_plugin.migrations import ALL_MIGRATIONS, MigrationStep


class Plugin(ABC):
    name: str

    @abstractmethod
    def definitions(self) -> list[EntityDefinition]: ...

    @abstractmethod
    def migrations(self) -> list[MigrationStep]: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class KBADataPlugin(Plugin):
    name = "FMJStudiosTestPlugin"

    def definitions(self) -> list[EntityDefinition]:
        return [KBADataDefinition()]

    def migrations(self) -> list[MigrationStep]:
        return [step() for step in ALL_MIGRATIONS]


class PluginLoader:
    def __init__(self, plugins: Iterable[Plugin] = ()) -> None:
        self._plugins: dict[str, Plugin] = {p.name: p for p in plugins}

    def get(self, name: str) -> Plugin:
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._plugins)


def default_loader() -> PluginLoader:
    return PluginLoader([KBADataPlugin()])
