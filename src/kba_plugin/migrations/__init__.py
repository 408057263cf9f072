"""
kba_plugin.migrations

Schema migration steps shipped with the plugin.

Responsibilities:
- Expose every migration step the plugin installs, oldest first.
"""

from kba_plugin.migrations.base import MigrationStep, run_migrations
from kba_plugin.migrations.m1722080412_create_kba_data_table import (
    Migration1722080412CreateKBADataTable,
)

__all__ = [
    "ALL_MIGRATIONS",
    "Migration1722080412CreateKBADataTable",
    "MigrationStep",
    "run_migrations",
]

ALL_MIGRATIONS: tuple[type[MigrationStep], ...] = (Migration1722080412CreateKBADataTable,)
