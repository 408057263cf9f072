"""
kba_plugin.migrations.m1722080412_create_kba_data_table

Creates the `k_b_a_data` table.
"""

from __future__ import annotations

from sqlalchemy import BINARY, Boolean, Column, MetaData, String, Table
from sqlalchemy.engine import Connection
from sqlalchemy.schema import CreateTable

from kba_plugin.db.types import timestamp_type
from kba_plugin.migrations.base import MigrationStep

# Frozen copy of the schema as of this step; later model changes need a new step.
_metadata = MetaData()

k_b_a_data = Table(
    "k_b_a_data",
    _metadata,
    Column("id", BINARY(16), primary_key=True, nullable=False),
    Column("name", String(255), nullable=True),
    Column("description", String(255), nullable=True),
    Column("active", Boolean, nullable=True),
    Column("created_at", timestamp_type(), nullable=False),
    Column("updated_at", timestamp_type(), nullable=True),
    mysql_engine="InnoDB",
    mysql_charset="utf8mb4",
    mysql_collate="utf8mb4_unicode_ci",
)


class Migration1722080412CreateKBADataTable(MigrationStep):
    creation_timestamp = 1722080412

    def statement(self) -> CreateTable:
        return CreateTable(k_b_a_data, if_not_exists=True)

    def update(self, connection: Connection) -> None:
        connection.execute(self.statement())

    def update_destructive(self, connection: Connection) -> None:
        pass
