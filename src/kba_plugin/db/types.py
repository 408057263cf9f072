"""
kba_plugin.db.types

Column types shared by ORM models and migration steps.

Responsibilities:
- Store UUIDs as 16 raw bytes (`BINARY(16)`).
- Provide a millisecond-precision timestamp type (`DATETIME(3)` on MySQL).
"""

from __future__ import annotations

import uuid

from sqlalchemy import BINARY, DateTime
from sqlalchemy.dialects import mysql
from sqlalchemy.types import TypeDecorator


class BinaryUUID(TypeDecorator[uuid.UUID]):
    impl = BINARY(16)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return value.bytes

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))


def timestamp_type():
    return DateTime().with_variant(mysql.DATETIME(fsp=3), "mysql")


# --- Module Notes -----------------------------------------------------------
# Migration steps declare `BINARY(16)` directly; only the ORM needs UUID conversion.
