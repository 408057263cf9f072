"""
kba_plugin.db.models

Persistence schema for the plugin.

Responsibilities:
- Define the `KBAData` ORM model backing the `k_b_a_data` table.
- Keep `id` immutable once assigned and stamp `created_at`/`updated_at`.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from kba_plugin.db.base import Base
from kba_plugin.db.types import BinaryUUID, timestamp_type
from kba_plugin.errors import ImmutableFieldError


def _utcnow() -> datetime:
    # Naive UTC; DATETIME(3) columns carry no zone.
    return datetime.now(UTC).replace(tzinfo=None)


class KBAData(Base):
    __tablename__ = "k_b_a_data"

    id: Mapped[uuid.UUID] = mapped_column(BinaryUUID(), primary_key=True, default=uuid.uuid4)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    created_at: Mapped[datetime] = mapped_column(timestamp_type(), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime | None] = mapped_column(
        timestamp_type(), nullable=True, onupdate=_utcnow
    )

    __table_args__ = {
        "mysql_engine": "InnoDB",
        "mysql_charset": "utf8mb4",
        "mysql_collate": "utf8mb4_unicode_ci",
    }

    def __init__(self, **kwargs: Any) -> None:
        # Unsaved records need an identity too (collections key by id).
        if kwargs.get("id") is None:
            kwargs["id"] = uuid.uuid4()
        super().__init__(**kwargs)

    @validates("id")
    def _validate_id(self, key: str, value: uuid.UUID) -> uuid.UUID:
        current = self.__dict__.get("id")
        if current is not None and current != value:
            raise ImmutableFieldError(entity=type(self).__name__, field=key)
        return value

    def __repr__(self) -> str:
        return f"KBAData(id={self.id!s}, name={self.name!r}, active={self.active!r})"


# --- Module Notes -----------------------------------------------------------
# The table itself is created by `Migration1722080412CreateKBADataTable`; keep the
# column set here and in the migration step identical.
