"""
kba_plugin.migrations.base

Migration step capability and runner.

Responsibilities:
- Define the `MigrationStep` interface (timestamp, update, destructive update).
- Apply a set of steps in creation-timestamp order on a sync connection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sqlalchemy.engine import Connection

from kba_plugin.observability.logging import get_logger

log = get_logger(__name__)


class MigrationStep(ABC):
    @property
    @abstractmethod
    def creation_timestamp(self) -> int: ...

    @abstractmethod
    def update(self, connection: Connection) -> None:
        """
        Non-destructive schema change. Must be safe to run more than once.
        """

    @abstractmethod
    def update_destructive(self, connection: Connection) -> None:
        """
        Destructive counterpart (drops, data removal). May be a no-op.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.creation_timestamp})"


def run_migrations(
    connection: Connection,
    steps: Iterable[MigrationStep],
    *,
    destructive: bool = False,
) -> list[int]:
    """
    Apply `steps` oldest first and return the applied timestamps.

    SQL errors propagate unchanged; the caller owns the transaction and decides
    whether to roll back.
    """

    applied: list[int] = []
    for step in sorted(steps, key=lambda s: s.creation_timestamp):
        step.update(connection)
        if destructive:
            step.update_destructive(connection)
        applied.append(step.creation_timestamp)
        log.info(
            "migration.applied",
            step=type(step).__name__,
            timestamp=step.creation_timestamp,
            destructive=destructive,
        )
    return applied


# --- Module Notes -----------------------------------------------------------
# Async callers run this through `AsyncConnection.run_sync` (see `db.init_db`).
