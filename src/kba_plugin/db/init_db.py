"""
kba_plugin.db.init_db

Schema installation on an async engine.

Responsibilities:
- Run plugin migration steps inside one transactional DDL block.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncEngine

from kba_plugin.migrations import MigrationStep, run_migrations


async def install_schema(
    engine: AsyncEngine,
    steps: Iterable[MigrationStep],
    *,
    destructive: bool = False,
) -> list[int]:
    steps = list(steps)
    async with engine.begin() as conn:
        return await conn.run_sync(run_migrations, steps, destructive=destructive)


# --- Module Notes -----------------------------------------------------------
# Deployments that use Alembic run the same steps through `alembic/versions`.
