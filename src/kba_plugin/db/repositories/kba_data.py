from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from kba_plugin.db.models import KBAData
from kba_plugin.entity.kba_data import KBADataCollection

_UNSET = object()


class KBADataRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        active: bool | None = None,
        id: uuid.UUID | None = None,
    ) -> KBAData:
        record = KBAData(id=id, name=name, description=description, active=active)
        self._session.add(record)
        await self._session.flush()
        return record

    async def get(self, record_id: uuid.UUID) -> KBAData | None:
        return await self._session.get(KBAData, record_id)

    async def list(self, *, active: bool | None = None) -> KBADataCollection:
        stmt = select(KBAData).order_by(KBAData.created_at, KBAData.id)
        if active is not None:
            stmt = stmt.where(KBAData.active.is_(active))
        return KBADataCollection((await self._session.execute(stmt)).scalars().all())

    async def update(
        self,
        record_id: uuid.UUID,
        *,
        name: str | None | object = _UNSET,
        description: str | None | object = _UNSET,
        active: bool | None | object = _UNSET,
    ) -> KBAData | None:
        record = await self._session.get(KBAData, record_id)
        if record is None:
            return None
        if name is not _UNSET:
            record.name = name
        if description is not _UNSET:
            record.description = description
        if active is not _UNSET:
            record.active = active
        await self._session.flush()
        return record

    async def delete(self, record_id: uuid.UUID) -> bool:
        record = await self._session.get(KBAData, record_id)
        if record is None:
            return False
        await self._session.delete(record)
        await self._session.flush()
        return True
