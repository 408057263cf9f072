"""
kba_plugin.kernel

Composition root for a running plugin environment.

Responsibilities:
- Configure logging and create the DB engine/session factory.
- Register entity definitions of active plugins.
- Install plugin schemas (migration steps) when forced or outside prod.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from kba_plugin.db.init_db import install_schema
from kba_plugin.db.session import create_engine, create_sessionmaker
from kba_plugin.entity.definition import DefinitionRegistry
from kba_plugin.observability.logging import configure_logging, get_logger
from kba_plugin.plugin import Plugin
from kba_plugin.settings import Settings

log = get_logger(__name__)


class Kernel:
    def __init__(
        self,
        *,
        settings: Settings,
        plugins: Sequence[Plugin] = (),
        force_install_plugins: bool = False,
    ) -> None:
        self.settings = settings
        self.plugins = list(plugins)
        self.force_install_plugins = force_install_plugins
        self.registry = DefinitionRegistry()
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    @property
    def environment(self) -> str:
        return self.settings.env

    @property
    def booted(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("kernel is not booted")
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        if self._sessionmaker is None:
            raise RuntimeError("kernel is not booted")
        return self._sessionmaker

    async def boot(self) -> None:
        if self.booted:
            return
        configure_logging(service_name=self.settings.service_name, level=self.settings.log_level)
        log.info("kernel.boot", env=self.environment, plugins=[p.name for p in self.plugins])

        registry = DefinitionRegistry()
        for plugin in self.plugins:
            for definition in plugin.definitions():
                registry.register(definition)

        engine = create_engine(self.settings)
        try:
            if self.force_install_plugins or self.environment in ("dev", "test"):
                for plugin in self.plugins:
                    applied = await install_schema(engine, plugin.migrations())
                    log.info("plugin.installed", plugin=plugin.name, migrations=applied)
        except Exception:
            await engine.dispose()
            raise

        # Kernel state is published only after installation succeeded.
        self.registry = registry
        self._engine = engine
        self._sessionmaker = create_sessionmaker(engine)

    async def shutdown(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        self.registry = DefinitionRegistry()
        log.info("kernel.shutdown")


# --- Module Notes -----------------------------------------------------------
# Prod deployments run migrations via Alembic before boot; the kernel only
# registers definitions there unless `force_install_plugins` is set.
