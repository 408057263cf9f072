"""
tests.conftest

Shared fixtures.

Responsibilities:
- Boot a test-mode kernel with the KBA plugin force-installed on a throwaway SQLite file.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest_asyncio

from kba_plugin.bootstrap import KernelBootstrapper
from kba_plugin.kernel import Kernel
from kba_plugin.settings import Settings


def make_settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'kba.db'}")


@pytest_asyncio.fixture
async def kernel(tmp_path: Path) -> AsyncIterator[Kernel]:
    kernel = (
        KernelBootstrapper()
        .add_calling_plugin()
        .add_active_plugins("FMJStudiosTestPlugin")
        .set_force_install_plugins(True)
        .with_settings(make_settings(tmp_path))
        .bootstrap()
    )
    await kernel.boot()
    try:
        yield kernel
    finally:
        await kernel.shutdown()
