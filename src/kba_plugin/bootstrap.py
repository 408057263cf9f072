"""
kba_plugin.bootstrap

Builder for test-mode kernels.

Responsibilities:
- Collect the plugins a test run needs (the calling plugin plus named ones).
- Produce an un-booted `Kernel` in the `test` environment.
"""

from __future__ import annotations

from kba_plugin.kernel import Kernel
from kba_plugin.plugin import KBADataPlugin, Plugin, PluginLoader, default_loader
from kba_plugin.settings import Settings


class KernelBootstrapper:
    """
    Fluent builder mirroring how a plugin's test suite boots its host:

        kernel = (
            KernelBootstrapper()
            .add_calling_plugin()
            .add_active_plugins("FMJStudiosTestPlugin")
            .set_force_install_plugins(True)
            .bootstrap()
        )
        await kernel.boot()
    """

    def __init__(self, *, loader: PluginLoader | None = None) -> None:
        self._loader = loader if loader is not None else default_loader()
        self._plugins: dict[str, Plugin] = {}
        self._force_install = False
        self._settings: Settings | None = None

    def add_calling_plugin(self) -> KernelBootstrapper:
        plugin = KBADataPlugin()
        self._plugins.setdefault(plugin.name, plugin)
        return self

    def add_active_plugins(self, *names: str) -> KernelBootstrapper:
        for name in names:
            self._plugins.setdefault(name, self._loader.get(name))
        return self

    def set_force_install_plugins(self, force: bool) -> KernelBootstrapper:
        self._force_install = force
        return self

    def with_settings(self, settings: Settings) -> KernelBootstrapper:
        self._settings = settings
        return self

    def bootstrap(self) -> Kernel:
        settings = self._settings if self._settings is not None else Settings(env="test")
        if settings.env != "test":
            settings = settings.model_copy(update={"env": "test"})
        return Kernel(
            settings=settings,
            plugins=list(self._plugins.values()),
            force_install_plugins=self._force_install,
        )
