"""BaseService: shared foundation for gridareas services.

Every service receives the resolved settings and a plugin manager. The
manager is created lazily so callers that never touch plugins pay nothing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from gridareas.plugins.manager import LOCAL_PLUGIN_DIR, PluginManager

if TYPE_CHECKING:
    from gridareas.config.settings import GridAreasSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GenerateService(BaseService):
            def build(self) -> ServiceResult:
                layouts = self._settings.layout_sources()
                ...
    """

    def __init__(
        self,
        settings: GridAreasSettings,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugins

    @property
    def plugins(self) -> PluginManager:
        """Plugin manager, discovering entry points and local plugins on first use."""
        if self._plugins is None:
            self._plugins = PluginManager()
        if not self._plugins.is_loaded:
            local_dir: Path = self._settings.project_root / LOCAL_PLUGIN_DIR
            self._plugins.discover_and_load(local_dir=local_dir)
        return self._plugins
