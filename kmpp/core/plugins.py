# SPDX-License-Identifier: MIT
"""Plugin protocol and the per-project plugin manager."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)


@runtime_checkable
class Plugin(Protocol):
    """Protocol for plugins.

    A plugin is applied once to a project and configures it.
    """

    @property
    def id(self) -> str:
        """Plugin id (e.g. 'maven-publish')."""
        ...

    def apply(self, project: Project) -> None:
        """Configure the project."""
        ...


class MarkerPlugin:
    """A plugin known only by its id.

    Used for plugins implemented outside kmpp (e.g. the Android plugins)
    whose presence alone changes what kmpp configures.
    """

    def __init__(self, plugin_id: str) -> None:
        self._id = plugin_id

    @property
    def id(self) -> str:
        return self._id

    def apply(self, project: Project) -> None:
        pass

    def __repr__(self) -> str:
        return f"MarkerPlugin({self._id!r})"


def _builtin_plugins() -> dict[str, Callable[[], Plugin]]:
    from kmpp.publish.publishing import MavenPublishPlugin

    return {MavenPublishPlugin.ID: MavenPublishPlugin}


class PluginManager:
    """Applies plugins to a project and reports their presence.

    Applying a plugin id twice is a no-op. ``with_plugin`` is live: the
    action runs now if the plugin is applied, or when it gets applied.
    """

    def __init__(self, project: Project) -> None:
        self._project = project
        self._applied: dict[str, Plugin] = {}
        self._pending: dict[str, list[Callable[[Plugin], None]]] = {}

    def apply(self, plugin: Plugin | str) -> Plugin:
        """Apply a plugin given as an instance or an id.

        Ids of built-in plugins create the plugin; other ids are recorded
        as marker plugins.

        Returns:
            The applied plugin (the existing one if already applied).
        """
        if isinstance(plugin, str):
            existing = self._applied.get(plugin)
            if existing is not None:
                return existing
            factory = _builtin_plugins().get(plugin)
            plugin = factory() if factory is not None else MarkerPlugin(plugin)

        existing = self._applied.get(plugin.id)
        if existing is not None:
            return existing

        logger.debug("Applying plugin '%s' to project '%s'", plugin.id, self._project.name)
        self._applied[plugin.id] = plugin
        plugin.apply(self._project)
        for action in self._pending.pop(plugin.id, []):
            action(plugin)
        return plugin

    def has_plugin(self, plugin_id: str) -> bool:
        return plugin_id in self._applied

    def find_plugin(self, plugin_id: str) -> Plugin | None:
        return self._applied.get(plugin_id)

    def with_plugin(self, plugin_id: str, action: Callable[[Plugin], None]) -> None:
        """Run action once the plugin with the given id is applied."""
        plugin = self._applied.get(plugin_id)
        if plugin is not None:
            action(plugin)
        else:
            self._pending.setdefault(plugin_id, []).append(action)

    @property
    def ids(self) -> list[str]:
        """Ids of applied plugins, in application order."""
        return list(self._applied)
