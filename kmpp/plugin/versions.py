# SPDX-License-Identifier: MIT
"""Default versions for Kotlin library dependencies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kmpp.core.configuration import Configuration, DependencyResolveDetails
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)

KOTLIN_MODULE_GROUP = "org.jetbrains.kotlin"


def configure_default_versions_resolution_strategy(project: Project, plugin_version: str) -> None:
    """Resolve versionless ``org.jetbrains.kotlin`` dependencies to the plugin version.

    Applies to every configuration of the project, including ones created
    later.
    """

    def _default_version(details: DependencyResolveDetails) -> None:
        requested = details.requested
        if requested.group == KOTLIN_MODULE_GROUP and not requested.version:
            logger.debug("Using version %s for %s", plugin_version, requested)
            details.use_version(plugin_version)

    def _configure(configuration: Configuration) -> None:
        configuration.resolution_strategy.each_dependency(_default_version)

    project.configurations.all(_configure)
