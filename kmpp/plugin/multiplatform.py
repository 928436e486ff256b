# SPDX-License-Identifier: MIT
"""The multiplatform plugin.

Applying the plugin to a project:

1. registers the default target presets;
2. defaults the version of versionless Kotlin library dependencies;
3. creates ``commonMain``/``commonTest`` and wires platform source sets
   to them;
4. schedules attribute propagation for the evaluation barrier;
5. sets up publications (when maven-publish is applied) and sources jars;
6. creates the ``metadata`` target.

Example:
    project = Project("lib", group="com.acme", version="1.0")
    project.plugins.apply("maven-publish")
    kotlin = multiplatform(project)
    kotlin.targets.from_preset("jvm", "jvm")
    kotlin.targets.from_preset("js", "js", lambda t: setattr(t, "publishable", False))
    project.evaluate()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kmpp.core.errors import ConfigureError
from kmpp.model.target import METADATA_TARGET_NAME
from kmpp.plugin.attributes import set_up_configuration_attributes
from kmpp.plugin.extension import MultiplatformExtension
from kmpp.plugin.publishing import configure_publishing
from kmpp.plugin.source_sets import configure_source_sets
from kmpp.plugin.sources import configure_source_jars
from kmpp.plugin.versions import configure_default_versions_resolution_strategy
from kmpp.presets import (
    AndroidTargetPreset,
    JsTargetPreset,
    JvmTargetPreset,
    JvmWithJavaTargetPreset,
    MetadataTargetPreset,
    NativeTargetPreset,
)
from kmpp.presets.android import ANDROID_PLUGIN_IDS
from kmpp.util.host import HostManager
from kmpp.util.source_location import get_caller_location
from kmpp.util.warnings import warn_once

if TYPE_CHECKING:
    from kmpp.core.plugins import Plugin
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)

EXPERIMENTAL_WARNING = "Kotlin Multiplatform Projects are an experimental feature."


class MultiplatformPlugin:
    """Turns a project into a multiplatform project.

    Attributes:
        kotlin_plugin_version: Version used for versionless Kotlin
            library dependencies.
        host_manager: Source of the native targets to create presets for.
        extension: The project's extension, set by apply().
    """

    ID = "org.jetbrains.kotlin.multiplatform"

    def __init__(
        self,
        kotlin_plugin_version: str | None = None,
        host_manager: HostManager | None = None,
    ) -> None:
        if kotlin_plugin_version is None:
            from kmpp import __version__

            kotlin_plugin_version = __version__
        self.kotlin_plugin_version = kotlin_plugin_version
        self.host_manager = host_manager or HostManager()
        self.extension: MultiplatformExtension | None = None

    @property
    def id(self) -> str:
        return self.ID

    def apply(self, project: Project) -> None:
        project.plugins.apply("java-base")
        warn_once(project, EXPERIMENTAL_WARNING)

        extension = MultiplatformExtension(project, project.feature_previews)
        self.extension = extension

        self.setup_default_presets(project, extension)
        configure_default_versions_resolution_strategy(project, self.kotlin_plugin_version)
        configure_source_sets(extension)

        set_up_configuration_attributes(project, extension)
        configure_publishing(project, extension)
        configure_source_jars(project, extension)

        # Metadata target, compiling the common code
        extension.targets.from_preset(
            MetadataTargetPreset(project, extension.source_sets), METADATA_TARGET_NAME
        )
        logger.debug(
            "Applied multiplatform plugin to '%s' with presets: %s",
            project.name,
            ", ".join(extension.presets.names),
        )

    def setup_default_presets(self, project: Project, extension: MultiplatformExtension) -> None:
        """Register the built-in presets.

        The Android preset is registered once an Android plugin is applied.
        Native presets follow the host manager's order.
        """
        presets = extension.presets
        source_sets = extension.source_sets
        presets.add(JvmTargetPreset(project, source_sets))
        presets.add(JsTargetPreset(project, source_sets))

        def _add_android_preset(_plugin: Plugin) -> None:
            if "android" not in presets:
                presets.add(AndroidTargetPreset(project, source_sets))

        for plugin_id in ANDROID_PLUGIN_IDS:
            project.plugins.with_plugin(plugin_id, _add_android_preset)

        presets.add(JvmWithJavaTargetPreset(project, source_sets))
        for konan_target in self.host_manager.targets.values():
            presets.add(NativeTargetPreset(project, source_sets, konan_target))


def multiplatform(project: Project, **kwargs) -> MultiplatformExtension:
    """Apply the multiplatform plugin and return the project's extension.

    Args:
        project: Project to apply the plugin to.
        **kwargs: Passed to MultiplatformPlugin when it is not applied yet.

    Returns:
        The project's MultiplatformExtension.
    """
    plugin = project.plugins.apply(MultiplatformPlugin(**kwargs))
    if not isinstance(plugin, MultiplatformPlugin) or plugin.extension is None:
        raise ConfigureError(
            f"plugin '{MultiplatformPlugin.ID}' is applied to project '{project.name}' "
            f"but is not a MultiplatformPlugin",
            get_caller_location(),
        )
    return plugin.extension
