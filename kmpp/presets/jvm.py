# SPDX-License-Identifier: MIT
"""JVM target presets.

``jvm`` targets are compiled by Kotlin alone. ``jvmWithJava`` targets share
the project with the Java plugin, so they use the Java plugin's
undecorated names ("main" source set, "apiElements" configuration, ...)
and can exist at most once per project.
"""

from __future__ import annotations

from kmpp.core.errors import ConfigureError
from kmpp.model.target import KotlinPlatformType, Target
from kmpp.presets.preset import KotlinTargetPreset
from kmpp.util.source_location import get_caller_location

JAVA_PLUGIN_ID = "java"


class JvmTargetPreset(KotlinTargetPreset):
    """Targets compiled to JVM bytecode."""

    platform_type = KotlinPlatformType.jvm

    @property
    def name(self) -> str:
        return "jvm"


class JvmWithJavaTarget(Target):
    """A JVM target whose names are shared with the Java plugin."""

    @property
    def disambiguation_classifier(self) -> str | None:
        return None


class JvmWithJavaTargetPreset(KotlinTargetPreset):
    """JVM targets that also compile Java sources."""

    platform_type = KotlinPlatformType.jvm
    target_class = JvmWithJavaTarget

    @property
    def name(self) -> str:
        return "jvmWithJava"

    def create_target(self, name: str) -> Target:
        if self.project.plugins.has_plugin(JAVA_PLUGIN_ID):
            raise ConfigureError(
                f"cannot create target '{name}': the '{self.name}' preset can only "
                f"be used once per project, and the Java plugin is already applied",
                get_caller_location(),
            )
        self.project.plugins.apply(JAVA_PLUGIN_ID)
        return super().create_target(name)
