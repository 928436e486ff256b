# SPDX-License-Identifier: MIT
"""Android target preset.

Android targets have no ``main`` or ``test`` compilation: the Android
plugin creates one compilation per build variant (``debug``, ``release``,
...) as it discovers them. Android targets are not published on their own.
"""

from __future__ import annotations

from kmpp.core.errors import ConfigureError
from kmpp.model.target import Compilation, KotlinPlatformType, Target
from kmpp.presets.preset import KotlinTargetPreset
from kmpp.util.source_location import get_caller_location

ANDROID_PLUGIN_IDS = (
    "com.android.application",
    "com.android.library",
    "com.android.feature",
    "com.android.test",
)


class AndroidTarget(Target):
    """A target compiled by the Android plugin.

    Attributes:
        preset: Preset used to create compilations for new variants.
    """

    artifact_extension = "aar"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.publishable = False
        self.preset: AndroidTargetPreset | None = None

    def add_variant(self, variant_name: str) -> Compilation:
        """Create the compilation for a discovered build variant."""
        if self.preset is None:
            raise ConfigureError(
                f"cannot add variant '{variant_name}' to target '{self.name}': "
                f"the target was not created by the android preset",
                get_caller_location(),
            )
        return self.preset.create_compilation(self, variant_name)


class AndroidTargetPreset(KotlinTargetPreset):
    """Targets built by the Android plugin."""

    platform_type = KotlinPlatformType.android_jvm
    target_class = AndroidTarget
    compilation_names = ()

    @property
    def name(self) -> str:
        return "android"

    def _instantiate_target(self, name: str) -> AndroidTarget:
        target = AndroidTarget(name, self.project, self.platform_type, preset_name=self.name)
        target.preset = self
        return target
