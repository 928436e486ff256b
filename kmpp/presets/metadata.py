# SPDX-License-Identifier: MIT
"""Preset for the implicit ``metadata`` target.

The metadata target compiles the shared code in ``commonMain`` into the
platform-independent metadata artifact. It is published through the root
publication rather than a publication of its own.
"""

from __future__ import annotations

from kmpp.model.source_set import COMMON_MAIN_SOURCE_SET_NAME
from kmpp.model.target import MAIN_COMPILATION_NAME, Compilation, KotlinPlatformType, Target
from kmpp.presets.preset import KotlinTargetPreset


class MetadataTargetPreset(KotlinTargetPreset):
    """Creates the metadata target. Not registered as a user preset."""

    platform_type = KotlinPlatformType.common
    compilation_names = (MAIN_COMPILATION_NAME,)

    @property
    def name(self) -> str:
        return "metadata"

    def _instantiate_target(self, name: str) -> Target:
        target = super()._instantiate_target(name)
        target.publishable = False
        return target

    def _add_default_source_sets(self, compilation: Compilation) -> None:
        compilation.source(self.source_sets.maybe_create(COMMON_MAIN_SOURCE_SET_NAME))
