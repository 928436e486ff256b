# SPDX-License-Identifier: MIT
"""Kotlin/Native target presets, one per native target triple."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kmpp.core.attributes import Attribute
from kmpp.model.target import Compilation, KotlinPlatformType, Target
from kmpp.presets.preset import KotlinTargetPreset

if TYPE_CHECKING:
    from kmpp.core.project import Project
    from kmpp.model.source_set import SourceSetContainer
    from kmpp.util.host import KonanTarget

KONAN_TARGET_ATTRIBUTE = Attribute.of("org.jetbrains.kotlin.native.target", str)


class NativeTarget(Target):
    """A target compiled to native code for one target triple.

    Attributes:
        konan_target: The native target triple.
    """

    artifact_extension = "klib"

    def __init__(self, *args, konan_target: KonanTarget, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.konan_target = konan_target


class NativeTargetPreset(KotlinTargetPreset):
    """Targets for a single native target triple."""

    platform_type = KotlinPlatformType.native
    target_class = NativeTarget

    def __init__(
        self,
        project: Project,
        source_sets: SourceSetContainer,
        konan_target: KonanTarget,
    ) -> None:
        super().__init__(project, source_sets)
        self.konan_target = konan_target

    @property
    def name(self) -> str:
        return self.konan_target.preset_name

    def _instantiate_target(self, name: str) -> Target:
        return NativeTarget(
            name,
            self.project,
            self.platform_type,
            preset_name=self.name,
            konan_target=self.konan_target,
        )

    def _configure_compilation(self, compilation: Compilation) -> None:
        compilation.attributes.attribute(KONAN_TARGET_ATTRIBUTE, self.konan_target.name)
