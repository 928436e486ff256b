# SPDX-License-Identifier: MIT
"""Target preset protocol and base implementation.

A preset is a factory for one kind of target. The multiplatform plugin
registers a preset per supported platform; build code creates any number
of targets from each preset, each under its own name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from kmpp.core.configuration import PublishArtifact
from kmpp.model.target import (
    MAIN_COMPILATION_NAME,
    PLATFORM_TYPE_ATTRIBUTE,
    TEST_COMPILATION_NAME,
    Compilation,
    KotlinPlatformType,
    Target,
)

if TYPE_CHECKING:
    from kmpp.core.project import Project
    from kmpp.model.source_set import SourceSetContainer


@runtime_checkable
class TargetPreset(Protocol):
    """Protocol for target presets."""

    @property
    def name(self) -> str:
        """Preset name (e.g. 'jvm', 'linuxX64')."""
        ...

    def create_target(self, name: str) -> Target:
        """Create a new, unregistered target.

        Args:
            name: Name of the target.

        Returns:
            The target with its compilations set up.
        """
        ...


class KotlinTargetPreset(ABC):
    """Base class for presets of targets compiled by Kotlin.

    ``create_target`` builds the target, one compilation per name in
    ``compilation_names`` (each compiling its default source set, created
    on demand), the compilations' classpath configurations and the
    target's element configurations. Subclasses choose the platform and
    the target class, and may add attributes to compilations.
    """

    platform_type: KotlinPlatformType = KotlinPlatformType.common
    target_class: type[Target] = Target
    compilation_names: tuple[str, ...] = (MAIN_COMPILATION_NAME, TEST_COMPILATION_NAME)

    def __init__(self, project: Project, source_sets: SourceSetContainer) -> None:
        """Initialize a preset.

        Args:
            project: Project the targets belong to.
            source_sets: The project's source set container.
        """
        self.project = project
        self.source_sets = source_sets

    @property
    @abstractmethod
    def name(self) -> str: ...

    def create_target(self, name: str) -> Target:
        target = self._instantiate_target(name)
        for compilation_name in self.compilation_names:
            self.create_compilation(target, compilation_name)
        self._create_element_configurations(target)
        return target

    def _instantiate_target(self, name: str) -> Target:
        return self.target_class(name, self.project, self.platform_type, preset_name=self.name)

    def create_compilation(self, target: Target, name: str) -> Compilation:
        """Create a compilation of target with its source set and classpaths."""
        compilation = target.compilations.create(name)
        compilation.attributes.attribute(PLATFORM_TYPE_ATTRIBUTE, self.platform_type)
        self._configure_compilation(compilation)
        self._add_default_source_sets(compilation)
        for configuration_name in compilation.related_configuration_names:
            self.project.configurations.maybe_create(configuration_name)
        return compilation

    def _configure_compilation(self, compilation: Compilation) -> None:
        """Hook for platform-specific compilation setup."""

    def _add_default_source_sets(self, compilation: Compilation) -> None:
        compilation.source(self.source_sets.maybe_create(compilation.default_source_set_name))

    def _create_element_configurations(self, target: Target) -> None:
        artifact_id = target.default_artifact_id
        artifact = PublishArtifact(
            name=artifact_id,
            extension=target.artifact_extension,
            file=self.project.build_dir
            / "libs"
            / f"{artifact_id}-{self.project.version}.{target.artifact_extension}",
        )
        configurations = self.project.configurations
        for configuration_name in (
            target.api_elements_configuration_name,
            target.runtime_elements_configuration_name,
        ):
            configuration = configurations.maybe_create(configuration_name)
            configuration.can_be_resolved = False
            configuration.artifacts.append(artifact)
        configurations.maybe_create(target.default_configuration_name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
