# SPDX-License-Identifier: MIT
"""Targets and compilations.

A Target is a platform-specific build output unit (JVM, JS, a native
architecture, ...). It owns compilations, named build units such as
``main`` and ``test``, each compiling a set of source sets. Targets are
created from presets through ``TargetContainer.from_preset``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kmpp.core.attributes import Attribute, AttributeContainer
from kmpp.core.collection import (
    DomainObjectSet,
    NamedDomainObjectCollection,
    NamedDomainObjectContainer,
)
from kmpp.core.errors import ConfigureError, NamingConflictError
from kmpp.util.naming import lower_camel_case_name
from kmpp.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from kmpp.core.project import Project
    from kmpp.model.source_set import SourceSet
    from kmpp.presets.preset import TargetPreset
    from kmpp.publish.component import KotlinVariant
    from kmpp.publish.publication import MavenPublication

logger = logging.getLogger(__name__)

MAIN_COMPILATION_NAME = "main"
TEST_COMPILATION_NAME = "test"
METADATA_TARGET_NAME = "metadata"


class KotlinPlatformType(Enum):
    """The kind of platform a target compiles for."""

    common = "common"
    jvm = "jvm"
    js = "js"
    android_jvm = "androidJvm"
    native = "native"

    def __str__(self) -> str:
        return self.value


PLATFORM_TYPE_ATTRIBUTE = Attribute.of("org.jetbrains.kotlin.platform.type", KotlinPlatformType)


class Compilation:
    """A named build unit of a target.

    Attributes:
        target: Owning target.
        name: Compilation name ("main", "test", or e.g. an Android variant).
        attributes: Attributes describing the compilation output.
        output_dir: Directory the compiled output is written to.
        defined_at: Where the compilation was created.
    """

    def __init__(
        self,
        target: Target,
        name: str,
        *,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.target = target
        self.name = name
        self.attributes = AttributeContainer(f"compilation '{name}' of target '{target.name}'")
        self.output_dir: Path = (
            target.project.build_dir / "classes" / "kotlin" / target.name / name
        )
        self.defined_at = defined_at or get_caller_location()
        self._kotlin_source_sets: DomainObjectSet[SourceSet] = DomainObjectSet()

    def _disambiguate(self, simple_name: str) -> str:
        compilation_part = None if self.name == MAIN_COMPILATION_NAME else self.name
        return lower_camel_case_name(
            self.target.disambiguation_classifier, compilation_part, simple_name
        )

    @property
    def default_source_set_name(self) -> str:
        """Name of the source set this compilation compiles by default."""
        return lower_camel_case_name(self.target.disambiguation_classifier, self.name)

    @property
    def compile_dependency_configuration_name(self) -> str:
        return self._disambiguate("compileClasspath")

    @property
    def runtime_dependency_configuration_name(self) -> str:
        return self._disambiguate("runtimeClasspath")

    @property
    def related_configuration_names(self) -> list[str]:
        """Dependency buckets that resolve this compilation's dependencies."""
        return [
            self.compile_dependency_configuration_name,
            self.runtime_dependency_configuration_name,
        ]

    def source(self, source_set: SourceSet) -> Compilation:
        """Include a source set in this compilation (fluent API)."""
        self._kotlin_source_sets.add(source_set)
        return self

    @property
    def kotlin_source_sets(self) -> DomainObjectSet[SourceSet]:
        """Source sets included directly (live)."""
        return self._kotlin_source_sets

    @property
    def all_kotlin_source_sets(self) -> list[SourceSet]:
        """Directly included source sets plus everything they depend on."""
        result: list[SourceSet] = []
        for source_set in self._kotlin_source_sets:
            for s in [source_set, *source_set.resolve_all_depends_on()]:
                if s not in result:
                    result.append(s)
        return result

    def __repr__(self) -> str:
        return f"Compilation({self.target.name!r}, {self.name!r})"


class Target:
    """A named, platform-specific build output unit.

    Attributes:
        name: Target name, unique within the project.
        project: Owning project.
        platform_type: Platform the target compiles for.
        preset_name: Name of the preset the target was created from.
        compilations: The target's compilations (live).
        publishable: Whether the target gets its own publication.
        publication_configure_actions: Actions run once against the
            target's publication, when it exists.
        defined_at: Where the target was created.
    """

    artifact_extension = "jar"

    def __init__(
        self,
        name: str,
        project: Project,
        platform_type: KotlinPlatformType,
        *,
        preset_name: str | None = None,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.project = project
        self.platform_type = platform_type
        self.preset_name = preset_name
        self.compilations: NamedDomainObjectContainer[Compilation] = NamedDomainObjectContainer(
            "compilation", lambda compilation_name: Compilation(self, compilation_name)
        )
        self.publishable = True
        self.publication_configure_actions: DomainObjectSet[
            Callable[[MavenPublication], Any]
        ] = DomainObjectSet()
        self.defined_at = defined_at or get_caller_location()
        self._component: KotlinVariant | None = None

    @property
    def disambiguation_classifier(self) -> str | None:
        """Prefix used to make task and configuration names unique."""
        return self.name

    def disambiguate_name(self, simple_name: str) -> str:
        return lower_camel_case_name(self.disambiguation_classifier, simple_name)

    @property
    def api_elements_configuration_name(self) -> str:
        return self.disambiguate_name("apiElements")

    @property
    def runtime_elements_configuration_name(self) -> str:
        return self.disambiguate_name("runtimeElements")

    @property
    def default_configuration_name(self) -> str:
        return self.disambiguate_name("default")

    @property
    def element_configuration_names(self) -> list[str]:
        """Configurations that expose the target to consumers."""
        return [
            self.api_elements_configuration_name,
            self.runtime_elements_configuration_name,
            self.default_configuration_name,
        ]

    @property
    def sources_jar_task_name(self) -> str:
        return self.disambiguate_name("sourcesJar")

    @property
    def default_artifact_id(self) -> str:
        return f"{self.project.name}-{self.name.lower()}"

    @property
    def main_compilation(self) -> Compilation | None:
        return self.compilations.find(MAIN_COMPILATION_NAME)

    @property
    def component(self) -> KotlinVariant:
        """The publishable component describing this target's artifacts."""
        if self._component is None:
            from kmpp.publish.component import KotlinVariant

            self._component = KotlinVariant(self)
        return self._component

    def maven_publication(self, action: Callable[[MavenPublication], Any]) -> Target:
        """Register an action to configure this target's publication (fluent API)."""
        self.publication_configure_actions.add(action)
        return self

    def __repr__(self) -> str:
        compilations = ", ".join(self.compilations.names)
        return f"{self.__class__.__name__}({self.name!r}, compilations=[{compilations}])"


class TargetContainer(NamedDomainObjectCollection[Target]):
    """The project's targets, created from presets.

    Example:
        jvm = kotlin.targets.from_preset("jvm", "jvm")
        js = kotlin.targets.from_preset(
            kotlin.presets.get("js"), "browser", lambda t: setattr(t, "publishable", False)
        )
    """

    def __init__(self, presets: NamedDomainObjectCollection[TargetPreset]) -> None:
        super().__init__("target")
        self._presets = presets

    def from_preset(
        self,
        preset: TargetPreset | str,
        name: str,
        configure: Callable[[Target], Any] | None = None,
    ) -> Target:
        """Create a target from a preset, register it, then configure it.

        Listeners subscribed to this collection see the target as soon as
        it is registered, before ``configure`` runs; listeners needing the
        configured state must defer to the evaluation barrier.

        Args:
            preset: A preset, or the name of a registered preset.
            name: Name of the new target.
            configure: Optional function called with the new target.

        Returns:
            The new target.

        Raises:
            ConfigureError: If preset names an unknown preset.
            NamingConflictError: If a target with this name exists. The
                preset is not invoked and nothing is registered.
        """
        if isinstance(preset, str):
            found = self._presets.find(preset)
            if found is None:
                raise ConfigureError(
                    f"unknown target preset '{preset}' "
                    f"(available: {', '.join(self._presets.names)})",
                    get_caller_location(),
                )
            preset = found

        existing = self.find(name)
        if existing is not None:
            raise NamingConflictError(
                "target", name, existing.defined_at, get_caller_location()
            )

        target = preset.create_target(name)
        self.add(target)
        logger.debug("Created target '%s' from preset '%s'", name, preset.name)
        if configure is not None:
            configure(target)
        return target
