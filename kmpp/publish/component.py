# SPDX-License-Identifier: MIT
"""Software components: what a target (or the whole project) publishes.

Each target has a KotlinVariant component built from its element
configurations. The KotlinSoftwareComponent aggregates the variants of all
targets, present and future, for the root publication.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from kmpp.model.target import METADATA_TARGET_NAME

if TYPE_CHECKING:
    from kmpp.core.configuration import Configuration, PublishArtifact
    from kmpp.model.target import Target
    from kmpp.publish.publication import MavenPublication

KOTLIN_API_USAGE = "kotlin-api"
KOTLIN_RUNTIME_USAGE = "kotlin-runtime"


@runtime_checkable
class SoftwareComponent(Protocol):
    """Protocol for publishable components."""

    @property
    def name(self) -> str: ...

    @property
    def usages(self) -> list[UsageContext]: ...


@dataclass
class UsageContext:
    """One way of consuming a component (API or runtime).

    Attributes:
        name: Usage name, usually the backing configuration's name.
        usage: Usage kind ("kotlin-api" or "kotlin-runtime").
        configuration: Configuration providing attributes and artifacts.
    """

    name: str
    usage: str
    configuration: Configuration

    @property
    def attributes(self) -> dict[str, Any]:
        return self.configuration.attributes.as_dict()

    @property
    def artifacts(self) -> list[PublishArtifact]:
        return list(self.configuration.artifacts)


class KotlinVariant:
    """The component of a single target.

    Attributes:
        target: The target this component describes.
        publication_delegate: The publication the variant is published
            with, once one exists.
    """

    def __init__(self, target: Target) -> None:
        self.target = target
        self.publication_delegate: MavenPublication | None = None

    @property
    def name(self) -> str:
        return self.target.name

    @property
    def usages(self) -> list[UsageContext]:
        configurations = self.target.project.configurations
        result: list[UsageContext] = []
        for configuration_name, usage in (
            (self.target.api_elements_configuration_name, KOTLIN_API_USAGE),
            (self.target.runtime_elements_configuration_name, KOTLIN_RUNTIME_USAGE),
        ):
            configuration = configurations.find(configuration_name)
            if configuration is not None:
                result.append(UsageContext(configuration_name, usage, configuration))
        return result

    @property
    def artifacts(self) -> list[PublishArtifact]:
        result: list[PublishArtifact] = []
        for usage in self.usages:
            for artifact in usage.artifacts:
                if artifact not in result:
                    result.append(artifact)
        return result

    def __repr__(self) -> str:
        return f"KotlinVariant({self.name!r})"


class KotlinSoftwareComponent:
    """Aggregate component spanning every target of the project.

    The metadata target's usages are the component's own usages; every
    other target contributes a child variant. Both are computed on access,
    so targets added after the component was created are included.
    """

    def __init__(self, name: str, targets: Any) -> None:
        """Initialize the component.

        Args:
            name: Component name.
            targets: Live collection of targets.
        """
        self._name = name
        self._targets = targets

    @property
    def name(self) -> str:
        return self._name

    @property
    def variants(self) -> list[KotlinVariant]:
        return [t.component for t in self._targets if t.name != METADATA_TARGET_NAME]

    @property
    def usages(self) -> list[UsageContext]:
        metadata = self._targets.find(METADATA_TARGET_NAME)
        return metadata.component.usages if metadata is not None else []

    def __repr__(self) -> str:
        variants = ", ".join(v.name for v in self.variants)
        return f"KotlinSoftwareComponent({self.name!r}, variants=[{variants}])"
