# SPDX-License-Identifier: MIT
"""Maven publications."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kmpp.core.configuration import PublishArtifact
from kmpp.core.errors import ConfigureError
from kmpp.core.tasks import SourcesJar
from kmpp.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from kmpp.publish.component import SoftwareComponent


class MavenPublication:
    """A named, versioned set of artifacts published to a Maven repository.

    Attributes:
        name: Publication name, unique within the project.
        group_id: Maven group id.
        artifact_id: Maven artifact id.
        version: Maven version.
        component: The component providing the publication's variants.
        artifacts: Additional artifacts (e.g. a sources jar).
        original_file_names: Whether artifacts keep their build file names
            instead of being renamed to ``artifactId-version[-classifier]``.
        defined_at: Where the publication was created.
    """

    def __init__(self, name: str, *, defined_at: SourceLocation | None = None) -> None:
        self.name = name
        self.group_id = ""
        self.artifact_id = name
        self.version = "unspecified"
        self.component: SoftwareComponent | None = None
        self.artifacts: list[PublishArtifact] = []
        self.original_file_names = False
        self.defined_at = defined_at or get_caller_location()

    def from_(self, component: SoftwareComponent) -> None:
        """Set the component this publication publishes.

        Raises:
            ConfigureError: If a different component was already set.
        """
        if self.component is not None and self.component is not component:
            raise ConfigureError(
                f"publication '{self.name}' cannot include multiple components",
                get_caller_location(),
            )
        self.component = component

    def artifact(self, source: PublishArtifact | SourcesJar) -> PublishArtifact:
        """Add an extra artifact, given directly or as the archive task producing it."""
        artifact = source.as_artifact() if isinstance(source, SourcesJar) else source
        self.artifacts.append(artifact)
        return artifact

    def publish_with_original_file_name(self) -> None:
        self.original_file_names = True

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def artifact_file_name(self, artifact: PublishArtifact) -> str:
        """The file name the artifact is published under."""
        if self.original_file_names and artifact.file is not None:
            return artifact.file.name
        classifier = f"-{artifact.classifier}" if artifact.classifier else ""
        return f"{self.artifact_id}-{self.version}{classifier}.{artifact.extension}"

    def all_artifacts(self) -> list[PublishArtifact]:
        """Component artifacts followed by the extra artifacts."""
        result: list[PublishArtifact] = []
        if self.component is not None:
            for usage in self.component.usages:
                for artifact in usage.artifacts:
                    if artifact not in result:
                        result.append(artifact)
        result.extend(a for a in self.artifacts if a not in result)
        return result

    def __repr__(self) -> str:
        return f"MavenPublication({self.name!r}, {self.coordinates!r})"
