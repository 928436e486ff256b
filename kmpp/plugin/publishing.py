# SPDX-License-Identifier: MIT
"""Publications of a multiplatform project.

With the ``maven-publish`` plugin applied, the project gets:

- a root publication ``kotlinMultiplatform`` of the aggregate ``kotlin``
  component, published only when metadata publishing is enabled;
- one publication per publishable target, named after the target.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from kmpp.core.errors import ConfigureError
from kmpp.core.tasks import SourcesJar
from kmpp.publish.component import KotlinSoftwareComponent
from kmpp.publish.publishing import MavenPublishPlugin, PublishToMaven
from kmpp.util.warnings import warn_once

if TYPE_CHECKING:
    from kmpp.core.plugins import Plugin
    from kmpp.core.project import Project
    from kmpp.core.tasks import Task
    from kmpp.model.target import Target
    from kmpp.plugin.extension import MultiplatformExtension
    from kmpp.publish.publication import MavenPublication
    from kmpp.publish.publishing import PublishingExtension

logger = logging.getLogger(__name__)

ROOT_PUBLICATION_NAME = "kotlinMultiplatform"
ROOT_COMPONENT_NAME = "kotlin"

METADATA_WARNING = (
    "This build is set up to publish Kotlin multiplatform libraries with experimental "
    "Gradle metadata. Future Gradle versions may fail to resolve dependencies on these "
    "publications. You can disable Gradle metadata usage during publishing and dependencies "
    "resolution by removing `enableFeaturePreview('GRADLE_METADATA')` from the settings.gradle file."
)


def configure_publishing(project: Project, extension: MultiplatformExtension) -> None:
    """Set up publications once the maven-publish plugin is applied."""

    def _on_maven_publish(_plugin: Plugin) -> None:
        if project.publishing is None:
            raise ConfigureError(
                f"plugin '{MavenPublishPlugin.ID}' did not set up publishing "
                f"on project '{project.name}'"
            )
        _configure(project, extension, project.publishing)

    project.plugins.with_plugin(MavenPublishPlugin.ID, _on_maven_publish)


def _configure(
    project: Project, extension: MultiplatformExtension, publishing: PublishingExtension
) -> None:
    if extension.is_metadata_available and extension.is_metadata_experimental:
        warn_once(project, METADATA_WARNING)

    targets = extension.targets
    kotlin_component = KotlinSoftwareComponent(ROOT_COMPONENT_NAME, targets)

    # The root publication references the platform publications as its variants
    root_publication = publishing.publications.create(ROOT_PUBLICATION_NAME)
    root_publication.from_(kotlin_component)
    root_publication.publish_with_original_file_name()
    root_publication.artifact_id = project.name
    root_publication.group_id = project.group
    root_publication.version = project.version

    def _gate(task: Task) -> None:
        task.only_if(
            lambda t: t.publication is not root_publication  # type: ignore[attr-defined]
            or extension.is_metadata_available
        )

    project.tasks.with_type(PublishToMaven).all(_gate)

    def _create_target_publication(target: Target) -> None:
        # publishable may be changed by the target's configure function
        if not target.publishable:
            logger.debug("Target '%s' is not publishable", target.name)
            return

        variant = target.component
        publication = publishing.publications.create(target.name)
        publication.publish_with_original_file_name()
        publication.artifact_id = target.default_artifact_id
        publication.group_id = project.group
        publication.version = project.version

        def _attach() -> None:
            publication.from_(variant)
            sources_jar = project.tasks.find(target.sources_jar_task_name)
            if isinstance(sources_jar, SourcesJar):
                publication.artifact(sources_jar)
            variant.publication_delegate = publication

            def _run_action(action: Callable[[MavenPublication], Any]) -> None:
                action(publication)

            target.publication_configure_actions.all(_run_action)

        project.when_evaluated(_attach)

    targets.all(lambda target: project.when_evaluated(lambda: _create_target_publication(target)))

    project.components.add(kotlin_component)
    targets.all(lambda target: project.components.add(target.component))
