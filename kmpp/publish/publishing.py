# SPDX-License-Identifier: MIT
"""The maven-publish host plugin.

Applying it gives the project a PublishingExtension. Every publication
added to the extension gets a ``publish<Name>PublicationToMavenLocal``
task.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kmpp.core.collection import NamedDomainObjectContainer
from kmpp.core.errors import ConfigureError
from kmpp.core.tasks import Task
from kmpp.publish.publication import MavenPublication
from kmpp.util.naming import capitalize

if TYPE_CHECKING:
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)


class PublishingExtension:
    """Holds the project's publications.

    Attributes:
        publications: Publications by name (live).
    """

    def __init__(self, project: Project) -> None:
        self.project = project
        self.publications: NamedDomainObjectContainer[MavenPublication] = (
            NamedDomainObjectContainer("publication", MavenPublication)
        )


class PublishToMaven(Task):
    """Base class of tasks publishing one publication.

    Attributes:
        publication: The publication to publish.
        published: Published file names, filled in by run().
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.publication: MavenPublication | None = None
        self.published: list[str] = []

    def run(self) -> None:
        publication = self.publication
        if publication is None:
            raise ConfigureError(f"task '{self.name}' has no publication", self.defined_at)
        self.published = [
            publication.artifact_file_name(a) for a in publication.all_artifacts()
        ]
        logger.info(
            "Publishing %s (%s)", publication.coordinates, ", ".join(self.published) or "no files"
        )


class PublishToMavenLocal(PublishToMaven):
    """Publishes a publication to the local Maven repository."""


def publish_task_name(publication: MavenPublication) -> str:
    return f"publish{capitalize(publication.name)}PublicationToMavenLocal"


class MavenPublishPlugin:
    """The ``maven-publish`` plugin."""

    ID = "maven-publish"

    @property
    def id(self) -> str:
        return self.ID

    def apply(self, project: Project) -> None:
        publishing = PublishingExtension(project)
        project.publishing = publishing

        def _create_publish_task(publication: MavenPublication) -> None:
            task = project.create_task(publish_task_name(publication), PublishToMavenLocal)
            task.publication = publication

        publishing.publications.all(_create_publish_task)
