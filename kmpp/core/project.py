# SPDX-License-Identifier: MIT
"""Host project for kmpp builds.

The Project is the in-memory stand-in for the host build engine. It owns
the configurations, tasks and components that plugins register, the
plugin manager, and the evaluation lifecycle:

1. Plugin apply: plugins register presets, targets and listeners.
2. User configuration: build code mutates targets, compilations and
   source sets.
3. Evaluation barrier (``evaluate()``): deferred actions run and observe
   the final configured state.
4. Task execution (``Task.execute()``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from kmpp.core.collection import NamedDomainObjectCollection, NamedDomainObjectContainer
from kmpp.core.configuration import Configuration
from kmpp.core.errors import ConfigureError
from kmpp.core.plugins import PluginManager
from kmpp.core.tasks import Task
from kmpp.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from kmpp.core.features import FeaturePreviews
    from kmpp.publish.component import SoftwareComponent
    from kmpp.publish.publishing import PublishingExtension

logger = logging.getLogger(__name__)

TaskT = TypeVar("TaskT", bound=Task)


class ProjectState(Enum):
    CONFIGURING = "configuring"
    EVALUATING = "evaluating"
    EVALUATED = "evaluated"


class Project:
    """Top-level container for a build.

    Example:
        project = Project("lib", group="com.acme", version="1.0")
        kotlin = multiplatform(project)
        kotlin.targets.from_preset("jvm", "jvm")
        project.evaluate()

    Attributes:
        name: Project name (also the root artifact id).
        group: Publication group id.
        version: Publication version.
        root_dir: Project root directory; relative paths resolve against it.
        build_dir: Directory for build outputs.
        feature_previews: Preview feature registry, or None when the
            build has no notion of preview features.
        configurations: Dependency buckets.
        tasks: Registered tasks.
        components: Public registry of software components.
        plugins: Plugin manager.
        publishing: Publishing extension, set by the maven-publish plugin.
        shown_warnings: Warnings already shown during this build.
    """

    __slots__ = (
        "name",
        "group",
        "version",
        "root_dir",
        "build_dir",
        "feature_previews",
        "configurations",
        "tasks",
        "components",
        "plugins",
        "publishing",
        "shown_warnings",
        "defined_at",
        "_state",
        "_evaluation_actions",
    )

    def __init__(
        self,
        name: str,
        *,
        group: str = "",
        version: str = "unspecified",
        root_dir: Path | str | None = None,
        build_dir: Path | str = "build",
        feature_previews: FeaturePreviews | None = None,
        defined_at: SourceLocation | None = None,
    ) -> None:
        """Create a project.

        Args:
            name: Project name.
            group: Group id used for publications.
            version: Version used for publications and archives.
            root_dir: Project root directory (default: current dir).
            build_dir: Build output directory, relative to root_dir.
            feature_previews: Preview feature registry.
            defined_at: Source location where project was created.
        """
        self.name = name
        self.group = group
        self.version = version
        self.root_dir = Path(root_dir) if root_dir else Path.cwd()
        self.build_dir = self.root_dir / build_dir
        self.feature_previews = feature_previews
        self.configurations: NamedDomainObjectContainer[Configuration] = (
            NamedDomainObjectContainer("configuration", Configuration)
        )
        self.tasks: NamedDomainObjectCollection[Task] = NamedDomainObjectCollection("task")
        self.components: NamedDomainObjectCollection[SoftwareComponent] = (
            NamedDomainObjectCollection("component")
        )
        self.plugins = PluginManager(self)
        self.publishing: PublishingExtension | None = None
        self.shown_warnings: set[str] = set()
        self.defined_at = defined_at or get_caller_location()
        self._state = ProjectState.CONFIGURING
        self._evaluation_actions: list[Callable[[], Any]] = []

    @property
    def state(self) -> ProjectState:
        return self._state

    @property
    def is_evaluated(self) -> bool:
        return self._state is ProjectState.EVALUATED

    def file(self, path: Path | str) -> Path:
        """Resolve a path relative to the project root."""
        path = Path(path)
        return path if path.is_absolute() else self.root_dir / path

    def create_task(
        self,
        name: str,
        task_type: type[TaskT] = Task,  # type: ignore[assignment]
        configure: Callable[[TaskT], Any] | None = None,
    ) -> TaskT:
        """Create and register a task.

        Raises:
            NamingConflictError: If a task with that name exists.
        """
        task = task_type(name, self, defined_at=get_caller_location())
        self.tasks.add(task)
        if configure is not None:
            configure(task)
        return task

    def after_evaluate(self, action: Callable[[], Any]) -> None:
        """Run action at the evaluation barrier.

        Actions run in registration order. Actions registered while the
        barrier is running are appended and still run.

        Raises:
            ConfigureError: If the project is already evaluated.
        """
        if self._state is ProjectState.EVALUATED:
            raise ConfigureError(
                f"cannot run after_evaluate when project '{self.name}' is already evaluated",
                get_caller_location(),
            )
        self._evaluation_actions.append(action)

    def when_evaluated(self, action: Callable[[], Any]) -> None:
        """Run action at the evaluation barrier, or now if it has passed."""
        if self._state is ProjectState.EVALUATED:
            action()
        else:
            self._evaluation_actions.append(action)

    def evaluate(self) -> None:
        """Pass the evaluation barrier.

        Runs every deferred action. Errors raised by an action abort the
        evaluation and propagate.

        Raises:
            ConfigureError: If evaluate() was already called.
        """
        if self._state is not ProjectState.CONFIGURING:
            raise ConfigureError(f"project '{self.name}' has already been evaluated")
        logger.info("Evaluating project '%s'", self.name)
        self._state = ProjectState.EVALUATING
        index = 0
        while index < len(self._evaluation_actions):
            self._evaluation_actions[index]()
            index += 1
        self._evaluation_actions.clear()
        self._state = ProjectState.EVALUATED
        logger.info("Project '%s' evaluated (%d tasks)", self.name, len(self.tasks))

    def __repr__(self) -> str:
        return (
            f"Project({self.name!r}, "
            f"configurations={len(self.configurations)}, "
            f"tasks={len(self.tasks)})"
        )
