# SPDX-License-Identifier: MIT
"""Tasks registered on the host project.

kmpp does not schedule tasks. A task here is a named unit of work with
``only_if`` conditions that are checked when the task is executed, which is
enough to model publication gating and to build source archives.
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from kmpp.core.configuration import PublishArtifact
from kmpp.util.source_location import SourceLocation, get_caller_location

if TYPE_CHECKING:
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)


class TaskState(Enum):
    CREATED = "created"
    EXECUTED = "executed"
    SKIPPED = "skipped"


class Task:
    """A named unit of work.

    Attributes:
        name: Task name, unique within the project.
        project: Owning project.
        state: Outcome of the last execute() call.
        defined_at: Where the task was created.
    """

    def __init__(
        self,
        name: str,
        project: Project,
        *,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.project = project
        self.state = TaskState.CREATED
        self.defined_at = defined_at or get_caller_location()
        self._only_if: list[Callable[[Task], bool]] = []

    def only_if(self, predicate: Callable[[Task], bool]) -> None:
        """Add a condition; the task runs only if all conditions hold."""
        self._only_if.append(predicate)

    def should_execute(self) -> bool:
        return all(predicate(self) for predicate in self._only_if)

    def execute(self) -> bool:
        """Decide whether to run, then run.

        Returns:
            True if the task ran, False if it was skipped.
        """
        if not self.should_execute():
            logger.info("Skipping task '%s' (onlyIf condition not met)", self.name)
            self.state = TaskState.SKIPPED
            return False
        logger.info("Executing task '%s'", self.name)
        self.run()
        self.state = TaskState.EXECUTED
        return True

    def run(self) -> None:
        """The task action. Subclasses override this."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


@dataclass
class CopySpec:
    """Files or directories copied into an archive, under ``into``."""

    paths: list[Path]
    into: str | None = None


class SourcesJar(Task):
    """Archive of source files, classified as "sources".

    The archive name follows ``<base_name>-<appendix>-<version>-<classifier>.jar``
    with empty parts dropped.

    Attributes:
        base_name: Archive base name (defaults to the project name).
        appendix: Distinguishes archives of different targets.
        version: Archive version (defaults to the project version).
        classifier: Artifact classifier.
        destination_dir: Directory the archive is written to.
    """

    extension = "jar"

    def __init__(
        self,
        name: str,
        project: Project,
        *,
        defined_at: SourceLocation | None = None,
    ) -> None:
        super().__init__(name, project, defined_at=defined_at)
        self.base_name: str = project.name
        self.appendix: str | None = None
        self.version: str | None = project.version
        self.classifier: str | None = "sources"
        self.destination_dir: Path = project.build_dir / "libs"
        self._specs: list[CopySpec] = []

    def from_(self, paths: list[Path | str] | Path | str, into: str | None = None) -> None:
        """Add files or directories to the archive, optionally under a subdirectory."""
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self._specs.append(CopySpec([self.project.file(p) for p in paths], into))

    @property
    def copy_specs(self) -> list[CopySpec]:
        return list(self._specs)

    @property
    def archive_file_name(self) -> str:
        parts = [self.base_name, self.appendix, self.version, self.classifier]
        return "-".join(p for p in parts if p) + f".{self.extension}"

    @property
    def archive_file(self) -> Path:
        return self.destination_dir / self.archive_file_name

    def entries(self) -> list[tuple[str, Path]]:
        """Resolve the archive contents.

        Directories contribute every file below them, relative to the
        directory. Paths that do not exist are ignored.

        Returns:
            (path inside archive, file on disk) pairs, in copy spec order.
        """
        result: list[tuple[str, Path]] = []
        for spec in self._specs:
            prefix = PurePosixPath(spec.into) if spec.into else PurePosixPath()
            for root in spec.paths:
                if root.is_dir():
                    for file in sorted(p for p in root.rglob("*") if p.is_file()):
                        rel = PurePosixPath(file.relative_to(root).as_posix())
                        result.append((str(prefix / rel), file))
                elif root.is_file():
                    result.append((str(prefix / root.name), root))
        return result

    def as_artifact(self) -> PublishArtifact:
        return PublishArtifact(
            name=self.base_name,
            extension=self.extension,
            classifier=self.classifier,
            file=self.archive_file,
        )

    def run(self) -> None:
        self.destination_dir.mkdir(parents=True, exist_ok=True)
        entries = self.entries()
        with zipfile.ZipFile(self.archive_file, "w", zipfile.ZIP_DEFLATED) as zf:
            for arcname, path in entries:
                zf.write(path, arcname)
        logger.info("Wrote %s (%d files)", self.archive_file, len(entries))
