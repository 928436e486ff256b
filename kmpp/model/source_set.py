# SPDX-License-Identifier: MIT
"""Source sets and the dependsOn graph between them.

A source set is a named bundle of source roots. When source set A
``depends_on`` B, code in A can see the declarations in B and every
compilation that includes A also compiles B. The edges form a DAG rooted
at ``commonMain`` and ``commonTest``: platform source sets such as
``jvmMain`` depend on the common ones, never the other way around.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kmpp.core.collection import NamedDomainObjectContainer
from kmpp.core.errors import DependencyCycleError
from kmpp.util.source_location import SourceLocation, get_caller_location

logger = logging.getLogger(__name__)

COMMON_MAIN_SOURCE_SET_NAME = "commonMain"
COMMON_TEST_SOURCE_SET_NAME = "commonTest"


class SourceDirectorySet:
    """An ordered set of source directories.

    Attributes:
        name: Display name (e.g. "jvmMain Kotlin source").
    """

    def __init__(self, name: str, src_dirs: list[Path] | None = None) -> None:
        self.name = name
        self._src_dirs: list[Path] = list(src_dirs or [])

    def src_dir(self, path: Path | str) -> SourceDirectorySet:
        """Add a source directory (fluent API). Duplicates are ignored."""
        path = Path(path)
        if path not in self._src_dirs:
            self._src_dirs.append(path)
        return self

    def set_src_dirs(self, paths: list[Path | str]) -> SourceDirectorySet:
        """Replace all source directories (fluent API)."""
        self._src_dirs = []
        for p in paths:
            self.src_dir(p)
        return self

    @property
    def src_dirs(self) -> list[Path]:
        return list(self._src_dirs)

    def __repr__(self) -> str:
        return f"SourceDirectorySet({self.name!r}, {self._src_dirs!r})"


class SourceSet:
    """A named bundle of Kotlin sources and resources.

    By convention the Kotlin sources live in ``src/<name>/kotlin`` and the
    resources in ``src/<name>/resources``, relative to the project root.

    Attributes:
        name: Source set name, unique within the project.
        kotlin: Kotlin source directories.
        resources: Resource directories.
        defined_at: Where the source set was created.
    """

    def __init__(self, name: str, *, defined_at: SourceLocation | None = None) -> None:
        self.name = name
        self.kotlin = SourceDirectorySet(
            f"{name} Kotlin source", [Path("src") / name / "kotlin"]
        )
        self.resources = SourceDirectorySet(
            f"{name} resources", [Path("src") / name / "resources"]
        )
        self.defined_at = defined_at or get_caller_location()
        self._depends_on: list[SourceSet] = []

    @property
    def depends_on_source_sets(self) -> list[SourceSet]:
        """Direct dependsOn targets, in the order they were added."""
        return list(self._depends_on)

    def depends_on(self, other: SourceSet) -> SourceSet:
        """Add a dependsOn edge from this source set to other (fluent API).

        Adding an existing edge is a no-op.

        Raises:
            DependencyCycleError: If the edge would create a cycle. The
                graph is left unchanged.
        """
        if other in self._depends_on:
            return self
        path = other._path_to(self)
        if path is not None:
            raise DependencyCycleError(
                [self.name] + [s.name for s in path], get_caller_location()
            )
        self._depends_on.append(other)
        logger.debug("Source set '%s' now depends on '%s'", self.name, other.name)
        return self

    def _path_to(
        self, target: SourceSet, visited: set[SourceSet] | None = None
    ) -> list[SourceSet] | None:
        """Return a dependsOn path from self to target (inclusive), or None.

        Each source set is searched at most once.
        """
        if self is target:
            return [self]
        if visited is None:
            visited = set()
        visited.add(self)
        for dep in self._depends_on:
            if dep in visited:
                continue
            path = dep._path_to(target, visited)
            if path is not None:
                return [self] + path
        return None

    def resolve_all_depends_on(self) -> list[SourceSet]:
        """All source sets this one transitively depends on (DFS, no duplicates).

        Does not include this source set.
        """
        result: list[SourceSet] = []

        def _collect(source_set: SourceSet) -> None:
            for dep in source_set._depends_on:
                if dep not in result:
                    result.append(dep)
                    _collect(dep)

        _collect(self)
        return result

    def __repr__(self) -> str:
        deps = ", ".join(d.name for d in self._depends_on)
        return f"SourceSet({self.name!r}, depends_on=[{deps}])"


class SourceSetContainer(NamedDomainObjectContainer[SourceSet]):
    """The project's source sets."""

    def __init__(self) -> None:
        super().__init__("source set", SourceSet)

    def edges(self) -> list[tuple[str, str]]:
        """All dependsOn edges as (from, to) name pairs."""
        return [(s.name, d.name) for s in self for d in s.depends_on_source_sets]
