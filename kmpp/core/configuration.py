# SPDX-License-Identifier: MIT
"""Configurations: named dependency buckets owned by the host project.

A configuration is either resolvable (e.g. a compile classpath) or
consumable (e.g. the API elements a target exposes to consumers). The
multiplatform plugin never creates or removes attributes of its own on a
configuration; it only copies values from compilations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from kmpp.core.attributes import AttributeContainer
from kmpp.util.source_location import SourceLocation, get_caller_location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dependency:
    """An external module dependency declared on a configuration.

    Attributes:
        group: Module group (e.g. "org.jetbrains.kotlin").
        name: Module name (e.g. "kotlin-stdlib").
        version: Requested version, or None if unspecified.
    """

    group: str
    name: str
    version: str | None = None

    @classmethod
    def parse(cls, notation: str) -> Dependency:
        """Parse "group:name[:version]" notation."""
        parts = notation.split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise ValueError(f"invalid dependency notation: {notation!r}")
        return cls(parts[0], parts[1], parts[2] if len(parts) == 3 else None)

    def __str__(self) -> str:
        if self.version:
            return f"{self.group}:{self.name}:{self.version}"
        return f"{self.group}:{self.name}"


class DependencyResolveDetails:
    """Mutable view of one dependency while resolution rules run."""

    def __init__(self, requested: Dependency) -> None:
        self.requested = requested
        self.target = requested

    def use_version(self, version: str) -> None:
        self.target = replace(self.target, version=version)


ResolutionRule = Callable[[DependencyResolveDetails], None]


class ResolutionStrategy:
    """Rules applied to every dependency when a configuration resolves."""

    def __init__(self) -> None:
        self._rules: list[ResolutionRule] = []

    def each_dependency(self, rule: ResolutionRule) -> None:
        self._rules.append(rule)

    def apply(self, dependency: Dependency) -> Dependency:
        details = DependencyResolveDetails(dependency)
        for rule in self._rules:
            rule(details)
        return details.target


@dataclass
class PublishArtifact:
    """A file a configuration or publication exposes.

    Attributes:
        name: Base name of the artifact.
        extension: File extension ("jar", "klib", ...).
        classifier: Optional classifier ("sources", ...).
        file: Location of the file once built.
    """

    name: str
    extension: str
    classifier: str | None = None
    file: Path | None = None


class Configuration:
    """A named dependency bucket with an attribute bag.

    Attributes:
        name: Configuration name, unique within the project.
        attributes: Attributes used for variant matching.
        dependencies: Declared dependencies.
        artifacts: Outgoing artifacts (for consumable configurations).
        resolution_strategy: Rules applied on resolution.
        can_be_consumed: Whether other projects can depend on this bucket.
        can_be_resolved: Whether this bucket can be resolved to files.
        defined_at: Where the configuration was created.
    """

    def __init__(
        self,
        name: str,
        *,
        can_be_consumed: bool = True,
        can_be_resolved: bool = True,
        defined_at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.attributes = AttributeContainer(f"configuration '{name}'")
        self.dependencies: list[Dependency] = []
        self.artifacts: list[PublishArtifact] = []
        self.resolution_strategy = ResolutionStrategy()
        self.can_be_consumed = can_be_consumed
        self.can_be_resolved = can_be_resolved
        self.defined_at = defined_at or get_caller_location()

    def add_dependency(self, dependency: Dependency | str) -> Configuration:
        """Declare a dependency (fluent API)."""
        if isinstance(dependency, str):
            dependency = Dependency.parse(dependency)
        self.dependencies.append(dependency)
        return self

    def resolved_dependencies(self) -> list[Dependency]:
        """Declared dependencies after the resolution rules ran."""
        resolved = [self.resolution_strategy.apply(dep) for dep in self.dependencies]
        logger.debug(
            "Resolved %s: %s", self.name, ", ".join(str(d) for d in resolved) or "(none)"
        )
        return resolved

    def __repr__(self) -> str:
        return f"Configuration({self.name!r})"
