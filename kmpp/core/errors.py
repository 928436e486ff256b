# SPDX-License-Identifier: MIT
"""Custom exceptions for kmpp.

All kmpp exceptions inherit from KmppError, which includes
optional source location information for better error messages.
Every error is fatal for the configuration phase; none is retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kmpp.util.source_location import SourceLocation


class KmppError(Exception):
    """Base class for all kmpp exceptions.

    Attributes:
        message: The error message.
        location: Optional source location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class ConfigureError(KmppError):
    """Invalid project configuration.

    Raised for unknown presets, misuse of the evaluation lifecycle,
    or inconsistent publication setup.
    """


class UnknownDomainObjectError(ConfigureError):
    """A named element was requested but does not exist.

    Attributes:
        kind: Kind of element (e.g. "target", "source set").
        name: The requested name.
    """

    def __init__(
        self,
        kind: str,
        name: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} with name '{name}' not found", location)


class NamingConflictError(KmppError):
    """An element with the same name is already registered.

    Attributes:
        kind: Kind of element (e.g. "target", "publication").
        name: The conflicting name.
        existing_location: Where the existing element was defined, if known.
    """

    def __init__(
        self,
        kind: str,
        name: str,
        existing_location: SourceLocation | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.existing_location = existing_location
        message = f"cannot add {kind} '{name}': a {kind} with that name already exists"
        if existing_location:
            message += f" (defined at {existing_location})"
        super().__init__(message, location)


class PropagationConsistencyError(KmppError):
    """An attribute key has no value when it is copied.

    Attributes:
        key: Name of the attribute key.
        source: Description of the attribute bag being copied from.
        destination: Description of the attribute bag being copied to.
    """

    def __init__(
        self,
        key: str,
        source: str,
        destination: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.key = key
        self.source = source
        self.destination = destination
        super().__init__(
            f"attribute '{key}' of {source} has no value "
            f"and cannot be copied to {destination}",
            location,
        )


class DependencyCycleError(KmppError):
    """A dependsOn edge would create a cycle in the source set graph.

    Attributes:
        cycle: The names forming the cycle, first name repeated at the end.
    """

    def __init__(
        self,
        cycle: list[str],
        location: SourceLocation | None = None,
    ) -> None:
        self.cycle = cycle
        cycle_str = " -> ".join(cycle)
        super().__init__(f"dependency cycle: {cycle_str}", location)
