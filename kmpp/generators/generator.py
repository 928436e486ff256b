# SPDX-License-Identifier: MIT
"""Generator protocol for project reports.

Generators take a configured multiplatform extension and write a report
file describing it (e.g. a diagram of the source set graph).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kmpp.plugin.extension import MultiplatformExtension


@runtime_checkable
class Generator(Protocol):
    """Protocol for report generators."""

    @property
    def name(self) -> str:
        """Generator name (e.g., 'mermaid')."""
        ...

    def generate(self, extension: MultiplatformExtension, output_dir: Path) -> Path:
        """Write the report.

        Args:
            extension: The configured project model.
            output_dir: Directory to write output files to.

        Returns:
            Path of the written file.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, extension: MultiplatformExtension, output_dir: Path) -> Path:
        """Write the report. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
