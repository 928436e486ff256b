# SPDX-License-Identifier: MIT
"""Report generators for multiplatform projects."""

from kmpp.generators.generator import BaseGenerator, Generator
from kmpp.generators.mermaid import MermaidGenerator

__all__ = [
    "BaseGenerator",
    "Generator",
    "MermaidGenerator",
]
