# SPDX-License-Identifier: MIT
"""
kmpp: a multi-target project model for multiplatform builds.

kmpp lets a single project declare several compilation targets (JVM, JS,
native, Android) that share common source. It builds the graph of
targets, compilations and source sets, propagates dependency-resolution
attributes to configurations, and assembles the publications that ship
each target's artifacts.
"""

from __future__ import annotations

import json
import os

# Re-export commonly used classes for convenient imports
from kmpp.core.features import FeaturePreviews
from kmpp.core.project import Project
from kmpp.plugin.multiplatform import MultiplatformPlugin, multiplatform

__version__ = "1.3.0"

# Internal storage for build variables
_build_vars: dict[str, str] | None = None


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a build variable set by the invoking tool or the environment.

    Variables are passed as a JSON object in ``KMPP_VARS``:
        KMPP_VARS='{"KMPP_FEATURE_PREVIEWS": "GRADLE_METADATA"}' python build.py

    Precedence (highest to lowest):
        1. KMPP_VARS entries
        2. Environment variable of the same name

    Args:
        name: Variable name.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    global _build_vars

    # Lazy-load build vars from environment on first access
    if _build_vars is None:
        raw = os.environ.get("KMPP_VARS")
        if raw:
            try:
                _build_vars = json.loads(raw)
            except json.JSONDecodeError:
                _build_vars = {}
        else:
            _build_vars = {}

    if name in _build_vars:
        return _build_vars[name]

    return os.environ.get(name, default)


def _reset_vars() -> None:
    """Forget cached build variables (used by tests)."""
    global _build_vars
    _build_vars = None


# Public API exports
__all__ = [
    # Version
    "__version__",
    # Build variable access
    "get_var",
    # Core classes
    "FeaturePreviews",
    "Project",
    # Plugin
    "MultiplatformPlugin",
    "multiplatform",
]
