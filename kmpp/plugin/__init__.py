# SPDX-License-Identifier: MIT
"""The multiplatform plugin and the wiring it performs on a project."""

from kmpp.plugin.extension import MultiplatformExtension
from kmpp.plugin.multiplatform import MultiplatformPlugin, multiplatform

__all__ = [
    "MultiplatformExtension",
    "MultiplatformPlugin",
    "multiplatform",
]
