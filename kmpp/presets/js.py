# SPDX-License-Identifier: MIT
"""Kotlin/JS target preset."""

from __future__ import annotations

from kmpp.model.target import KotlinPlatformType
from kmpp.presets.preset import KotlinTargetPreset


class JsTargetPreset(KotlinTargetPreset):
    """Targets compiled to JavaScript."""

    platform_type = KotlinPlatformType.js

    @property
    def name(self) -> str:
        return "js"
