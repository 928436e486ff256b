# SPDX-License-Identifier: MIT
"""Target presets (JVM, JS, Android, native, metadata)."""

from kmpp.presets.android import AndroidTarget, AndroidTargetPreset
from kmpp.presets.js import JsTargetPreset
from kmpp.presets.jvm import JvmTargetPreset, JvmWithJavaTarget, JvmWithJavaTargetPreset
from kmpp.presets.metadata import MetadataTargetPreset
from kmpp.presets.native import KONAN_TARGET_ATTRIBUTE, NativeTarget, NativeTargetPreset
from kmpp.presets.preset import KotlinTargetPreset, TargetPreset

__all__ = [
    # Protocol and base class
    "TargetPreset",
    "KotlinTargetPreset",
    # JVM
    "JvmTargetPreset",
    "JvmWithJavaTarget",
    "JvmWithJavaTargetPreset",
    # JS
    "JsTargetPreset",
    # Android
    "AndroidTarget",
    "AndroidTargetPreset",
    # Native
    "KONAN_TARGET_ATTRIBUTE",
    "NativeTarget",
    "NativeTargetPreset",
    # Metadata
    "MetadataTargetPreset",
]
