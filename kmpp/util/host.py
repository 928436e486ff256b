# SPDX-License-Identifier: MIT
"""Native target triples and which of them the current host can build.

The set of enabled native targets depends on the host operating system
(e.g. Apple targets need a macOS host), so the iteration order and content
of ``HostManager.targets`` differ between machines.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass

from kmpp.util.naming import lower_camel_case_name


@dataclass(frozen=True)
class KonanTarget:
    """A native compilation target.

    Attributes:
        name: Target triple name (e.g. "linux_x64").
        family: OS family ("linux", "osx", "ios", "mingw", "android", "wasm").
        architecture: CPU architecture ("x64", "arm64", ...).
    """

    name: str
    family: str
    architecture: str

    @property
    def preset_name(self) -> str:
        """Name of the preset for this target (e.g. "linuxX64")."""
        if self.family == "android":
            return lower_camel_case_name("androidNative", self.architecture.capitalize())
        return lower_camel_case_name(*self.name.split("_"))

    def __str__(self) -> str:
        return self.name


ANDROID_ARM32 = KonanTarget("android_arm32", "android", "arm32")
ANDROID_ARM64 = KonanTarget("android_arm64", "android", "arm64")
IOS_ARM32 = KonanTarget("ios_arm32", "ios", "arm32")
IOS_ARM64 = KonanTarget("ios_arm64", "ios", "arm64")
IOS_X64 = KonanTarget("ios_x64", "ios", "x64")
LINUX_X64 = KonanTarget("linux_x64", "linux", "x64")
LINUX_ARM32_HFP = KonanTarget("linux_arm32_hfp", "linux", "arm32")
LINUX_MIPS32 = KonanTarget("linux_mips32", "linux", "mips32")
LINUX_MIPSEL32 = KonanTarget("linux_mipsel32", "linux", "mipsel32")
MINGW_X64 = KonanTarget("mingw_x64", "mingw", "x64")
MACOS_X64 = KonanTarget("macos_x64", "osx", "x64")
WASM32 = KonanTarget("wasm32", "wasm", "wasm32")

_LINUX_ENABLED = [
    LINUX_X64,
    LINUX_ARM32_HFP,
    LINUX_MIPS32,
    LINUX_MIPSEL32,
    ANDROID_ARM32,
    ANDROID_ARM64,
    WASM32,
]

_ENABLED_BY_HOST: dict[str, list[KonanTarget]] = {
    "linux": _LINUX_ENABLED,
    "darwin": [MACOS_X64, IOS_ARM32, IOS_ARM64, IOS_X64, *_LINUX_ENABLED],
    "windows": [MINGW_X64, LINUX_X64, WASM32],
}


class HostManager:
    """Reports the native targets the host can compile for.

    Attributes:
        host_os: Lowercased host OS name as reported by platform.system().
    """

    def __init__(self, host_os: str | None = None) -> None:
        self.host_os = (host_os or platform.system()).lower()

    @property
    def enabled(self) -> list[KonanTarget]:
        """Enabled targets; empty on an unsupported host."""
        return list(_ENABLED_BY_HOST.get(self.host_os, []))

    @property
    def targets(self) -> dict[str, KonanTarget]:
        """Enabled targets keyed by target name, in enumeration order."""
        return {target.name: target for target in self.enabled}

    def is_enabled(self, target: KonanTarget) -> bool:
        return target in self.enabled
