# SPDX-License-Identifier: MIT
"""Tests for kmpp.util.host."""

from kmpp.util.host import (
    ANDROID_ARM64,
    IOS_X64,
    LINUX_ARM32_HFP,
    LINUX_X64,
    MACOS_X64,
    MINGW_X64,
    WASM32,
    HostManager,
)


class TestKonanTarget:
    def test_preset_names(self):
        assert LINUX_X64.preset_name == "linuxX64"
        assert LINUX_ARM32_HFP.preset_name == "linuxArm32Hfp"
        assert IOS_X64.preset_name == "iosX64"
        assert MACOS_X64.preset_name == "macosX64"
        assert ANDROID_ARM64.preset_name == "androidNativeArm64"
        assert WASM32.preset_name == "wasm32"

    def test_str(self):
        assert str(MINGW_X64) == "mingw_x64"


class TestHostManager:
    def test_host_name_is_normalized(self):
        assert HostManager("Linux").host_os == "linux"

    def test_linux(self):
        manager = HostManager("linux")
        assert LINUX_X64 in manager.enabled
        assert not manager.is_enabled(MACOS_X64)
        assert not manager.is_enabled(MINGW_X64)

    def test_darwin_enables_apple_targets(self):
        manager = HostManager("darwin")
        assert manager.enabled[:2] == [MACOS_X64, manager.targets["ios_arm32"]]
        assert manager.is_enabled(IOS_X64)
        assert manager.is_enabled(LINUX_X64)

    def test_windows(self):
        assert list(HostManager("windows").targets) == ["mingw_x64", "linux_x64", "wasm32"]

    def test_unknown_host(self):
        manager = HostManager("plan9")
        assert manager.enabled == []
        assert manager.targets == {}

    def test_default_uses_current_platform(self):
        assert HostManager().host_os
