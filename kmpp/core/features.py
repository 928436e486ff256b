# SPDX-License-Identifier: MIT
"""Feature previews: opt-in switches for features that are not yet stable."""

from __future__ import annotations

from collections.abc import Iterable

from kmpp.core.errors import ConfigureError

# Publishing of variant-aware module metadata alongside the root publication.
GRADLE_METADATA = "GRADLE_METADATA"

FEATURE_PREVIEWS_VAR = "KMPP_FEATURE_PREVIEWS"


class FeaturePreviews:
    """Registry of preview features a build can enable.

    Attributes:
        active_features: Names of features that are still in preview.
            A feature that became stable is no longer listed here.
    """

    def __init__(
        self,
        active_features: Iterable[str] = (GRADLE_METADATA,),
        enabled: Iterable[str] = (),
    ) -> None:
        self.active_features: tuple[str, ...] = tuple(active_features)
        self._enabled: set[str] = set()
        for name in enabled:
            self.enable_feature(name)

    @classmethod
    def from_environment(
        cls, active_features: Iterable[str] = (GRADLE_METADATA,)
    ) -> FeaturePreviews:
        """Create a registry with features enabled from build variables.

        Reads the comma separated ``KMPP_FEATURE_PREVIEWS`` variable, e.g.
        ``KMPP_FEATURE_PREVIEWS=GRADLE_METADATA``.
        """
        from kmpp import get_var

        raw = get_var(FEATURE_PREVIEWS_VAR) or ""
        enabled = [name.strip() for name in raw.split(",") if name.strip()]
        return cls(active_features, enabled)

    def find(self, name: str) -> str | None:
        """Return name if it is an active preview feature, else None."""
        return name if name in self.active_features else None

    def enable_feature(self, name: str) -> None:
        """Enable a preview feature.

        Raises:
            ConfigureError: If name is not an active preview feature.
        """
        if name not in self.active_features:
            raise ConfigureError(f"there is no feature named '{name}' to enable")
        self._enabled.add(name)

    def is_feature_enabled(self, name: str) -> bool:
        return name in self._enabled

    def __repr__(self) -> str:
        return f"FeaturePreviews(active={list(self.active_features)}, enabled={sorted(self._enabled)})"
