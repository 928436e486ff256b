# SPDX-License-Identifier: MIT
"""The ``kotlin`` extension: the configuration root of a multiplatform project."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kmpp.core.collection import NamedDomainObjectCollection
from kmpp.core.features import GRADLE_METADATA
from kmpp.model.source_set import SourceSetContainer
from kmpp.model.target import TargetContainer

if TYPE_CHECKING:
    from kmpp.core.features import FeaturePreviews
    from kmpp.core.project import Project
    from kmpp.presets.preset import TargetPreset


class MultiplatformExtension:
    """Targets, presets and source sets of a multiplatform project.

    Attributes:
        project: The project this extension configures.
        presets: Target presets available to build code (live).
        targets: Targets created from presets (live).
        source_sets: Source sets (live).
        is_metadata_available: Whether the root publication is published.
        is_metadata_experimental: Whether metadata publishing is still a
            preview feature in this build.
    """

    def __init__(self, project: Project, feature_previews: FeaturePreviews | None) -> None:
        self.project = project
        self.presets: NamedDomainObjectCollection[TargetPreset] = NamedDomainObjectCollection(
            "preset"
        )
        self.targets = TargetContainer(self.presets)
        self.source_sets = SourceSetContainer()
        self.is_metadata_experimental = False
        self.is_metadata_available = True

        # Without a preview registry, or once the feature is no longer a
        # preview, metadata publishing is on.
        if feature_previews is not None:
            feature = feature_previews.find(GRADLE_METADATA)
            if feature is not None:
                self.is_metadata_experimental = True
                self.is_metadata_available = feature_previews.is_feature_enabled(feature)

    def __repr__(self) -> str:
        return (
            f"MultiplatformExtension(targets={self.targets.names}, "
            f"source_sets={self.source_sets.names})"
        )
