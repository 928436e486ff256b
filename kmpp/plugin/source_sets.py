# SPDX-License-Identifier: MIT
"""Default dependsOn wiring between platform and common source sets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kmpp.model.source_set import COMMON_MAIN_SOURCE_SET_NAME, COMMON_TEST_SOURCE_SET_NAME
from kmpp.model.target import MAIN_COMPILATION_NAME, TEST_COMPILATION_NAME

if TYPE_CHECKING:
    from kmpp.model.source_set import SourceSet
    from kmpp.model.target import Compilation, Target
    from kmpp.plugin.extension import MultiplatformExtension


def configure_source_sets(extension: MultiplatformExtension) -> None:
    """Create the common source sets and make platform source sets depend on them.

    For every target, the default source set of its ``main`` compilation
    depends on ``commonMain`` and that of its ``test`` compilation on
    ``commonTest``. Targets, compilations and source sets are all observed
    live, so the wiring also applies to those created later. Targets
    without such compilations are left alone.
    """
    source_sets = extension.source_sets
    production = source_sets.maybe_create(COMMON_MAIN_SOURCE_SET_NAME)
    test = source_sets.maybe_create(COMMON_TEST_SOURCE_SET_NAME)

    def _wire(compilation: Compilation, common: SourceSet) -> None:
        source_sets.named(compilation.default_source_set_name).all(
            lambda source_set: source_set.depends_on(common)
        )

    def _configure_target(target: Target) -> None:
        target.compilations.named(MAIN_COMPILATION_NAME).all(
            lambda compilation: _wire(compilation, production)
        )
        target.compilations.named(TEST_COMPILATION_NAME).all(
            lambda compilation: _wire(compilation, test)
        )

    extension.targets.all(_configure_target)
