# SPDX-License-Identifier: MIT
"""Sources jar tasks, one per target with a ``main`` compilation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kmpp.core.tasks import SourcesJar
from kmpp.model.target import MAIN_COMPILATION_NAME

if TYPE_CHECKING:
    from kmpp.core.project import Project
    from kmpp.model.target import Compilation, Target
    from kmpp.plugin.extension import MultiplatformExtension

logger = logging.getLogger(__name__)


def configure_source_jars(project: Project, extension: MultiplatformExtension) -> None:
    """Create a ``<target>SourcesJar`` task for each target's main compilation.

    The archive contents are resolved at the evaluation barrier: every
    source set the main compilation compiles, including those reached
    through dependsOn, contributes its Kotlin source directories under a
    directory named after the source set.
    """

    def _configure_target(target: Target) -> None:
        def _create_sources_jar(main_compilation: Compilation) -> None:
            sources_jar = project.create_task(target.sources_jar_task_name, SourcesJar)
            sources_jar.appendix = target.name.lower()
            sources_jar.classifier = "sources"

            def _add_sources() -> None:
                for source_set in main_compilation.all_kotlin_source_sets:
                    sources_jar.from_(source_set.kotlin.src_dirs, into=source_set.name)
                logger.debug(
                    "Sources jar '%s' includes %s",
                    sources_jar.name,
                    ", ".join(s.name for s in main_compilation.all_kotlin_source_sets),
                )

            project.when_evaluated(_add_sources)

        target.compilations.named(MAIN_COMPILATION_NAME).all(_create_sources_jar)

    extension.targets.all(_configure_target)
