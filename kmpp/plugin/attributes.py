# SPDX-License-Identifier: MIT
"""Propagation of compilation attributes to configurations.

Build code may change compilation attributes until the evaluation
barrier, so propagation is registered at plugin apply but only runs there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kmpp.core.attributes import copy_attributes

if TYPE_CHECKING:
    from kmpp.core.attributes import AttributeContainer
    from kmpp.core.configuration import Configuration
    from kmpp.core.project import Project
    from kmpp.model.target import Compilation, Target
    from kmpp.plugin.extension import MultiplatformExtension

logger = logging.getLogger(__name__)


def _copy_into_configurations(
    project: Project, source: AttributeContainer, configuration_names: list[str]
) -> None:
    names = set(configuration_names)

    def _copy(configuration: Configuration) -> None:
        copy_attributes(source, configuration.attributes)

    project.configurations.matching(lambda c: c.name in names).all(_copy)


def set_up_configuration_attributes(project: Project, extension: MultiplatformExtension) -> None:
    """Copy attributes from compilations to configurations at the barrier.

    For each target with a ``main`` compilation:

    - the main compilation's attributes go to the target's API elements,
      runtime elements and default configurations;
    - each compilation's attributes go to its related configurations.

    Configurations and compilations created after the barrier still
    receive the copy.

    Raises:
        PropagationConsistencyError: From ``project.evaluate()``, if an
            attribute has no value when copied.
    """

    def _propagate(target: Target) -> None:
        main_compilation = target.main_compilation
        if main_compilation is None:
            logger.debug("Target '%s' has no main compilation, skipping attributes", target.name)
            return

        _copy_into_configurations(
            project, main_compilation.attributes, target.element_configuration_names
        )

        def _propagate_compilation(compilation: Compilation) -> None:
            _copy_into_configurations(
                project, compilation.attributes, compilation.related_configuration_names
            )

        target.compilations.all(_propagate_compilation)

    project.after_evaluate(lambda: extension.targets.all(_propagate))
