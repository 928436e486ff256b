# SPDX-License-Identifier: MIT
"""User-facing notices that are shown at most once per build."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kmpp.core.project import Project

logger = logging.getLogger(__name__)


def warn_once(project: Project, message: str) -> bool:
    """Log a warning unless the same message was already shown for this build.

    Args:
        project: Project whose build the warning belongs to.
        message: Warning text.

    Returns:
        True if the warning was logged, False if it had been shown before.
    """
    if message in project.shown_warnings:
        return False
    project.shown_warnings.add(message)
    logger.warning("%s", message)
    return True
