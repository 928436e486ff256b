# SPDX-License-Identifier: MIT
"""Shared fixtures for kmpp tests."""

import pytest

from kmpp import Project, multiplatform
from kmpp.util.host import HostManager


@pytest.fixture
def project(tmp_path):
    """A fresh project rooted in a temporary directory."""
    return Project("lib", group="com.acme", version="1.0", root_dir=tmp_path)


@pytest.fixture
def kotlin(project):
    """The multiplatform extension of ``project``, with a Linux host."""
    return multiplatform(project, host_manager=HostManager("linux"))
