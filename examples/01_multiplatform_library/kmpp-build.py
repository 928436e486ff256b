#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# /// script
# requires-python = ">=3.11"
# dependencies = ["kmpp"]
# ///
"""A library built for the JVM and JavaScript from shared common code.

Publishes the root publication and the JVM publication, writes the
sources jars and a Mermaid diagram of the source set graph.
"""

import logging
import sys
from pathlib import Path

# Add parent kmpp to path for development
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from kmpp import FeaturePreviews, Project, get_var, multiplatform
from kmpp.core.tasks import SourcesJar
from kmpp.generators import MermaidGenerator
from kmpp.publish.publishing import PublishToMaven

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

build_dir = Path(get_var("KMPP_BUILD_DIR", "build"))

project = Project(
    "greeting",
    group="com.acme",
    version="1.0",
    root_dir=Path(__file__).parent,
    build_dir=build_dir,
    feature_previews=FeaturePreviews.from_environment(),
)
project.plugins.apply("maven-publish")

kotlin = multiplatform(project)
kotlin.targets.from_preset("jvm", "jvm")
# The JS artifact is only consumed inside this repository
kotlin.targets.from_preset("js", "js", lambda t: setattr(t, "publishable", False))

project.evaluate()

for task in project.tasks.with_type(SourcesJar):
    task.execute()

for task in project.tasks.with_type(PublishToMaven):
    publication = task.publication
    if task.execute():
        print(f"published {publication.name} {publication.coordinates}")
    else:
        print(f"skipped {publication.name}")

report = MermaidGenerator().generate(kotlin, project.build_dir / "reports")
print(f"Source set graph written to {report}")
