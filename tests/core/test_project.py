# SPDX-License-Identifier: MIT
"""Tests for kmpp.core.project and the host plugin manager."""

from pathlib import Path

import pytest

from kmpp.core.configuration import Dependency
from kmpp.core.errors import ConfigureError, NamingConflictError
from kmpp.core.plugins import MarkerPlugin
from kmpp.core.project import Project, ProjectState
from kmpp.core.tasks import Task, TaskState


class TestProject:
    def test_creation(self, tmp_path):
        project = Project("lib", group="com.acme", version="1.0", root_dir=tmp_path)
        assert project.name == "lib"
        assert project.group == "com.acme"
        assert project.version == "1.0"
        assert project.build_dir == tmp_path / "build"
        assert project.state is ProjectState.CONFIGURING
        assert project.publishing is None

    def test_file_resolves_relative_to_root(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        assert project.file("src") == tmp_path / "src"
        assert project.file(Path("/abs")) == Path("/abs")

    def test_after_evaluate_runs_in_order(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        calls = []
        project.after_evaluate(lambda: calls.append(1))
        project.after_evaluate(lambda: calls.append(2))
        assert calls == []

        project.evaluate()
        assert calls == [1, 2]
        assert project.is_evaluated

    def test_actions_registered_during_evaluation_run(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        calls = []
        project.after_evaluate(lambda: project.when_evaluated(lambda: calls.append("nested")))
        project.evaluate()
        assert calls == ["nested"]

    def test_after_evaluate_when_evaluated_raises(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        project.evaluate()
        with pytest.raises(ConfigureError):
            project.after_evaluate(lambda: None)

    def test_when_evaluated_runs_immediately_after_barrier(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        project.evaluate()
        calls = []
        project.when_evaluated(lambda: calls.append(1))
        assert calls == [1]

    def test_evaluate_twice_raises(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        project.evaluate()
        with pytest.raises(ConfigureError):
            project.evaluate()

    def test_create_task_duplicate_name(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        project.create_task("assemble")
        with pytest.raises(NamingConflictError):
            project.create_task("assemble")


class TestTask:
    def test_execute_without_conditions(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        task = project.create_task("assemble")
        assert task.execute() is True
        assert task.state is TaskState.EXECUTED

    def test_only_if_skips(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        task = project.create_task("assemble", Task)
        task.only_if(lambda t: True)
        task.only_if(lambda t: False)

        assert task.execute() is False
        assert task.state is TaskState.SKIPPED


class TestConfiguration:
    def test_dependency_parse(self):
        assert Dependency.parse("org.jetbrains.kotlin:kotlin-stdlib") == Dependency(
            "org.jetbrains.kotlin", "kotlin-stdlib"
        )
        assert Dependency.parse("a:b:1.0").version == "1.0"
        with pytest.raises(ValueError):
            Dependency.parse("nonsense")

    def test_resolution_rules_apply(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        configuration = project.configurations.create("compileClasspath")
        configuration.add_dependency("com.acme:util")
        configuration.resolution_strategy.each_dependency(lambda d: d.use_version("2.0"))

        assert configuration.resolved_dependencies() == [Dependency("com.acme", "util", "2.0")]
        assert configuration.dependencies == [Dependency("com.acme", "util")]


class TestPluginManager:
    def test_apply_marker_plugin(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        plugin = project.plugins.apply("com.android.library")
        assert isinstance(plugin, MarkerPlugin)
        assert project.plugins.has_plugin("com.android.library")

    def test_apply_twice_returns_existing(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        first = project.plugins.apply("java")
        assert project.plugins.apply("java") is first
        assert project.plugins.ids == ["java"]

    def test_with_plugin_is_live(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        seen = []
        project.plugins.with_plugin("java", lambda p: seen.append(p.id))
        assert seen == []

        project.plugins.apply("java")
        assert seen == ["java"]

        project.plugins.with_plugin("java", lambda p: seen.append("again"))
        assert seen == ["java", "again"]

    def test_maven_publish_creates_extension(self, tmp_path):
        project = Project("lib", root_dir=tmp_path)
        project.plugins.apply("maven-publish")
        assert project.publishing is not None

        publication = project.publishing.publications.create("main")
        assert project.tasks.find("publishMainPublicationToMavenLocal").publication is publication
