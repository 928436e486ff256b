# SPDX-License-Identifier: MIT
"""Tests for MermaidGenerator."""

from kmpp.generators import Generator, MermaidGenerator


class TestMermaidGeneratorBasic:
    """Basic tests for MermaidGenerator."""

    def test_generator_creation(self):
        """Test generator can be created."""
        gen = MermaidGenerator()
        assert gen.name == "mermaid"
        assert isinstance(gen, Generator)

    def test_generator_with_options(self):
        """Test generator accepts options."""
        gen = MermaidGenerator(
            show_compilations=False,
            direction="TB",
            output_filename="graph.mmd",
        )
        assert gen._show_compilations is False
        assert gen._direction == "TB"
        assert gen._output_filename == "graph.mmd"


class TestMermaidGeneratorSourceSets:
    """Tests for the source set graph."""

    def test_fresh_project(self, kotlin, tmp_path):
        """A project without user targets shows the common source sets."""
        out = MermaidGenerator().generate(kotlin, tmp_path / "reports")

        assert out == tmp_path / "reports" / "source-sets.mmd"
        output = out.read_text()
        assert "title: lib Source Sets" in output
        assert "flowchart BT" in output
        assert "commonMain([commonMain])" in output
        assert "commonTest([commonTest])" in output

    def test_depends_on_edges(self, kotlin, tmp_path):
        """Test dependsOn edges are drawn as solid arrows."""
        kotlin.targets.from_preset("jvm", "jvm")
        kotlin.targets.from_preset("js", "js")

        output = MermaidGenerator().generate(kotlin, tmp_path).read_text()

        assert "jvmMain --> commonMain" in output
        assert "jsTest --> commonTest" in output

    def test_compilations(self, kotlin, tmp_path):
        """Test compilations link to the source sets they include."""
        kotlin.targets.from_preset("jvm", "jvm")

        output = MermaidGenerator().generate(kotlin, tmp_path).read_text()

        assert "jvm_main[jvm/main]" in output
        assert "jvm_main -.-> jvmMain" in output
        assert "metadata_main -.-> commonMain" in output

    def test_without_compilations(self, kotlin, tmp_path):
        kotlin.targets.from_preset("jvm", "jvm")

        output = MermaidGenerator(show_compilations=False).generate(kotlin, tmp_path).read_text()

        assert "-.->" not in output
        assert "jvmMain --> commonMain" in output


class TestMermaidSanitize:
    def test_sanitize_id(self):
        gen = MermaidGenerator()
        assert gen._sanitize_id("a-b.c d") == "a_b_c_d"
        assert gen._sanitize_id("32bit") == "n32bit"
