# SPDX-License-Identifier: MIT
"""Tests for kmpp.util.naming and kmpp.util.warnings."""

import logging

from kmpp.util.naming import capitalize, lower_camel_case_name
from kmpp.util.warnings import warn_once


class TestLowerCamelCaseName:
    def test_joins_parts(self):
        assert lower_camel_case_name("jvm", "test", "compileClasspath") == "jvmTestCompileClasspath"

    def test_skips_empty_parts(self):
        assert lower_camel_case_name(None, "apiElements") == "apiElements"
        assert lower_camel_case_name("", "main") == "main"

    def test_first_part_kept_as_given(self):
        """Names differing only in case stay distinct."""
        assert lower_camel_case_name("Jvm", "main") == "JvmMain"
        assert lower_camel_case_name("jvm", "main") == "jvmMain"
        assert lower_camel_case_name("Jvm", "sourcesJar") != lower_camel_case_name(
            "jvm", "sourcesJar"
        )

    def test_no_parts(self):
        assert lower_camel_case_name() == ""


class TestCapitalize:
    def test_capitalize(self):
        assert capitalize("kotlinMultiplatform") == "KotlinMultiplatform"
        assert capitalize("") == ""


class TestWarnOnce:
    def test_warning_shown_once(self, project, caplog):
        with caplog.at_level(logging.WARNING, logger="kmpp"):
            assert warn_once(project, "careful") is True
            assert warn_once(project, "careful") is False

        assert [r.getMessage() for r in caplog.records] == ["careful"]
        assert "careful" in project.shown_warnings
