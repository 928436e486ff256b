# SPDX-License-Identifier: MIT
"""Tests for kmpp.publish.component."""

from kmpp.model.target import PLATFORM_TYPE_ATTRIBUTE
from kmpp.publish.component import KotlinSoftwareComponent


class TestKotlinVariant:
    def test_usages(self, kotlin):
        jvm = kotlin.targets.from_preset("jvm", "jvm")
        usages = jvm.component.usages

        assert [(u.name, u.usage) for u in usages] == [
            ("jvmApiElements", "kotlin-api"),
            ("jvmRuntimeElements", "kotlin-runtime"),
        ]

    def test_artifacts_are_deduplicated(self, kotlin):
        jvm = kotlin.targets.from_preset("jvm", "jvm")
        assert [a.file.name for a in jvm.component.artifacts] == ["lib-jvm-1.0.jar"]

    def test_usage_attributes_after_evaluation(self, kotlin, project):
        jvm = kotlin.targets.from_preset("jvm", "jvm")
        project.evaluate()

        api = jvm.component.usages[0]
        assert api.attributes == {PLATFORM_TYPE_ATTRIBUTE.name: jvm.platform_type}


class TestKotlinSoftwareComponent:
    def test_variants_exclude_metadata_and_are_live(self, kotlin):
        component = KotlinSoftwareComponent("kotlin", kotlin.targets)
        assert component.variants == []

        jvm = kotlin.targets.from_preset("jvm", "jvm")
        js = kotlin.targets.from_preset("js", "js")

        assert component.variants == [jvm.component, js.component]

    def test_usages_come_from_metadata_target(self, kotlin):
        component = KotlinSoftwareComponent("kotlin", kotlin.targets)
        assert [u.name for u in component.usages] == [
            "metadataApiElements",
            "metadataRuntimeElements",
        ]
