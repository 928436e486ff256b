# SPDX-License-Identifier: MIT
"""Tests for kmpp.core.features and build variables."""

import pytest

import kmpp
from kmpp.core.errors import ConfigureError
from kmpp.core.features import GRADLE_METADATA, FeaturePreviews


@pytest.fixture(autouse=True)
def _fresh_vars():
    kmpp._reset_vars()
    yield
    kmpp._reset_vars()


class TestFeaturePreviews:
    def test_defaults(self):
        previews = FeaturePreviews()
        assert previews.find(GRADLE_METADATA) == GRADLE_METADATA
        assert not previews.is_feature_enabled(GRADLE_METADATA)

    def test_enable(self):
        previews = FeaturePreviews(enabled=[GRADLE_METADATA])
        assert previews.is_feature_enabled(GRADLE_METADATA)

    def test_enable_unknown_feature(self):
        with pytest.raises(ConfigureError):
            FeaturePreviews().enable_feature("NOPE")

    def test_stable_feature_is_not_found(self):
        assert FeaturePreviews(active_features=()).find(GRADLE_METADATA) is None

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("KMPP_FEATURE_PREVIEWS", "GRADLE_METADATA")
        assert FeaturePreviews.from_environment().is_feature_enabled(GRADLE_METADATA)

    def test_from_environment_unset(self, monkeypatch):
        monkeypatch.delenv("KMPP_FEATURE_PREVIEWS", raising=False)
        monkeypatch.delenv("KMPP_VARS", raising=False)
        assert not FeaturePreviews.from_environment().is_feature_enabled(GRADLE_METADATA)


class TestGetVar:
    def test_vars_take_precedence(self, monkeypatch):
        monkeypatch.setenv("KMPP_VARS", '{"COLOR": "blue"}')
        monkeypatch.setenv("COLOR", "red")
        assert kmpp.get_var("COLOR") == "blue"

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.delenv("KMPP_VARS", raising=False)
        monkeypatch.setenv("COLOR", "red")
        assert kmpp.get_var("COLOR") == "red"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("KMPP_VARS", raising=False)
        monkeypatch.delenv("KMPP_UNSET_VARIABLE", raising=False)
        assert kmpp.get_var("KMPP_UNSET_VARIABLE", "x") == "x"

    def test_invalid_json_ignored(self, monkeypatch):
        monkeypatch.setenv("KMPP_VARS", "{not json")
        monkeypatch.setenv("COLOR", "red")
        assert kmpp.get_var("COLOR") == "red"
