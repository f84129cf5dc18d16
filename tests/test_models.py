"""Tests for option and result models."""

import dataclasses

import pytest

from browsergate.versioning.models import ComparisonOptions, ResolvedBrowser


class TestComparisonOptions:
    """Defaults and mapping construction."""

    def test_defaults(self):
        opts = ComparisonOptions()
        assert opts.ignore_patch is True
        assert opts.ignore_minor is False
        assert opts.allow_higher_versions is False
        assert opts.browsers is None

    def test_from_mapping_accepts_camel_case(self):
        opts = ComparisonOptions.from_mapping({"ignoreMinor": True, "ignorePatch": False, "env": "prod"})
        assert opts.ignore_minor is True
        assert opts.ignore_patch is False
        assert opts.env == "prod"

    def test_from_mapping_ignores_unknown_keys(self):
        opts = ComparisonOptions.from_mapping({"mobileToDesktop": True, "path": "/app"})
        assert opts.path == "/app"

    def test_single_browser_query_becomes_list(self):
        assert ComparisonOptions.from_mapping({"browsers": "defaults"}).browsers == ["defaults"]

    def test_from_none(self):
        assert ComparisonOptions.from_mapping(None) == ComparisonOptions()


def test_resolved_browser_is_immutable():
    resolved = ResolvedBrowser("Chrome", "91.0.0")
    with pytest.raises(dataclasses.FrozenInstanceError):
        resolved.family = "Firefox"  # type: ignore[misc]
