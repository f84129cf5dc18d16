"""Tests for the browserslist adapter and browser list parsing."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from browsergate.browserslist import BrowserslistQueryEngine, QueryEngineError, parse_browsers_list
from browsergate.versioning.models import BrowserTarget


class TestParseBrowsersList:
    """Turning browserslist tokens into targets."""

    def test_plain_tokens_keep_version(self):
        assert parse_browsers_list(["chrome 91", "firefox 89"]) == [
            BrowserTarget("chrome", "91"),
            BrowserTarget("firefox", "89"),
        ]

    def test_aliases_are_canonicalized(self):
        assert parse_browsers_list(["ie 11", "and_chr 91"]) == [
            BrowserTarget("Explorer", "11"),
            BrowserTarget("Chrome", "91"),
        ]

    def test_ranges_are_expanded(self):
        assert parse_browsers_list(["ios_saf 13.0-13.2"]) == [
            BrowserTarget("iOS", "13.0.0"),
            BrowserTarget("iOS", "13.1.0"),
            BrowserTarget("iOS", "13.2.0"),
        ]

    def test_technology_preview_dropped(self):
        assert parse_browsers_list(["safari TP", "Chrome TP", "safari 14.1"]) == [
            BrowserTarget("safari", "14.1"),
        ]

    def test_duplicates_and_order_preserved(self):
        targets = parse_browsers_list(["edge 91", "chrome 90", "edge 91"])
        assert [t.family for t in targets] == ["edge", "chrome", "edge"]

    def test_empty(self):
        assert parse_browsers_list([]) == []


def _completed(stdout="", stderr="", returncode=0):
    return Mock(stdout=stdout, stderr=stderr, returncode=returncode)


class TestBrowserslistQueryEngine:
    """Invocation of the browserslist CLI."""

    def test_build_args_joins_queries(self):
        engine = BrowserslistQueryEngine(command="browserslist")
        assert engine.build_args(["last 2 versions", "not dead"], env="production") == [
            "browserslist",
            "--env=production",
            "last 2 versions, not dead",
        ]

    def test_build_args_without_queries_uses_project_config(self):
        engine = BrowserslistQueryEngine(command="npx --yes browserslist")
        assert engine.build_args(None) == ["npx", "--yes", "browserslist"]

    def test_command_from_environment(self, monkeypatch):
        monkeypatch.setenv("BROWSERGATE_BROWSERSLIST_CMD", "/opt/bin/browserslist")
        assert BrowserslistQueryEngine().command == "/opt/bin/browserslist"

    @patch("browsergate.browserslist.subprocess.run")
    def test_returns_output_lines(self, mock_run, tmp_path):
        mock_run.return_value = _completed(stdout="chrome 91\nchrome 90\n\nios_saf 14.0-14.4\n")
        engine = BrowserslistQueryEngine(command="browserslist")
        assert engine(["last 2 versions"], path=str(tmp_path)) == ["chrome 91", "chrome 90", "ios_saf 14.0-14.4"]
        _, kwargs = mock_run.call_args
        assert kwargs["cwd"] == str(tmp_path)
        assert kwargs["check"] is False

    @patch("browsergate.browserslist.subprocess.run")
    def test_failure_raises_with_stderr(self, mock_run):
        mock_run.return_value = _completed(stderr="Unknown browser query `lats 2`\n", returncode=1)
        with pytest.raises(QueryEngineError, match="Unknown browser query"):
            BrowserslistQueryEngine(command="browserslist")(["lats 2"])

    @patch("browsergate.browserslist.subprocess.run", side_effect=FileNotFoundError())
    def test_missing_command(self, _mock_run):
        with pytest.raises(QueryEngineError, match="not found"):
            BrowserslistQueryEngine(command="browserslist")(None)

    @patch("browsergate.browserslist.subprocess.run", side_effect=subprocess.TimeoutExpired("browserslist", 1))
    def test_timeout(self, _mock_run):
        with pytest.raises(QueryEngineError, match="timed out"):
            BrowserslistQueryEngine(command="browserslist", timeout=1)(None)


class TestBrowserslistQueryEngineEdgeCases:
    """Inputs that never reach, or fail before, the browserslist process."""

    @patch("browsergate.browserslist.subprocess.run")
    def test_empty_query_list_selects_nothing(self, mock_run):
        assert BrowserslistQueryEngine(command="browserslist")([]) == []
        mock_run.assert_not_called()

    @patch("browsergate.browserslist.subprocess.run")
    def test_missing_path(self, mock_run, tmp_path):
        missing = str(tmp_path / "nonexistent")
        with pytest.raises(QueryEngineError, match="path not found"):
            BrowserslistQueryEngine(command="browserslist")(["last 1 chrome version"], path=missing)
        mock_run.assert_not_called()

    @patch("browsergate.browserslist.subprocess.run", side_effect=PermissionError("Permission denied"))
    def test_permission_error(self, _mock_run):
        with pytest.raises(QueryEngineError, match="unable to run browserslist"):
            BrowserslistQueryEngine(command="browserslist")(None)
