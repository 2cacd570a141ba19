"""Tests for the fleet scan — fan-out, failure isolation and ordering."""

import threading
import time
from unittest.mock import patch

import pytest

from services.error_sanitizer import SanitizedError, UpstreamError
from services.github_api import PagesEnabled, PagesDisabled, ProbeError
from services.pages_scanner import scan_pages_sites, site_summary


def enabled(branch="gh-pages", path="/"):
    return PagesEnabled(
        url="https://alice.github.io/site/",
        build_status="built",
        source_branch=branch,
        source_path=path,
        last_built_at="2026-10-01T12:00:00Z",
    )


class TestSiteSummary:

    def test_wire_shape(self):
        summary = site_summary("alice", "blog", enabled())

        assert summary == {
            "repository": "blog",
            "owner": "alice",
            "branch": "gh-pages",
            "url": "https://alice.github.io/site/",
            "status": "built",
            "source": {"branch": "gh-pages", "path": "/"},
            "updated_at": "2026-10-01T12:00:00Z",
        }


class TestScanPagesSites:

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_keeps_enabled_drops_disabled_and_failed(self, mock_list, mock_probe):
        mock_list.return_value = [{"name": "blog"}, {"name": "tools"}, {"name": "broken"}]
        mock_probe.side_effect = lambda owner, name, token: {
            "blog": enabled(),
            "tools": PagesDisabled(),
            "broken": ProbeError(SanitizedError(502, "GitHub API error. Please try again later.")),
        }[name]

        result = scan_pages_sites("alice", "tok")

        assert [s["repository"] for s in result.sites] == ["blog"]
        assert result.failed == ["broken"]

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_probe_called_with_account_and_token(self, mock_list, mock_probe):
        mock_list.return_value = [{"name": "blog"}]
        mock_probe.return_value = PagesDisabled()

        scan_pages_sites("alice", "tok")

        mock_probe.assert_called_once_with("alice", "blog", "tok")

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_results_keep_listing_order(self, mock_list, mock_probe):
        names = ["zeta", "alpha", "mid", "beta"]
        mock_list.return_value = [{"name": n} for n in names]

        def slow_first(owner, name, token):
            # Earlier repos finish last
            time.sleep(0.01 * (len(names) - names.index(name)))
            return enabled()

        mock_probe.side_effect = slow_first

        result = scan_pages_sites("alice", "tok", max_workers=4)

        assert [s["repository"] for s in result.sites] == names

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_unexpected_probe_exception_is_isolated(self, mock_list, mock_probe):
        mock_list.return_value = [{"name": "a"}, {"name": "b"}]

        def probe(owner, name, token):
            if name == "a":
                raise RuntimeError("boom")
            return enabled()

        mock_probe.side_effect = probe

        result = scan_pages_sites("alice", "tok")

        assert [s["repository"] for s in result.sites] == ["b"]
        assert result.failed == ["a"]

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_listing_failure_is_fatal_and_skips_probes(self, mock_list, mock_probe):
        mock_list.side_effect = UpstreamError(SanitizedError(403, "Insufficient permissions for this GitHub operation"))

        with pytest.raises(UpstreamError):
            scan_pages_sites("alice", "tok")

        mock_probe.assert_not_called()

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos", return_value=[])
    def test_no_repositories(self, mock_list, mock_probe):
        result = scan_pages_sites("alice", "tok")

        assert result.sites == []
        mock_probe.assert_not_called()

    @patch("services.pages_scanner.probe_pages")
    @patch("services.pages_scanner.list_owned_repos")
    def test_concurrency_is_bounded(self, mock_list, mock_probe):
        mock_list.return_value = [{"name": f"repo-{i}"} for i in range(12)]
        lock = threading.Lock()
        state = {"active": 0, "peak": 0}

        def probe(owner, name, token):
            with lock:
                state["active"] += 1
                state["peak"] = max(state["peak"], state["active"])
            time.sleep(0.02)
            with lock:
                state["active"] -= 1
            return PagesDisabled()

        mock_probe.side_effect = probe

        scan_pages_sites("alice", "tok", max_workers=3)

        assert state["peak"] <= 3
        assert mock_probe.call_count == 12
