"""
GitHub API Service - REST calls made on behalf of the dashboard user.

Every call is authenticated with the caller-supplied token and bounded by
UPSTREAM_TIMEOUT. The token is never stored.
"""

from dataclasses import dataclass

import requests

from .error_sanitizer import SanitizedError, UpstreamError, sanitize_github_error, sanitize_general_error

try:
    from ..config import (
        GITHUB_API_URL, GITHUB_USER_AGENT, GITHUB_API_VERSION,
        UPSTREAM_TIMEOUT, REPOS_PER_PAGE, MAX_REPO_PAGES,
    )
except ImportError:
    from config import (
        GITHUB_API_URL, GITHUB_USER_AGENT, GITHUB_API_VERSION,
        UPSTREAM_TIMEOUT, REPOS_PER_PAGE, MAX_REPO_PAGES,
    )


# ============ Probe results ============

@dataclass(frozen=True)
class PagesDisabled:
    """No Pages site is configured for the repository (upstream 404)."""


@dataclass(frozen=True)
class PagesEnabled:
    url: str
    build_status: str  # opaque upstream value: "built", "building", "errored", ...
    source_branch: str
    source_path: str
    last_built_at: str | None = None


@dataclass(frozen=True)
class ProbeError:
    error: SanitizedError


# ============ HTTP ============

def github_request(method, path, token, json=None, params=None, headers=None):
    """Issue one request to the GitHub REST API. Returns the raw response."""
    request_headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": GITHUB_USER_AGENT,
    }
    if headers:
        request_headers.update(headers)

    url = path if path.startswith("http") else f"{GITHUB_API_URL}{path}"
    return requests.request(
        method,
        url,
        headers=request_headers,
        json=json,
        params=params,
        timeout=UPSTREAM_TIMEOUT,
    )


def list_owned_repos(token):
    """List every repository the token's user owns.

    Follows Link pagination up to MAX_REPO_PAGES. Raises UpstreamError if
    any page fails; transport errors propagate to the caller.
    """
    repos = []
    url = "/user/repos"
    params = {"affiliation": "owner", "per_page": REPOS_PER_PAGE}

    for _ in range(MAX_REPO_PAGES):
        resp = github_request("GET", url, token, params=params)
        if not resp.ok:
            print(f"[PAGES] Repository listing failed with status {resp.status_code}")
            raise UpstreamError(sanitize_github_error(resp.status_code, resp.text))

        repos.extend(resp.json())

        next_link = resp.links.get("next", {}).get("url")
        if not next_link:
            break
        # The next link already carries the query string
        url, params = next_link, None
    else:
        print(f"[PAGES] Repository listing stopped at {MAX_REPO_PAGES} pages; "
              f"{len(repos)} repos scanned, more remain")

    return repos


def probe_pages(owner, repo, token):
    """Read the Pages configuration of one repository.

    Returns PagesEnabled, PagesDisabled (upstream 404) or ProbeError.
    Never raises, so a fan-out can keep going past a bad repository.
    """
    try:
        resp = github_request("GET", f"/repos/{owner}/{repo}/pages", token)

        if resp.status_code == 404:
            return PagesDisabled()

        if not resp.ok:
            return ProbeError(sanitize_github_error(resp.status_code, resp.text))

        info = resp.json()
        source = info.get("source") or {}
        return PagesEnabled(
            url=info.get("html_url") or f"https://{owner}.github.io/{repo}",
            build_status=info.get("status") or "unknown",
            source_branch=source.get("branch") or "unknown",
            source_path=source.get("path") or "/",
            last_built_at=info.get("built_at") or info.get("updated_at"),
        )
    except (requests.RequestException, ValueError, AttributeError) as e:
        print(f"[PAGES] Probe for {owner}/{repo} failed: {type(e).__name__}")
        return ProbeError(sanitize_general_error(e))


def enable_pages(owner, repo, branch, path, token):
    """Enable Pages for a repository from `branch` and `path`.

    Returns the upstream Pages object. Raises UpstreamError on rejection.
    """
    resp = github_request(
        "POST",
        f"/repos/{owner}/{repo}/pages",
        token,
        json={"source": {"branch": branch, "path": path}},
        headers={
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        },
    )
    if not resp.ok:
        print(f"[PAGES] Enabling Pages for {owner}/{repo} failed with status {resp.status_code}")
        raise UpstreamError(sanitize_github_error(resp.status_code, resp.text))
    return resp.json()
