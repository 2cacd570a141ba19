"""
Pages Scanner - finds every live Pages site among a user's repositories.

Lists the owner's repositories once, probes each one in parallel and keeps
only the enabled sites. A failing probe is logged and dropped; it never
fails the scan. A failing listing does.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from .error_sanitizer import sanitize_general_error
from .github_api import list_owned_repos, probe_pages, PagesEnabled, PagesDisabled, ProbeError

try:
    from ..config import MAX_CONCURRENT_PROBES
except ImportError:
    from config import MAX_CONCURRENT_PROBES


@dataclass
class ScanResult:
    sites: list = field(default_factory=list)
    failed: list = field(default_factory=list)  # repo names whose probe failed


def site_summary(owner, repo_name, status: PagesEnabled) -> dict:
    """Shape an enabled probe result into the wire format used by the dashboard."""
    return {
        "repository": repo_name,
        "owner": owner,
        "branch": status.source_branch,
        "url": status.url,
        "status": status.build_status,
        "source": {
            "branch": status.source_branch,
            "path": status.source_path,
        },
        "updated_at": status.last_built_at,
    }


def scan_pages_sites(account, token, max_workers=MAX_CONCURRENT_PROBES) -> ScanResult:
    """Return the enabled Pages sites owned by `account`, in listing order."""
    start = time.time()
    repos = list_owned_repos(token)
    print(f"[PAGES] Found {len(repos)} repositories for {account}")

    names = [repo["name"] for repo in repos]
    result = ScanResult()
    if not names:
        return result

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(probe_pages, account, name, token) for name in names]

        for name, future in zip(names, futures):
            try:
                status = future.result()
            except Exception as e:
                status = ProbeError(sanitize_general_error(e))
                print(f"[PAGES] Probe for {name} raised {type(e).__name__}")

            if isinstance(status, PagesDisabled):
                continue
            if isinstance(status, ProbeError):
                print(f"[PAGES] Skipping {name}: probe failed ({status.error.status})")
                result.failed.append(name)
                continue

            result.sites.append(site_summary(account, name, status))
            print(f"[PAGES] Found active Pages for: {name}")

    print(f"[PERF] Scanned {len(names)} repos in {time.time() - start:.2f}s "
          f"({len(result.sites)} live, {len(result.failed)} failed)")
    return result
