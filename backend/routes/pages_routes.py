"""
Pages routes - list live Pages sites, read and enable Pages for one repo.

Every endpoint runs the same gate before touching GitHub:
validate body -> authenticate -> rate limit -> resolve GitHub account
-> ownership check (single-repo endpoints).
"""

from flask import request

from . import bp

try:
    from ..services import (
        rate_limiter,
        get_current_user,
        lookup_profile,
        scan_pages_sites,
        probe_pages,
        enable_pages,
        PagesDisabled,
        ProbeError,
        UpstreamError,
        sanitize_general_error,
    )
    from ..helpers import (
        json_response,
        error_response,
        preflight_response,
        validate_body,
        ListPagesSitesRequest,
        GetPagesInfoRequest,
        EnablePagesRequest,
    )
except ImportError:
    from services import (
        rate_limiter,
        get_current_user,
        lookup_profile,
        scan_pages_sites,
        probe_pages,
        enable_pages,
        PagesDisabled,
        ProbeError,
        UpstreamError,
        sanitize_general_error,
    )
    from helpers import (
        json_response,
        error_response,
        preflight_response,
        validate_body,
        ListPagesSitesRequest,
        GetPagesInfoRequest,
        EnablePagesRequest,
    )


class _Rejected(Exception):
    """Short-circuits a handler with a ready-made response."""

    def __init__(self, response):
        super().__init__()
        self.response = response


def _gate(model, check_owner):
    """Run the shared request gate. Returns (validated body, account name)."""
    data, details = validate_body(model, request.get_json(silent=True))
    if details:
        raise _Rejected(error_response("Invalid input", 400, details=details))

    authorization = request.headers.get("Authorization")
    user_id = get_current_user(authorization)
    if not user_id:
        raise _Rejected(error_response("Unauthorized", 401))

    limit = rate_limiter.check(user_id)
    if not limit.allowed:
        raise _Rejected(error_response(
            "Rate limit exceeded. Please try again later.", 429,
            headers=rate_limiter.headers(limit),
        ))

    profile = lookup_profile(user_id, authorization)
    if not profile or not profile.get("account_name"):
        print(f"[AUTH] No GitHub profile linked for user {user_id}")
        raise _Rejected(error_response("GitHub profile not found", 403))

    account = profile["account_name"]
    if check_owner and data.owner != account:
        print(f"[AUTH] User {user_id} tried to act on {data.owner}/{data.repo} as {account}")
        raise _Rejected(error_response("Unauthorized: can only access your own repositories", 403))

    return data, account


def _handle(endpoint, fn):
    """Run a handler body, mapping every failure to exactly one response."""
    try:
        return fn()
    except _Rejected as rejected:
        return rejected.response
    except UpstreamError as e:
        return error_response(e.error.message, e.error.status)
    except Exception as e:
        print(f"[PAGES] Error in {endpoint}: {type(e).__name__}")
        sanitized = sanitize_general_error(e)
        return error_response(sanitized.message, sanitized.status)


@bp.route("/list-pages-sites", methods=["POST", "OPTIONS"])
def api_list_pages_sites():
    """List every repository of the caller's account with Pages enabled."""
    if request.method == "OPTIONS":
        return preflight_response()

    def run():
        data, account = _gate(ListPagesSitesRequest, check_owner=False)
        print(f"[PAGES] Fetching live GitHub Pages sites for user: {account}")
        result = scan_pages_sites(account, data.provider_token)
        print(f"[PAGES] Total live Pages sites found: {len(result.sites)}")
        return json_response({"sites": result.sites})

    return _handle("list-pages-sites", run)


@bp.route("/get-pages-info", methods=["POST", "OPTIONS"])
def api_get_pages_info():
    """Get the Pages configuration of one repository owned by the caller."""
    if request.method == "OPTIONS":
        return preflight_response()

    def run():
        data, _ = _gate(GetPagesInfoRequest, check_owner=True)
        print(f"[PAGES] Getting GitHub Pages info for: {data.owner}/{data.repo}")
        status = probe_pages(data.owner, data.repo, data.provider_token)

        if isinstance(status, PagesDisabled):
            return json_response({"enabled": False})
        if isinstance(status, ProbeError):
            return error_response(status.error.message, status.error.status)

        return json_response({
            "enabled": True,
            "url": status.url,
            "status": status.build_status,
            "source": {"branch": status.source_branch, "path": status.source_path},
        })

    return _handle("get-pages-info", run)


@bp.route("/enable-github-pages", methods=["POST", "OPTIONS"])
def api_enable_github_pages():
    """Enable Pages on one repository owned by the caller."""
    if request.method == "OPTIONS":
        return preflight_response()

    def run():
        data, _ = _gate(EnablePagesRequest, check_owner=True)
        print(f"[PAGES] Enabling GitHub Pages for: {data.owner}/{data.repo} "
              f"from branch: {data.branch}, path: {data.path}")
        info = enable_pages(data.owner, data.repo, data.branch, data.path, data.provider_token)
        return json_response({
            "success": True,
            "url": info.get("html_url"),
            "status": info.get("status"),
            "message": "GitHub Pages has been enabled successfully!",
        })

    return _handle("enable-github-pages", run)
