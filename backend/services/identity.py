"""
Identity and profile lookups against the Supabase auth and REST APIs.

The dashboard's session token arrives in the Authorization header and is
forwarded as-is; this module never stores it.
"""

import requests

try:
    from ..config import SUPABASE_URL, SUPABASE_ANON_KEY, UPSTREAM_TIMEOUT
except ImportError:
    from config import SUPABASE_URL, SUPABASE_ANON_KEY, UPSTREAM_TIMEOUT


def _supabase_headers(authorization):
    return {
        "apikey": SUPABASE_ANON_KEY,
        "Authorization": authorization,
    }


def get_current_user(authorization):
    """Resolve the session behind `authorization` to a user id, or None."""
    if not authorization or not SUPABASE_URL:
        return None

    resp = requests.get(
        f"{SUPABASE_URL}/auth/v1/user",
        headers=_supabase_headers(authorization),
        timeout=UPSTREAM_TIMEOUT,
    )
    if not resp.ok:
        print(f"[AUTH] Session lookup rejected with status {resp.status_code}")
        return None
    return resp.json().get("id")


def lookup_profile(user_id, authorization):
    """Get the linked GitHub account for a user.

    Returns {"account_name": <github username>} or None when the profile is
    missing or has no GitHub username.
    """
    resp = requests.get(
        f"{SUPABASE_URL}/rest/v1/profiles",
        params={"id": f"eq.{user_id}", "select": "github_username"},
        headers=_supabase_headers(authorization),
        timeout=UPSTREAM_TIMEOUT,
    )
    if not resp.ok:
        print(f"[AUTH] Profile lookup for {user_id} failed with status {resp.status_code}")
        return None

    rows = resp.json()
    username = rows[0].get("github_username") if rows else None
    if not username:
        return None
    return {"account_name": username}
