"""
Services package initialization
"""

from .error_sanitizer import (
    SanitizedError,
    UpstreamError,
    sanitize_github_error,
    sanitize_general_error
)
from .rate_limiter import RateLimiter, RateLimitResult, rate_limiter
from .github_api import (
    github_request,
    list_owned_repos,
    probe_pages,
    enable_pages,
    PagesEnabled,
    PagesDisabled,
    ProbeError
)
from .pages_scanner import scan_pages_sites, site_summary, ScanResult
from .identity import get_current_user, lookup_profile

__all__ = [
    'SanitizedError',
    'UpstreamError',
    'sanitize_github_error',
    'sanitize_general_error',
    'RateLimiter',
    'RateLimitResult',
    'rate_limiter',
    'github_request',
    'list_owned_repos',
    'probe_pages',
    'enable_pages',
    'PagesEnabled',
    'PagesDisabled',
    'ProbeError',
    'scan_pages_sites',
    'site_summary',
    'ScanResult',
    'get_current_user',
    'lookup_profile'
]
