"""
Error sanitization for upstream GitHub failures and local exceptions.

Nothing from an upstream response body ever reaches the client; callers
only see one of a few fixed messages.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SanitizedError:
    status: int
    message: str


class UpstreamError(Exception):
    """A fatal upstream call failed. Carries the already-sanitized error."""

    def __init__(self, error: SanitizedError):
        super().__init__(error.message)
        self.error = error


PERMISSION_DENIED = SanitizedError(403, "Insufficient permissions for this GitHub operation")
NOT_FOUND = SanitizedError(404, "Repository or resource not found")
CONFLICT = SanitizedError(409, "The resource already exists or is in a conflicting state")
INVALID_REQUEST = SanitizedError(400, "Invalid request parameters")
UPSTREAM_FAILURE = SanitizedError(502, "GitHub API error. Please try again later.")
INTERNAL_ERROR = SanitizedError(500, "An internal error occurred. Please try again later.")

_GITHUB_STATUS_MAP = {
    401: PERMISSION_DENIED,
    403: PERMISSION_DENIED,
    404: NOT_FOUND,
    409: CONFLICT,
    422: INVALID_REQUEST,
}


def sanitize_github_error(status, raw_body=None) -> SanitizedError:
    """Map an upstream status code to a safe outward error.

    `raw_body` is never read or returned.
    """
    return _GITHUB_STATUS_MAP.get(status, UPSTREAM_FAILURE)


def sanitize_general_error(error) -> SanitizedError:
    """Collapse any local exception (network, parsing, bugs) to a generic 500."""
    return INTERNAL_ERROR
