"""
Helpers package - shared utility functions for route handlers.
"""

from .responses import CORS_HEADERS, json_response, error_response, preflight_response
from .validation import (
    ListPagesSitesRequest,
    GetPagesInfoRequest,
    EnablePagesRequest,
    validate_body
)

__all__ = [
    'CORS_HEADERS',
    'json_response',
    'error_response',
    'preflight_response',
    'ListPagesSitesRequest',
    'GetPagesInfoRequest',
    'EnablePagesRequest',
    'validate_body'
]
