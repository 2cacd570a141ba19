"""
Response helpers - JSON bodies with CORS headers for the dashboard.
"""

from flask import jsonify

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}


def json_response(payload, status=200, headers=None):
    """Build a JSON response with CORS and any extra headers."""
    resp = jsonify(payload)
    resp.status_code = status
    resp.headers.update(CORS_HEADERS)
    if headers:
        resp.headers.update(headers)
    return resp


def error_response(message, status, details=None, headers=None):
    """Build an {"error": ...} response. `message` must already be safe to show."""
    payload = {"error": message}
    if details:
        payload["details"] = details
    return json_response(payload, status=status, headers=headers)


def preflight_response():
    """Empty 200 answer to a CORS preflight."""
    return "", 200, CORS_HEADERS
