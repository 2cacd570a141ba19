"""
Health routes - healthcheck endpoint.
"""

from flask import jsonify

from . import bp

try:
    from ..services import rate_limiter
    from ..config import API_VERSION
except ImportError:
    from services import rate_limiter
    from config import API_VERSION


@bp.route("/api/healthcheck", methods=["GET"])
def api_healthcheck():
    """Health check endpoint for monitoring."""
    return jsonify({
        "success": True,
        "status": "healthy",
        "api_version": API_VERSION,
        "rate_limiter": rate_limiter.stats()
    })
