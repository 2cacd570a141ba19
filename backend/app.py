"""
RepoPush Pages API - backend for the GitHub Pages dashboard.

Proxies GitHub's Pages endpoints for the signed-in dashboard user, with
per-user rate limiting and sanitized upstream errors.
"""

import os

from flask import Flask, jsonify

# Import the blueprint with all routes registered
try:
    from .routes import bp
    from .helpers import CORS_HEADERS
except ImportError:
    from routes import bp
    from helpers import CORS_HEADERS

# Mirrors the edge-function path the dashboard already calls.
# Set URL_PREFIX="" for local development without prefix
URL_PREFIX = os.environ.get("URL_PREFIX", "/functions/v1")

app = Flask(__name__)


# ============ CORS Support ============
@app.after_request
def add_cors_headers(response):
    """Add permissive CORS headers; the dashboard is served from another origin."""
    for header, value in CORS_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


@app.route('/')
def api_root():
    """API info endpoint."""
    return jsonify({"message": "RepoPush Pages API", "docs": f"{URL_PREFIX}/api/healthcheck"})


# Register blueprint with URL prefix
app.register_blueprint(bp, url_prefix=URL_PREFIX)


if __name__ == "__main__":
    # Use environment variable to control debug mode (defaults to False for security)
    # Set FLASK_ENV=development to enable debug mode in local development
    debug_mode = os.environ.get("FLASK_ENV") == "development"
    app.run(debug=debug_mode, port=5000)
