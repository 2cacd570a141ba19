"""Pytest configuration — add backend/ to sys.path so tests can import modules."""

import sys
import os
from unittest.mock import MagicMock

# Add the backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def make_response(status_code, payload=None, links=None, text=""):
    """Build a stand-in for a requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    resp.json.return_value = payload
    resp.text = text
    resp.links = links or {}
    return resp
