"""
RepoPush Pages API Configuration Constants
"""

import os

# GitHub API
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_USER_AGENT = "RepoPush"
GITHUB_API_VERSION = "2022-11-28"

# Upstream limits
UPSTREAM_TIMEOUT = int(os.environ.get("UPSTREAM_TIMEOUT", "10"))  # seconds per call
MAX_CONCURRENT_PROBES = int(os.environ.get("MAX_CONCURRENT_PROBES", "10"))
REPOS_PER_PAGE = 100
MAX_REPO_PAGES = int(os.environ.get("MAX_REPO_PAGES", "10"))

# Rate limiting (per user, in-memory)
RATE_LIMIT_MAX_REQUESTS = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "100"))
RATE_LIMIT_WINDOW_SECONDS = int(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", "60"))
RATE_LIMIT_SWEEP_INTERVAL = 60  # seconds between opportunistic cleanups

# Identity / profile backend
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

API_VERSION = "1.0.0"
