"""Module holding constants used across ghmirror."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "ghmirror/0.1"
PER_PAGE = 100  # GitHub's maximum page size
HTTP_TIMEOUT_SEC = 30
BARE_SUFFIX = ".git"
DESCRIPTION_FILE = "description"
