# git_storage/config.py
"""
Library‑wide constants.
"""

# --------------------------------------------------------------------------- #
#  GitHub repository defaults
# --------------------------------------------------------------------------- #
DEFAULT_BRANCH = "main"

# Environment variable holding the personal access token (optional)
TOKEN_ENV_VAR = "GITHUB_TOKEN"

# --------------------------------------------------------------------------- #
#  Public download URLs
# --------------------------------------------------------------------------- #
RAW_CONTENT_HOST = "raw.githubusercontent.com"

# --------------------------------------------------------------------------- #
#  Content API
# --------------------------------------------------------------------------- #
# Only entries served with this encoding carry their bytes inline
CONTENT_ENCODING = "base64"

# Fields a directory listing fills in for every entry
LISTING_FIELDS = (
    "name",
    "path",
    "sha",
    "size",
    "type",
    "url",
    "html_url",
    "git_url",
    "download_url",
)
