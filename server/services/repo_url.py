"""
GitHub repository URL validation.

Only the shape of the URL is checked; nothing is fetched from GitHub.
"""

import re

from .errors import InvalidRepositoryUrl

# Optional scheme, optional www., github.com/<owner>/<repo>, optional trailing slash.
# Always applied with fullmatch: a bare $ would also accept a trailing newline.
GITHUB_REPO_URL_RE = re.compile(
    r"^(https?://)?(www\.)?github\.com/([a-zA-Z0-9-]+)/([a-zA-Z0-9_.-]+)(/)?$"
)

INVALID_URL_MESSAGE = "Please enter a valid GitHub repository URL."


def is_valid_github_url(url: str) -> bool:
    if not url:
        return False
    return GITHUB_REPO_URL_RE.fullmatch(url) is not None


def parse_repo_url(repo_url: str) -> tuple[str, str]:
    """Validate a GitHub repo URL. Returns (owner, repo_name)."""
    match = GITHUB_REPO_URL_RE.fullmatch(repo_url or "")
    if not match:
        raise InvalidRepositoryUrl(INVALID_URL_MESSAGE)

    return match.group(3), match.group(4)
