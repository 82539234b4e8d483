"""
Presentation state for the analysis page.

AnalysisView holds what one page shows: the submitted URL, the request
phase, and either the result or an error message. The templates render it;
the inline page script mirrors the same phases in the browser.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from schemas import AnalysisResult, OverallStatus
from services.errors import GuardianError
from services.repo_url import INVALID_URL_MESSAGE, is_valid_github_url

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during the analysis."

Analyzer = Callable[[str], Awaitable[AnalysisResult]]


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AnalysisView:
    """
    Per-request state machine:

        idle -> loading -> success
                        -> error

    Validation failures go straight to error without calling the analyzer.

    Each route renders a fresh view for one submission. The in-flight guard
    and edit() mirror what the page script does in the browser (disabled
    button, error cleared on input) so both sides share one definition.
    """

    def __init__(self, repo_url: str = ""):
        self.repo_url = repo_url
        self.phase = Phase.IDLE
        self.result: AnalysisResult | None = None
        self.error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING

    @property
    def submit_disabled(self) -> bool:
        return self.is_loading

    def edit(self, repo_url: str) -> None:
        """Update the URL input; a displayed error is cleared."""
        self.repo_url = repo_url
        if self.error:
            self.error = None
            self.phase = Phase.IDLE

    async def submit(self, repo_url: str, analyze: Analyzer) -> None:
        if self.is_loading:
            logger.debug("Submit ignored: an analysis is already in flight")
            return

        self.repo_url = repo_url
        if not repo_url or not is_valid_github_url(repo_url):
            self.error = INVALID_URL_MESSAGE
            self.phase = Phase.ERROR
            return

        self.phase = Phase.LOADING
        self.error = None
        self.result = None

        try:
            result = await analyze(repo_url)
        except GuardianError as e:
            logger.warning(f"Analysis failed for {repo_url}: {e.message}")
            self.error = e.message
            self.phase = Phase.ERROR
        except Exception as e:
            logger.exception(f"Analysis request failed for {repo_url}")
            self.error = str(e) or UNKNOWN_ERROR_MESSAGE
            self.phase = Phase.ERROR
        else:
            self.result = result
            self.phase = Phase.SUCCESS


# =============================================================================
# LOADING INDICATOR
# =============================================================================

LOADING_MESSAGES = [
    "Initializing secure connection...",
    "Fetching repository metadata...",
    "Building hypothetical dependency tree...",
    "Checking for known vulnerabilities...",
    "Cross-referencing with Sep 2025 attack signatures...",
    "Analyzing code patterns for anomalies...",
    "Finalizing security report...",
]

LOADING_INTERVAL_MS = 1800


@dataclass(frozen=True)
class LoadingIndicator:
    """Canned status lines rotated on a timer, independent of real progress."""
    messages: tuple[str, ...] = tuple(LOADING_MESSAGES)
    interval_ms: int = LOADING_INTERVAL_MS

    def message_at(self, tick: int) -> str:
        return self.messages[tick % len(self.messages)]


# =============================================================================
# RESULT PANELS
# =============================================================================

@dataclass(frozen=True)
class StatusBadge:
    label: str
    icon: str
    tone: str  # CSS modifier: "secure", "warning", "vulnerable"


STATUS_BADGES = {
    OverallStatus.SECURE: StatusBadge(label="Secure", icon="\U0001F6E1", tone="secure"),
    OverallStatus.WARNING: StatusBadge(label="Warning", icon="⚠", tone="warning"),
    OverallStatus.VULNERABLE: StatusBadge(label="Vulnerable", icon="☠", tone="vulnerable"),
}


def status_badge(status: OverallStatus) -> StatusBadge:
    return STATUS_BADGES[status]


def score_bar_width(score: int) -> str:
    """CSS width for the score bar; the width in percent equals the score."""
    return f"{score}%"
