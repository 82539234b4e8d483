"""
Live smoke test against the real Gemini API.

Skipped unless GEMINI_API_KEY is set and RUN_LIVE_TESTS=1:

    RUN_LIVE_TESTS=1 pytest server/test_live.py
"""

import asyncio
import os
import sys

import pytest

from schemas import OverallStatus
from services.gemini import analyze_repository

pytestmark = pytest.mark.skipif(
    not (os.getenv("GEMINI_API_KEY") and os.getenv("RUN_LIVE_TESTS") == "1"),
    reason="live Gemini test (set GEMINI_API_KEY and RUN_LIVE_TESTS=1)",
)


def test_live(repo_url="https://github.com/expressjs/express"):
    print(f"Requesting live analysis for {repo_url}...")

    result = asyncio.run(analyze_repository(repo_url))

    print(result.model_dump_json(by_alias=True, indent=2))
    assert result.overall_status in set(OverallStatus)
    assert 0 <= result.general_analysis.score <= 100


if __name__ == "__main__":
    # Allow passing a repo via command line: python test_live.py https://github.com/user/repo
    target = sys.argv[1] if len(sys.argv) > 1 else "https://github.com/expressjs/express"
    test_live(target)
