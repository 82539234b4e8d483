"""
GitHub Guardian services

- repo_url: GitHub repository URL validation
- prompts: prompt template for the security analysis
- gemini: Gemini client that returns a validated AnalysisResult
"""

from .errors import AnalysisParseError, ConfigurationError, GuardianError, InvalidRepositoryUrl
from .gemini import GeminiAnalysisClient, analyze_repository
from .prompts import build_prompt
from .repo_url import is_valid_github_url, parse_repo_url

__all__ = [
    "AnalysisParseError",
    "ConfigurationError",
    "GuardianError",
    "InvalidRepositoryUrl",
    "GeminiAnalysisClient",
    "analyze_repository",
    "build_prompt",
    "is_valid_github_url",
    "parse_repo_url",
]
