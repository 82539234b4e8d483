"""
Gemini client for repository security analysis.

One request per analysis: the prompt plus a declared response schema, so the
model answers with JSON text that is then validated into an AnalysisResult.
No retries and no partial results; provider errors propagate unchanged.
"""

import logging
import re

from google import genai
from google.genai import types
from pydantic import ValidationError

from config import DEFAULT_MODEL, Settings, get_settings
from schemas import AnalysisResult
from .errors import AnalysisParseError, ConfigurationError
from .prompts import build_prompt

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "The GEMINI_API_KEY environment variable is not set."
PARSE_ERROR_MESSAGE = "Could not understand the analysis result. Please try again."

# Opening fence line (```json, ```JSON, ```), body, closing fence line
FENCED_BLOCK_RE = re.compile(r"```[A-Za-z]*[ \t]*\n(.*?)\n?[ \t]*```", re.DOTALL)


# =============================================================================
# RESPONSE SCHEMA
# =============================================================================

ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "overallStatus": types.Schema(
            type=types.Type.STRING,
            description="A single-word status: 'SECURE', 'WARNING' or 'VULNERABLE'.",
            enum=["SECURE", "WARNING", "VULNERABLE"],
        ),
        "summary": types.Schema(
            type=types.Type.STRING,
            description="A one-paragraph summary of the security analysis.",
        ),
        "generalAnalysis": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "score": types.Schema(
                    type=types.Type.INTEGER,
                    description="A score from 0 to 100, where 100 is the most secure.",
                ),
                "findings": types.Schema(
                    type=types.Type.ARRAY,
                    description="A list of 3 to 5 potential general vulnerabilities or security good practices observed.",
                    items=types.Schema(type=types.Type.STRING),
                ),
            },
        ),
        "supplyChainAttackAnalysis": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "vulnerable": types.Schema(
                    type=types.Type.BOOLEAN,
                    description="True if the repository is likely affected by the September 2025 supply-chain attack, otherwise false.",
                ),
                "details": types.Schema(
                    type=types.Type.STRING,
                    description="A detailed explanation of the findings related to the September 2025 attack.",
                ),
                "affectedPackages": types.Schema(
                    type=types.Type.ARRAY,
                    description="A list of potentially compromised packages and their versions found in the hypothetical dependency tree.",
                    items=types.Schema(
                        type=types.Type.OBJECT,
                        properties={
                            "name": types.Schema(type=types.Type.STRING),
                            "version": types.Schema(type=types.Type.STRING),
                            "reason": types.Schema(type=types.Type.STRING),
                        },
                    ),
                ),
            },
        ),
    },
    required=["overallStatus", "summary", "generalAnalysis", "supplyChainAttackAnalysis"],
)


# =============================================================================
# PARSING
# =============================================================================

def parse_analysis_text(text: str | None) -> AnalysisResult:
    """Parse the provider's JSON text into an AnalysisResult."""
    json_text = (text or "").strip()
    # Handle a markdown code block wrapped around the whole answer
    fenced = FENCED_BLOCK_RE.fullmatch(json_text)
    if fenced:
        json_text = fenced.group(1).strip()

    try:
        return AnalysisResult.model_validate_json(json_text)
    except ValidationError as e:
        logger.error(f"Failed to parse Gemini response: {json_text!r} ({e.error_count()} errors)")
        raise AnalysisParseError(PARSE_ERROR_MESSAGE, raw_text=json_text) from e


# =============================================================================
# CLIENT
# =============================================================================

class GeminiAnalysisClient:
    """Runs the repository analysis against the Gemini API."""

    def __init__(self, api_key: str | None = None, model: str | None = None, client=None):
        settings = None
        if api_key is None or not model:
            settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model or DEFAULT_MODEL
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def analyze_repository(self, repo_url: str) -> AnalysisResult:
        if not self.api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        prompt = build_prompt(repo_url)
        logger.info(f"Requesting analysis for {repo_url} with {self.model}")

        response = await self._get_client().aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=ANALYSIS_SCHEMA,
            ),
        )

        result = parse_analysis_text(response.text)
        logger.info(f"Analysis for {repo_url}: {result.overall_status.value}")
        return result


async def analyze_repository(repo_url: str, settings: Settings | None = None) -> AnalysisResult:
    """Analyze one repository with a client built from settings."""
    settings = settings or get_settings()
    client = GeminiAnalysisClient(api_key=settings.gemini_api_key or "", model=settings.gemini_model)
    return await client.analyze_repository(repo_url)
