"""
GitHub Guardian Schema Definitions

Pydantic models for the analysis result produced by the language model and
for the JSON API contract. Attributes are snake_case; aliases carry the
camelCase names used on the wire and in the provider response schema.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class OverallStatus(str, Enum):
    """Coarse verdict label chosen by the model"""
    SECURE = "SECURE"
    WARNING = "WARNING"
    VULNERABLE = "VULNERABLE"


# =============================================================================
# ANALYSIS RESULT
# =============================================================================

class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AffectedPackage(CamelModel):
    """A dependency the model claims is implicated in the supply-chain attack"""
    name: str = Field(..., description="Package name (e.g., 'lodash')")
    version: str = Field(..., description="Version found in the hypothetical dependency tree")
    reason: str = Field(..., description="Why this package/version is considered compromised")


class GeneralAnalysis(CamelModel):
    """General vulnerability check"""
    score: int = Field(..., ge=0, le=100, description="Security score 0-100 (100 = most secure)")
    findings: list[str] = Field(default_factory=list, description="General vulnerabilities or good practices observed")


class SupplyChainAttackAnalysis(CamelModel):
    """Findings specific to the September 2025 supply-chain attack scenario"""
    vulnerable: bool = Field(..., description="True if the repository is likely affected")
    details: str = Field(..., description="Explanation of the findings for this attack")
    affected_packages: list[AffectedPackage] = Field(
        default_factory=list,
        alias="affectedPackages",
        description="Potentially compromised packages, in the order returned",
    )


class AnalysisResult(CamelModel):
    """
    Complete security analysis for one repository URL.

    Created fresh for every request and never stored.
    """
    overall_status: OverallStatus = Field(..., alias="overallStatus")
    summary: str = Field(..., description="One-paragraph summary of the analysis")
    general_analysis: GeneralAnalysis = Field(..., alias="generalAnalysis")
    supply_chain_attack_analysis: SupplyChainAttackAnalysis = Field(..., alias="supplyChainAttackAnalysis")


# =============================================================================
# REQUEST / ERROR MODELS
# =============================================================================

class AnalyzeRequest(CamelModel):
    """Request body for POST /api/analyze"""
    repo_url: str = Field(
        ...,
        alias="repoUrl",
        description="GitHub repository URL (e.g., https://github.com/user/repo)",
    )


class ErrorResponse(BaseModel):
    """Error body returned by the JSON API"""
    detail: str
    kind: str = Field(..., description="validation | configuration | provider | parse")
