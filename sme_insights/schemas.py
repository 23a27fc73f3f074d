"""
Data Contracts
--------------
Authoritative input / output models for solution generation.

Rules:
- Wire format is camelCase JSON (what the AI backend returns)
- Python attributes are snake_case
- Structural validation only happens here; the
  heading <-> impact name link is checked in generation.parser
"""

from datetime import datetime
from enum import Enum
from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# =====================================================
# ENUMS
# =====================================================

class ImplementationCost(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TimeToValue(str, Enum):
    IMMEDIATE = "Immediate"
    SHORT_TERM = "Short-term"
    MEDIUM_TERM = "Medium-term"
    LONG_TERM = "Long-term"


class FeedbackRating(str, Enum):
    HELPFUL = "helpful"
    NOT_HELPFUL = "not_helpful"


# =====================================================
# INPUT
# =====================================================

class GenerationInput(_WireModel):
    industry: str = Field(..., description="Industry key selected by the user.")
    business_context: str = Field(
        "Not provided",
        alias="businessContext",
        description="General context about the business.",
    )
    common_problems: Tuple[str, ...] = Field(
        (),
        alias="commonProblems",
        description="Common problems selected by the user, in selection order.",
    )
    custom_problem: str = Field(
        ...,
        alias="customProblem",
        description="Custom problem description provided by the user.",
    )


# =====================================================
# OUTPUT
# =====================================================

class Solution(_WireModel):
    heading: str = Field(..., min_length=1)
    description: List[str] = Field(..., min_length=1)
    implementation_cost: ImplementationCost = Field(..., alias="implementationCost")
    time_to_value: TimeToValue = Field(..., alias="timeToValue")
    required_resources: List[str] = Field(default_factory=list, alias="requiredResources")


class StakeholderValueDistribution(_WireModel):
    customers: float = Field(..., ge=0, le=100, alias="Customers")
    business: float = Field(..., ge=0, le=100, alias="Business")
    employees: float = Field(..., ge=0, le=100, alias="Employees")
    community: float = Field(..., ge=0, le=100, alias="Community")

    def as_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class ImpactAnalysis(_WireModel):
    name: str = Field(..., description="Must equal one solution heading.")
    projected_impact: float = Field(..., ge=0, le=100, alias="projectedImpact")
    confidence_interval: Tuple[float, float] = Field(..., alias="confidenceInterval")
    stakeholder_value_distribution: StakeholderValueDistribution = Field(
        ..., alias="stakeholderValueDistribution"
    )

    @field_validator("confidence_interval")
    @classmethod
    def _interval_in_range(cls, value):
        worst, best = value
        if not (0 <= worst <= best <= 100):
            raise ValueError(
                "confidenceInterval must be [worst, best] with 0 <= worst <= best <= 100"
            )
        return value

    @property
    def worst_case(self) -> float:
        return self.confidence_interval[0]

    @property
    def best_case(self) -> float:
        return self.confidence_interval[1]


class GenerationOutput(_WireModel):
    solutions: List[Solution] = Field(..., min_length=3, max_length=5)
    kpis: List[str] = Field(..., min_length=1)
    impact_analysis: List[ImpactAnalysis] = Field(..., alias="impactAnalysis")
    data_narrative: str = Field(..., alias="dataNarrative")

    @property
    def headings(self) -> List[str]:
        return [s.heading for s in self.solutions]

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# =====================================================
# FEEDBACK
# =====================================================

class FeedbackRecord(_WireModel):
    input: GenerationInput
    output: GenerationOutput
    feedback: FeedbackRating
    recorded_at: str = Field(
        default_factory=lambda: datetime.utcnow().isoformat(),
        alias="recordedAt",
    )


# =====================================================
# CONTEXT / CHAT
# =====================================================

class EconomicOutlook(_WireModel):
    current: str
    prediction: str


class ContextualData(_WireModel):
    market_trends: List[str] = Field(..., alias="marketTrends")
    economic_outlook: EconomicOutlook = Field(..., alias="economicOutlook")


class ChatMessage(_WireModel):
    role: Literal["user", "model"]
    content: str

    @model_validator(mode="after")
    def _content_not_blank(self):
        if not self.content.strip():
            raise ValueError("Chat message content must not be blank")
        return self
