"""Response schema returned by the underwriting recommendation generator.

The generator itself lives outside this package; callers parse its JSON
output with ``parse_analysis_output``.
"""

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError


class Recommendation(str, Enum):
    """Possible underwriting outcomes."""

    PROCEED = "Proceed"
    PROCEED_WITH_CONDITIONS = "Proceed with conditions"
    HOLD = "Hold - need more info"
    DECLINE = "Decline"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EvidenceRef(BaseModel):
    """Citation pointing at a document and, optionally, a chunk page hint."""

    doc: str
    pageHint: int | None = Field(default=None, ge=1)


class Highlight(BaseModel):
    label: str
    value: str
    doc: str | None = None
    pageHint: int | None = Field(default=None, ge=1)


class Strength(BaseModel):
    item: str
    evidence: list[EvidenceRef] = Field(default_factory=list)


class Risk(BaseModel):
    item: str
    severity: Severity
    evidence: list[EvidenceRef] = Field(default_factory=list)


class OpenQuestion(BaseModel):
    question: str
    whyItMatters: str
    bestDocToAnswer: str


class MissingDocument(BaseModel):
    docType: str
    whyNeeded: str


class Condition(BaseModel):
    condition: str
    rationale: str
    evidence: list[EvidenceRef] = Field(default_factory=list)


class AnalysisOutput(BaseModel):
    """Structured recommendation for a deal."""

    recommendation: Recommendation
    confidence: float = Field(ge=0.0, le=1.0)
    decisionSummary: str
    narrative: list[str] = Field(default_factory=list)
    highlights: list[Highlight] = Field(default_factory=list)
    strengths: list[Strength] = Field(default_factory=list)
    risks: list[Risk] = Field(default_factory=list)
    openQuestions: list[OpenQuestion] = Field(default_factory=list)
    missingDocuments: list[MissingDocument] = Field(default_factory=list)
    conditions: list[Condition] = Field(default_factory=list)


class AnalysisParseError(ValueError):
    """Raised when generator output is not valid ``AnalysisOutput`` JSON."""


def parse_analysis_output(raw: str | dict[str, Any]) -> AnalysisOutput:
    """Parse and validate the generator's JSON response."""
    if isinstance(raw, str):
        if not raw.strip():
            raise AnalysisParseError("No response content from generator")
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            raise AnalysisParseError(f"Response is not valid JSON: {e}") from e

    try:
        return AnalysisOutput.model_validate(raw)
    except ValidationError as e:
        raise AnalysisParseError(f"Response does not match schema: {e}") from e
