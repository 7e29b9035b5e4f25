"""
Pydantic schemas for oracle output.
These define the strict JSON structure the model must return; the JSON
schemas below are sent as the structured-output format of the request.
"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatchCandidate(BaseModel):
    """One scored scholarship before the persistence threshold is applied"""
    model_config = ConfigDict(populate_by_name=True)

    scholarship_id: str = Field(..., alias="scholarshipId", min_length=1)
    match_score: int = Field(..., alias="matchScore", ge=0, le=100)
    reasoning: str = ""

    @field_validator('match_score', mode='before')
    @classmethod
    def round_float_scores(cls, v):
        """Models occasionally return 87.0 for an integer field"""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class MatchResponseBody(BaseModel):
    matches: List[MatchCandidate]


class GuidanceResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    essay_tips: str = Field("", alias="essayTips")
    checklist: List[str] = Field(default_factory=list)
    improvement_suggestions: str = Field("", alias="improvementSuggestions")


MATCH_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "matches": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "scholarshipId": {"type": "string"},
                    "matchScore": {"type": "integer"},
                    "reasoning": {"type": "string"},
                },
                "required": ["scholarshipId", "matchScore", "reasoning"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["matches"],
    "additionalProperties": False,
}

GUIDANCE_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "essayTips": {"type": "string"},
        "checklist": {"type": "array", "items": {"type": "string"}},
        "improvementSuggestions": {"type": "string"},
    },
    "required": ["essayTips", "checklist", "improvementSuggestions"],
    "additionalProperties": False,
}
