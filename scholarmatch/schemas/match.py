from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel
from scholarmatch.models import MatchStatus
from scholarmatch.schemas.scholarship import ScholarshipResponse


class GenerateMatchesRequest(BaseModel):
    profile_id: str


class MatchStatusUpdate(BaseModel):
    status: MatchStatus


class MatchResponse(BaseModel):
    id: str
    profile_id: str
    scholarship_id: str
    match_score: int
    ai_reasoning: Optional[str] = None
    status: MatchStatus
    created_at: Optional[datetime] = None
    scholarship: Optional[ScholarshipResponse] = None

    class Config:
        from_attributes = True


class GenerateMatchesResponse(BaseModel):
    matches: List[MatchResponse]


class DashboardStats(BaseModel):
    total_matches: int
    high_match: int
    due_this_month: int
    total_value: int
