from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, field_validator


class GuidanceRequest(BaseModel):
    profile_id: str
    scholarship_id: str


class GuidanceResponse(BaseModel):
    id: str
    profile_id: str
    scholarship_id: str
    essay_tips: Optional[str] = None
    checklist: List[str] = []
    improvement_suggestions: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator('checklist', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v
