from typing import List, Optional
from pydantic import BaseModel
from scholarmatch.models import ScholarshipType


class ScholarshipResponse(BaseModel):
    id: str
    title: str
    organization: str
    amount: str
    deadline: str
    description: str
    requirements: str
    tags: List[str]
    type: ScholarshipType
    eligibility_gpa: Optional[str] = None
    eligible_fields: Optional[List[str]] = None
    eligible_levels: Optional[List[str]] = None
    is_active: bool

    class Config:
        from_attributes = True
