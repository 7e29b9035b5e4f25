"""
Request/response schemas for student profiles.
Validation here runs before anything is persisted or sent to the oracle.
"""
import re
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from scholarmatch.models import FinancialNeed, LocationPreference

ALLOWED_EMAIL_DOMAINS = ("@gmail.com", "@yahoo.com", "@rediffmail.com")
GPA_RE = re.compile(r"^[0-9]+(\.[0-9]{1,2})?$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_FREE_TEXT_LENGTH = 10


def _check_email(v: str) -> str:
    v = v.strip()
    if not EMAIL_RE.match(v):
        raise ValueError("Enter a valid email")
    if not v.lower().endswith(ALLOWED_EMAIL_DOMAINS):
        raise ValueError("Email must be from @gmail.com, @yahoo.com, or @rediffmail.com")
    return v


def _check_gpa(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    if not GPA_RE.match(v):
        raise ValueError("GPA must be a valid number")
    return v


def _check_free_text(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) <= MIN_FREE_TEXT_LENGTH:
        raise ValueError(f"Must be more than {MIN_FREE_TEXT_LENGTH} characters")
    return v


class ProfileFields(BaseModel):
    """Shared validators for create and partial update"""

    @field_validator('gpa', 'skills', 'activities', mode='before', check_fields=False)
    @classmethod
    def empty_str_to_none(cls, v):
        """Convert empty strings to None for optional string fields"""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v

    @field_validator('name', 'education_level', 'field_of_study', 'graduation_year', mode='before', check_fields=False)
    @classmethod
    def strip_required_text(cls, v):
        """Whitespace-only values must fail the length checks"""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('email', check_fields=False)
    @classmethod
    def validate_email(cls, v):
        if v is None:
            return v
        return _check_email(v)

    @field_validator('gpa', check_fields=False)
    @classmethod
    def validate_gpa(cls, v):
        return _check_gpa(v)

    @field_validator('skills', 'activities', check_fields=False)
    @classmethod
    def validate_free_text(cls, v):
        return _check_free_text(v)


class ProfileCreate(ProfileFields):
    name: str = Field(..., min_length=2)
    email: str
    education_level: str = Field(..., min_length=1)  # e.g. "undergraduate-junior"
    field_of_study: str = Field(..., min_length=1)
    gpa: Optional[str] = None
    graduation_year: str = Field(..., min_length=1)
    skills: Optional[str] = None
    activities: Optional[str] = None
    financial_need: FinancialNeed
    location: LocationPreference


class ProfileUpdate(ProfileFields):
    name: Optional[str] = Field(None, min_length=2)
    email: Optional[str] = None
    education_level: Optional[str] = Field(None, min_length=1)
    field_of_study: Optional[str] = Field(None, min_length=1)
    gpa: Optional[str] = None
    graduation_year: Optional[str] = Field(None, min_length=1)
    skills: Optional[str] = None
    activities: Optional[str] = None
    financial_need: Optional[FinancialNeed] = None
    location: Optional[LocationPreference] = None


class ProfileResponse(BaseModel):
    id: str
    name: str
    email: str
    education_level: str
    field_of_study: str
    gpa: Optional[str] = None
    graduation_year: str
    skills: Optional[str] = None
    activities: Optional[str] = None
    financial_need: FinancialNeed
    location: LocationPreference
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
