from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, ForeignKey, JSON, Enum as SQLEnum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from scholarmatch.database import Base
import enum
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


class FinancialNeed(str, enum.Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"

class LocationPreference(str, enum.Enum):
    LOCAL = "local"
    NATIONAL = "national"
    INTERNATIONAL = "international"
    NO_PREFERENCE = "no-preference"

class ScholarshipType(str, enum.Enum):
    MERIT_BASED = "merit-based"
    NEED_BASED = "need-based"
    FIELD_SPECIFIC = "field-specific"
    DIVERSITY = "diversity"
    INTERNSHIP = "internship"

class MatchStatus(str, enum.Enum):
    NEW = "new"
    FAVORITED = "favorited"
    PASSED = "passed"
    APPLIED = "applied"


class StudentProfile(Base):
    __tablename__ = "student_profiles"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    education_level = Column(String, nullable=False)  # e.g. undergraduate-junior
    field_of_study = Column(String, nullable=False)
    gpa = Column(String, nullable=True)  # decimal string, e.g. "3.75"
    graduation_year = Column(String, nullable=False)
    skills = Column(Text, nullable=True)
    activities = Column(Text, nullable=True)
    financial_need = Column(SQLEnum(FinancialNeed, values_callable=lambda e: [m.value for m in e]), nullable=False)
    location = Column(SQLEnum(LocationPreference, values_callable=lambda e: [m.value for m in e]), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    matches = relationship("ScholarshipMatch", back_populates="profile")


class Scholarship(Base):
    __tablename__ = "scholarships"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String, nullable=False)
    organization = Column(String, nullable=False)
    amount = Column(String, nullable=False)  # free text, e.g. "$10,000" or "₹16,50,000"
    deadline = Column(String, nullable=False)  # YYYY-MM-DD
    description = Column(Text, nullable=False)
    requirements = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)  # ordered, e.g. ["technology", "diversity"]
    type = Column(SQLEnum(ScholarshipType, values_callable=lambda e: [m.value for m in e]), nullable=False)
    eligibility_gpa = Column(String, nullable=True)
    eligible_fields = Column(JSON, nullable=True)  # None or [] means any field
    eligible_levels = Column(JSON, nullable=True)  # None or [] means any level
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    matches = relationship("ScholarshipMatch", back_populates="scholarship")


class ScholarshipMatch(Base):
    __tablename__ = "scholarship_matches"
    __table_args__ = (
        UniqueConstraint("profile_id", "scholarship_id", name="uq_match_profile_scholarship"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    profile_id = Column(String(36), ForeignKey("student_profiles.id"), nullable=False, index=True)
    scholarship_id = Column(String(36), ForeignKey("scholarships.id"), nullable=False)
    match_score = Column(Integer, nullable=False)  # 0-100
    ai_reasoning = Column(Text, nullable=True)
    status = Column(SQLEnum(MatchStatus, values_callable=lambda e: [m.value for m in e]), nullable=False, default=MatchStatus.NEW)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    profile = relationship("StudentProfile", back_populates="matches")
    scholarship = relationship("Scholarship", back_populates="matches")


class ApplicationGuidance(Base):
    __tablename__ = "application_guidance"
    __table_args__ = (
        UniqueConstraint("profile_id", "scholarship_id", name="uq_guidance_profile_scholarship"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    profile_id = Column(String(36), ForeignKey("student_profiles.id"), nullable=False)
    scholarship_id = Column(String(36), ForeignKey("scholarships.id"), nullable=False)
    essay_tips = Column(Text, nullable=True)
    checklist = Column(JSON, nullable=True)
    improvement_suggestions = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
