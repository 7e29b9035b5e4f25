"""
Application guidance per (profile, scholarship), generated at most once and cached.
"""
from abc import ABC, abstractmethod
from typing import Optional
import json
import logging

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from scholarmatch.models import ApplicationGuidance, Scholarship, StudentProfile
from scholarmatch.schemas.oracle import GuidanceResult, GUIDANCE_RESPONSE_SCHEMA
from scholarmatch.services.openai_service import OpenAIService
from scholarmatch.services.prompts import GUIDANCE_SYSTEM_PROMPT, build_guidance_prompt
from scholarmatch.services.scoring_oracle import (
    OracleError,
    OracleResponseError,
    OracleUnavailableError,
    strip_json_fences,
)

logger = logging.getLogger(__name__)

GENERIC_ESSAY_TIPS = "Focus on your unique experiences and how they align with the scholarship's mission."
GENERIC_CHECKLIST = ["Complete application form", "Submit transcripts", "Write personal statement"]
GENERIC_IMPROVEMENT_SUGGESTIONS = "Continue developing your skills and gaining relevant experience."


def generic_guidance() -> GuidanceResult:
    return GuidanceResult(
        essay_tips=GENERIC_ESSAY_TIPS,
        checklist=list(GENERIC_CHECKLIST),
        improvement_suggestions=GENERIC_IMPROVEMENT_SUGGESTIONS,
    )


def parse_guidance_response(raw: Optional[str]) -> GuidanceResult:
    """Decode guidance JSON; blank fields are filled from the generic guidance"""
    if raw is None or not raw.strip():
        raise OracleResponseError("Empty response from model")
    try:
        payload = json.loads(strip_json_fences(raw))
        result = GuidanceResult.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as e:
        raise OracleResponseError(f"Malformed guidance response: {e}") from e

    checklist = [item for item in result.checklist if item and item.strip()]
    return GuidanceResult(
        essay_tips=result.essay_tips.strip() or GENERIC_ESSAY_TIPS,
        checklist=checklist or list(GENERIC_CHECKLIST),
        improvement_suggestions=result.improvement_suggestions.strip() or GENERIC_IMPROVEMENT_SUGGESTIONS,
    )


class GuidanceOracle(ABC):
    @abstractmethod
    def guide(self, profile: StudentProfile, scholarship: Scholarship) -> GuidanceResult:
        """Produce application guidance or raise OracleError"""


class OpenAIGuidanceOracle(GuidanceOracle):
    def __init__(self, openai_service: Optional[OpenAIService] = None):
        self.openai_service = openai_service or OpenAIService()

    def guide(self, profile: StudentProfile, scholarship: Scholarship) -> GuidanceResult:
        if not self.openai_service.available:
            raise OracleUnavailableError("OpenAI API key not configured")
        try:
            raw = self.openai_service.structured_completion(
                GUIDANCE_SYSTEM_PROMPT,
                build_guidance_prompt(profile, scholarship),
                schema_name="application_guidance",
                schema=GUIDANCE_RESPONSE_SCHEMA,
            )
        except Exception as e:
            raise OracleUnavailableError(f"OpenAI request failed: {e}") from e
        return parse_guidance_response(raw)


def get_guidance_oracle() -> GuidanceOracle:
    """FastAPI dependency"""
    return OpenAIGuidanceOracle()


class GuidanceService:
    def __init__(self, db: Session, oracle: GuidanceOracle):
        self.db = db
        self.oracle = oracle

    def get_cached(self, profile_id: str, scholarship_id: str) -> Optional[ApplicationGuidance]:
        return (
            self.db.query(ApplicationGuidance)
            .filter(
                ApplicationGuidance.profile_id == profile_id,
                ApplicationGuidance.scholarship_id == scholarship_id,
            )
            .first()
        )

    def get_or_create(self, profile: StudentProfile, scholarship: Scholarship) -> ApplicationGuidance:
        cached = self.get_cached(profile.id, scholarship.id)
        if cached is not None:
            return cached

        try:
            result = self.oracle.guide(profile, scholarship)
        except OracleError as e:
            logger.warning(f"Guidance oracle failed for {profile.id}/{scholarship.id}, using generic guidance: {e}")
            result = generic_guidance()
        except Exception:
            logger.exception(f"Unexpected guidance oracle error for {profile.id}/{scholarship.id}, using generic guidance")
            result = generic_guidance()

        guidance = ApplicationGuidance(
            profile_id=profile.id,
            scholarship_id=scholarship.id,
            essay_tips=result.essay_tips,
            checklist=result.checklist,
            improvement_suggestions=result.improvement_suggestions,
        )
        self.db.add(guidance)
        try:
            self.db.commit()
        except IntegrityError:
            # Another request stored guidance for this pair first; keep theirs
            self.db.rollback()
            winner = self.get_cached(profile.id, scholarship.id)
            if winner is None:
                raise
            return winner
        self.db.refresh(guidance)
        return guidance
