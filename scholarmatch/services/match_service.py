"""
Match generation: score the active catalog for a profile and persist the
candidates that clear the minimum threshold.

Identity rule: one ScholarshipMatch per (profile_id, scholarship_id).
Regenerating refreshes score and reasoning but keeps the row's status.
"""
from typing import Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from scholarmatch.config import settings
from scholarmatch.models import MatchStatus, Scholarship, ScholarshipMatch, StudentProfile
from scholarmatch.schemas.oracle import MatchCandidate
from scholarmatch.services.scoring_oracle import ScoringOracle

logger = logging.getLogger(__name__)


class MatchService:
    def __init__(self, db: Session, oracle: ScoringOracle, min_score: Optional[int] = None):
        self.db = db
        self.oracle = oracle
        self.min_score = settings.MIN_MATCH_SCORE if min_score is None else min_score

    def active_catalog(self) -> List[Scholarship]:
        return (
            self.db.query(Scholarship)
            .filter(Scholarship.is_active.is_(True))
            .order_by(Scholarship.created_at.desc(), Scholarship.title)
            .all()
        )

    def generate_for_profile(self, profile: StudentProfile) -> List[ScholarshipMatch]:
        catalog = self.active_catalog()
        candidates = self.oracle.score(profile, catalog)
        known_ids = {s.id for s in catalog}
        return self.persist_candidates(profile, candidates, known_ids)

    def persist_candidates(
        self,
        profile: StudentProfile,
        candidates: List[MatchCandidate],
        known_ids: Optional[set] = None,
    ) -> List[ScholarshipMatch]:
        """
        Write every candidate scoring at or above the threshold and commit.
        Candidates for scholarships outside `known_ids` are dropped.
        """
        try:
            saved = self._reduce(profile, candidates, known_ids)
            self.db.commit()
        except IntegrityError:
            # A concurrent generation inserted the same pair first; replay as updates
            self.db.rollback()
            logger.warning(f"Match insert race for profile {profile.id}, retrying as update")
            saved = self._reduce(profile, candidates, known_ids)
            self.db.commit()

        for match in saved:
            self.db.refresh(match)
        saved.sort(key=lambda m: m.match_score, reverse=True)
        return saved

    def _reduce(
        self,
        profile: StudentProfile,
        candidates: List[MatchCandidate],
        known_ids: Optional[set],
    ) -> List[ScholarshipMatch]:
        existing: Dict[str, ScholarshipMatch] = {
            m.scholarship_id: m
            for m in self.db.query(ScholarshipMatch).filter(ScholarshipMatch.profile_id == profile.id).all()
        }
        touched: Dict[str, ScholarshipMatch] = {}
        created = updated = skipped = 0

        for candidate in candidates:
            if candidate.match_score < self.min_score:
                skipped += 1
                continue
            if known_ids is not None and candidate.scholarship_id not in known_ids:
                logger.warning(f"Ignoring candidate for unknown scholarship {candidate.scholarship_id}")
                skipped += 1
                continue

            match = existing.get(candidate.scholarship_id)
            if match is None:
                match = ScholarshipMatch(
                    profile_id=profile.id,
                    scholarship_id=candidate.scholarship_id,
                    match_score=candidate.match_score,
                    ai_reasoning=candidate.reasoning,
                    status=MatchStatus.NEW,
                )
                self.db.add(match)
                existing[candidate.scholarship_id] = match
                created += 1
            else:
                match.match_score = candidate.match_score
                match.ai_reasoning = candidate.reasoning
                updated += 1
            touched[candidate.scholarship_id] = match

        self.db.flush()
        logger.info(
            f"Profile {profile.id}: {created} matches created, {updated} updated, {skipped} skipped"
        )
        return list(touched.values())

    def list_matches(self, profile_id: str, status: Optional[MatchStatus] = None) -> List[ScholarshipMatch]:
        """Persisted matches for a profile, best first; `status=None` returns every status"""
        query = (
            self.db.query(ScholarshipMatch)
            .options(joinedload(ScholarshipMatch.scholarship))
            .filter(ScholarshipMatch.profile_id == profile_id)
        )
        if status is not None:
            query = query.filter(ScholarshipMatch.status == status)
        return query.order_by(ScholarshipMatch.match_score.desc()).all()

    def update_status(self, match: ScholarshipMatch, status: MatchStatus) -> ScholarshipMatch:
        match.status = status
        self.db.commit()
        self.db.refresh(match)
        return match
