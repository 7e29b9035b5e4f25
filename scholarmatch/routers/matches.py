"""
Match generation, listing and status transitions
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from scholarmatch.database import get_db
from scholarmatch.models import MatchStatus, ScholarshipMatch
from scholarmatch.routers.profiles import get_profile_or_404
from scholarmatch.schemas.match import (
    DashboardStats,
    GenerateMatchesRequest,
    GenerateMatchesResponse,
    MatchResponse,
    MatchStatusUpdate,
)
from scholarmatch.services.dashboard import AMOUNT_BUCKETS, SORT_KEYS, dashboard_stats, filter_matches, sort_matches
from scholarmatch.services.match_service import MatchService
from scholarmatch.services.scoring_oracle import ScoringOracle, get_scoring_oracle

logger = logging.getLogger(__name__)

router = APIRouter()

ALL_STATUSES = "all"


def _parse_status(value: Optional[str]) -> Optional[MatchStatus]:
    """Missing status means `new`; `all` disables the filter"""
    if value is None:
        return MatchStatus.NEW
    if value == ALL_STATUSES:
        return None
    try:
        return MatchStatus(value)
    except ValueError:
        allowed = ", ".join([s.value for s in MatchStatus] + [ALL_STATUSES])
        raise HTTPException(status_code=422, detail=f"Invalid status '{value}'. Use one of: {allowed}")


@router.post("/generate", response_model=GenerateMatchesResponse)
def generate_matches(
    request: GenerateMatchesRequest,
    db: Session = Depends(get_db),
    oracle: ScoringOracle = Depends(get_scoring_oracle)
):
    """Score the active catalog for a profile and store matches above the threshold"""
    profile = get_profile_or_404(db, request.profile_id)
    try:
        matches = MatchService(db, oracle).generate_for_profile(profile)
    except Exception:
        db.rollback()
        logger.exception(f"Error generating matches for profile {request.profile_id}")
        raise HTTPException(status_code=500, detail="Failed to generate matches")
    return {"matches": matches}


@router.get("/{profile_id}", response_model=List[MatchResponse])
async def list_matches(
    profile_id: str,
    status: Optional[str] = None,
    type: Optional[str] = None,
    min_amount: Optional[int] = None,
    deadline_within_days: Optional[int] = Query(None, ge=0),
    sort_by: str = "match_score",
    db: Session = Depends(get_db)
):
    """Matches for a profile with optional dashboard filters and sort"""
    if sort_by not in SORT_KEYS:
        raise HTTPException(status_code=422, detail=f"Invalid sort_by '{sort_by}'. Use one of: {', '.join(SORT_KEYS)}")
    if min_amount is not None and min_amount not in AMOUNT_BUCKETS:
        raise HTTPException(status_code=422, detail=f"min_amount must be one of: {', '.join(map(str, AMOUNT_BUCKETS))}")
    matches = MatchService(db, oracle=None).list_matches(profile_id, _parse_status(status))
    matches = filter_matches(
        matches,
        scholarship_type=type,
        min_amount=min_amount,
        deadline_within_days=deadline_within_days,
    )
    return sort_matches(matches, sort_by)


@router.get("/{profile_id}/stats", response_model=DashboardStats)
async def get_match_stats(profile_id: str, status: Optional[str] = None, db: Session = Depends(get_db)):
    matches = MatchService(db, oracle=None).list_matches(profile_id, _parse_status(status))
    return dashboard_stats(matches)


@router.put("/{match_id}/status", response_model=MatchResponse)
async def update_match_status(match_id: str, update: MatchStatusUpdate, db: Session = Depends(get_db)):
    """Favorite, pass or mark a match as applied"""
    match = db.query(ScholarshipMatch).filter(ScholarshipMatch.id == match_id).first()
    if not match:
        raise HTTPException(status_code=404, detail="Match not found")
    try:
        match = MatchService(db, oracle=None).update_status(match, update.status)
    except Exception:
        db.rollback()
        logger.exception(f"Error updating status of match {match_id}")
        raise HTTPException(status_code=500, detail="Failed to update match status")
    return match
