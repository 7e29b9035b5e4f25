import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from scholarmatch.database import get_db
from scholarmatch.models import Scholarship
from scholarmatch.routers.profiles import get_profile_or_404
from scholarmatch.schemas.guidance import GuidanceRequest, GuidanceResponse
from scholarmatch.services.guidance_service import GuidanceOracle, GuidanceService, get_guidance_oracle

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=GuidanceResponse)
def generate_guidance(
    request: GuidanceRequest,
    db: Session = Depends(get_db),
    oracle: GuidanceOracle = Depends(get_guidance_oracle)
):
    """Return cached guidance for the pair, generating it on first request"""
    service = GuidanceService(db, oracle)
    cached = service.get_cached(request.profile_id, request.scholarship_id)
    if cached is not None:
        return cached

    profile = get_profile_or_404(db, request.profile_id)
    scholarship = db.query(Scholarship).filter(Scholarship.id == request.scholarship_id).first()
    if not scholarship:
        raise HTTPException(status_code=404, detail="Scholarship not found")

    try:
        return service.get_or_create(profile, scholarship)
    except Exception:
        db.rollback()
        logger.exception(f"Error generating guidance for {request.profile_id}/{request.scholarship_id}")
        raise HTTPException(status_code=500, detail="Failed to generate guidance")


@router.get("/{profile_id}/{scholarship_id}", response_model=GuidanceResponse)
async def get_guidance(profile_id: str, scholarship_id: str, db: Session = Depends(get_db)):
    guidance = GuidanceService(db, oracle=None).get_cached(profile_id, scholarship_id)
    if not guidance:
        raise HTTPException(status_code=404, detail="Guidance not found")
    return guidance
