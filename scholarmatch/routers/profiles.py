"""
Student profile endpoints
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from scholarmatch.database import get_db
from scholarmatch.models import StudentProfile
from scholarmatch.schemas.profile import ProfileCreate, ProfileUpdate, ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter()

# Columns that may not be cleared by a partial update
REQUIRED_FIELDS = {
    "name", "email", "education_level", "field_of_study",
    "graduation_year", "financial_need", "location",
}


def get_profile_or_404(db: Session, profile_id: str) -> StudentProfile:
    profile = db.query(StudentProfile).filter(StudentProfile.id == profile_id).first()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(profile_data: ProfileCreate, db: Session = Depends(get_db)):
    """Create a student profile"""
    try:
        profile = StudentProfile(**profile_data.model_dump())
        db.add(profile)
        db.commit()
        db.refresh(profile)
    except Exception:
        db.rollback()
        logger.exception("Error creating profile")
        raise HTTPException(status_code=500, detail="Failed to create profile")
    logger.info(f"Created profile {profile.id}")
    return profile


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: str, db: Session = Depends(get_db)):
    return get_profile_or_404(db, profile_id)


@router.put("/{profile_id}", response_model=ProfileResponse)
async def update_profile(profile_id: str, profile_data: ProfileUpdate, db: Session = Depends(get_db)):
    """Partial update; only fields present in the body are changed"""
    profile = get_profile_or_404(db, profile_id)
    changes = profile_data.model_dump(exclude_unset=True)
    cleared = [k for k, v in changes.items() if v is None and k in REQUIRED_FIELDS]
    if cleared:
        raise HTTPException(status_code=422, detail=f"Required fields cannot be cleared: {', '.join(sorted(cleared))}")

    try:
        for key, value in changes.items():
            setattr(profile, key, value)
        db.commit()
        db.refresh(profile)
    except Exception:
        db.rollback()
        logger.exception(f"Error updating profile {profile_id}")
        raise HTTPException(status_code=500, detail="Failed to update profile")
    return profile
