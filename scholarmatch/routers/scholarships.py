from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional
from scholarmatch.database import get_db
from scholarmatch.models import Scholarship
from scholarmatch.schemas.scholarship import ScholarshipResponse

router = APIRouter()


def _eligible(values: Optional[List[str]], wanted: str) -> bool:
    """An unset or empty eligibility list means open to everyone"""
    if not values:
        return True
    wanted = wanted.lower()
    return any(v.lower() == wanted for v in values)


def search_catalog(
    scholarships: List[Scholarship],
    type: Optional[str] = None,
    tags: Optional[List[str]] = None,
    field_of_study: Optional[str] = None,
    education_level: Optional[str] = None,
) -> List[Scholarship]:
    results = []
    wanted_tags = {t.lower() for t in tags or []}
    for s in scholarships:
        if type and getattr(s.type, "value", s.type) != type:
            continue
        if wanted_tags and not wanted_tags.intersection(t.lower() for t in s.tags or []):
            continue
        if field_of_study and not _eligible(s.eligible_fields, field_of_study):
            continue
        if education_level and not _eligible(s.eligible_levels, education_level):
            continue
        results.append(s)
    return results


def _active(db: Session) -> List[Scholarship]:
    return (
        db.query(Scholarship)
        .filter(Scholarship.is_active.is_(True))
        .order_by(Scholarship.created_at.desc(), Scholarship.title)
        .all()
    )


@router.get("", response_model=List[ScholarshipResponse])
async def list_scholarships(db: Session = Depends(get_db)):
    """Get all active scholarships"""
    return _active(db)


@router.get("/search", response_model=List[ScholarshipResponse])
async def search_scholarships(
    type: Optional[str] = None,
    tags: Optional[str] = None,
    field_of_study: Optional[str] = None,
    education_level: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """Search active scholarships; `tags` is comma-separated and matches on any overlap"""
    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else None
    return search_catalog(_active(db), type, tag_list, field_of_study, education_level)


@router.get("/{scholarship_id}", response_model=ScholarshipResponse)
async def get_scholarship(scholarship_id: str, db: Session = Depends(get_db)):
    scholarship = db.query(Scholarship).filter(Scholarship.id == scholarship_id).first()
    if not scholarship:
        raise HTTPException(status_code=404, detail="Scholarship not found")
    return scholarship
