import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from scholarmatch.database import get_db
from scholarmatch.services.catalog_seed import reseed_catalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def seed_data(db: Session = Depends(get_db)):
    """Reset the catalog to the bundled scholarships (drops all matches and guidance)"""
    try:
        count = reseed_catalog(db)
    except Exception:
        logger.exception("Error seeding data")
        raise HTTPException(status_code=500, detail="Failed to seed sample data")
    return {"message": "Sample data seeded successfully", "count": count}
