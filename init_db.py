"""
Database initialization script
Run this to create tables and load the bundled scholarship catalog
"""
from scholarmatch.database import engine, Base, SessionLocal
from scholarmatch.models import *
from scholarmatch.services.catalog_seed import seed_if_empty

def init_database():
    """Create all tables and seed an empty catalog"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        count = seed_if_empty(db)
    finally:
        db.close()
    if count:
        print(f"Seeded {count} scholarships")
    print("Database initialized successfully!")

if __name__ == "__main__":
    init_database()
