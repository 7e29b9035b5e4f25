"""
Shared fixtures: an in-memory SQLite database per test and small factories.
"""
import os

# Point the app at throwaway settings before anything imports them
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from scholarmatch.database import Base
from scholarmatch.models import (
    FinancialNeed,
    LocationPreference,
    Scholarship,
    ScholarshipType,
    StudentProfile,
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_profile(db):
    def _make(**overrides):
        data = {
            "name": "Priya Raman",
            "email": "priya.raman@gmail.com",
            "education_level": "undergraduate-junior",
            "field_of_study": "Computer Science",
            "gpa": "3.8",
            "graduation_year": "2026",
            "skills": "Python, machine learning, data visualization",
            "activities": None,
            "financial_need": FinancialNeed.MODERATE,
            "location": LocationPreference.NATIONAL,
        }
        data.update(overrides)
        profile = StudentProfile(**data)
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return profile
    return _make


@pytest.fixture
def make_scholarship(db):
    def _make(**overrides):
        data = {
            "title": "Test Scholarship",
            "organization": "Test Foundation",
            "amount": "$5,000",
            "deadline": "2030-01-15",
            "description": "A scholarship used in tests.",
            "requirements": "3.0+ GPA",
            "tags": ["testing"],
            "type": ScholarshipType.MERIT_BASED,
            "eligibility_gpa": "3.0",
            "eligible_fields": ["Computer Science"],
            "eligible_levels": ["undergraduate-junior"],
        }
        data.update(overrides)
        scholarship = Scholarship(**data)
        db.add(scholarship)
        db.commit()
        db.refresh(scholarship)
        return scholarship
    return _make


@pytest.fixture
def file_sessions(tmp_path):
    """Two independent sessions on one file-backed database, for write races"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'race.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    first, second = Session(), Session()
    yield first, second
    first.close()
    second.close()
    engine.dispose()


@pytest.fixture
def race_pair(file_sessions):
    """A committed profile and scholarship in the first of the racing sessions"""
    session, _ = file_sessions
    profile = StudentProfile(
        name="Priya Raman",
        email="priya.raman@gmail.com",
        education_level="undergraduate-junior",
        field_of_study="Computer Science",
        graduation_year="2026",
        financial_need=FinancialNeed.MODERATE,
        location=LocationPreference.NATIONAL,
    )
    scholarship = Scholarship(
        title="Race Award",
        organization="Org",
        amount="$1,000",
        deadline="2030-01-01",
        description="d",
        requirements="r",
        tags=[],
        type=ScholarshipType.MERIT_BASED,
    )
    session.add_all([profile, scholarship])
    session.commit()
    return profile, scholarship
