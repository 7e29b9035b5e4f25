from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from scholarmatch.config import settings


def normalize_database_url(database_url: str) -> str:
    """Make postgres URLs explicit about the psycopg2 driver (SQLAlchemy 2.0 requires it)"""
    if database_url.startswith("postgresql://") and "+psycopg2" not in database_url:
        return database_url.replace("postgresql://", "postgresql+psycopg2://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+psycopg2://", 1)
    return database_url


def build_engine(database_url: str):
    database_url = normalize_database_url(database_url)
    if database_url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    # pool_pre_ping to handle dropped connections, pool_recycle to prevent stale ones
    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args={"connect_timeout": 10},
    )


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
