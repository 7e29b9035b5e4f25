from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from scholarmatch.database import engine, Base
from scholarmatch.routers import profiles, scholarships, matches, guidance, seed
from scholarmatch.config import settings
import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create database tables
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
    yield
    logger.info("Shutting down...")

app = FastAPI(
    title="ScholarMatch API",
    description="AI-assisted scholarship matching for students",
    version="1.0.0",
    lifespan=lifespan
)

allowed_origins = settings.allowed_origins
logger.info(f"CORS allowed origins: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins if allowed_origins else ["*"],  # Fallback to allow all if empty
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(profiles.router, prefix="/api/profiles", tags=["profiles"])
app.include_router(scholarships.router, prefix="/api/scholarships", tags=["scholarships"])
app.include_router(matches.router, prefix="/api/matches", tags=["matches"])
app.include_router(guidance.router, prefix="/api/guidance", tags=["guidance"])
app.include_router(seed.router, prefix="/api/seed-data", tags=["seed"])

@app.get("/")
async def root():
    return {"message": "ScholarMatch API", "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}
