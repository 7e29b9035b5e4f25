from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./scholarmatch.db"
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4.1"
    OPENAI_TIMEOUT: float = 60.0
    OPENAI_MAX_RETRIES: int = 2
    OPENAI_TEMPERATURE: float = 0.3
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Candidates scoring below this are never persisted
    MIN_MATCH_SCORE: int = 30

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

settings = Settings()
