# school/config.py
from typing import List, Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./school.db"
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    
    # Student queries
    NAME_PREFIX: str = "А"  # Cyrillic capital A
    LAST_STUDENTS_LIMIT: int = 5
    
    # Group print demonstration
    PRINT_JOIN_TIMEOUT: Optional[float] = None  # seconds, None waits forever
    
    # Frontend
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
