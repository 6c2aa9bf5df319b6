# school/main.py
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .config import settings
from .database.session import init_db
from .logging_config import setup_logging
from .routers import students

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="School Records",
    description="Student records with aggregate queries and concurrent print demonstrations",
    version="1.0.0"
)

# CORS middleware for frontend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create all database tables
init_db()

app.include_router(students.router)

logger.info("School records API ready")


@app.get("/")
def root():
    return {
        "status": "ok",
        "service": "School Records API",
        "version": "1.0.0"
    }

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "database": settings.DATABASE_URL.split(":", 1)[0]
    }

#   cd backend
#   python -m uvicorn school.main:app --reload
