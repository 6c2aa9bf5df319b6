# school/logging_config.py
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Console (and optional file) logging for the API process, applied once"""
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    
    # basicConfig leaves an already configured root logger alone (uvicorn, pytest)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    
    # SQL statements stay quiet unless asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
