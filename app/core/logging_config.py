import logging
import sys
from app.core.config import settings

def setup_logging(level: str = "INFO"):
    """
    Configure logging for the application.
    
    Sets up logging to stdout so the output works with Docker and any
    process supervisor that collects stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    # Reduce SQLAlchemy noise in logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    return logging.getLogger("qads")


# Create global logger instance
logger = setup_logging(settings.LOG_LEVEL)
