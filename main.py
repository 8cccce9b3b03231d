"""
Figma-Tinifier Entry Point

This file serves as the main entry point for the application,
importing and running the FastAPI application defined in the tinifier package.

Run with uvicorn:
    uvicorn main:app --reload
"""
import logging
import sys

from dotenv import load_dotenv

# .env must be loaded before the app reads its settings
load_dotenv()

from tinifier import app  # noqa: E402
from tinifier.config import Settings  # noqa: E402

settings = Settings.from_env()

# Configure logging based on environment variables
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Configure root logger
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format=LOG_FORMAT,
    stream=sys.stdout
)

# Set up logger
logger = logging.getLogger(__name__)

# Entry point for running with uvicorn
if __name__ == "__main__":
    import uvicorn

    if not settings.api_key:
        logger.critical("TINIFY_API_KEY is not set; add it to the environment or a .env file")
        sys.exit(1)

    logger.info(f"Figma-Tinifier server running on port {settings.port}")

    uvicorn.run(
        "tinifier:app",
        host=settings.host,
        port=settings.port
    )
