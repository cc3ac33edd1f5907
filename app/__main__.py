"""
Main entry point for running the application with `python -m app`.
"""
import uvicorn
from app.core.config import settings
from app.core.logging import logger

def main():
    """Run the application with uvicorn."""
    logger.info(f"Starting {settings.api.title} on {settings.api.host}:{settings.api.port}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Log level: {settings.logging.level}")

    uvicorn.run(
        "app.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.debug,
        log_level=settings.logging.level.lower(),
        access_log=True,
    )

if __name__ == "__main__":
    main()
