"""Rental admin API main entry point."""

import uvicorn

from .app import create_app, load_environment
from .config.logging_config import LoggingConfig
from .config.settings import get_settings

# .env.local overrides must be in place before settings are first read
load_environment()
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "rental_admin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
