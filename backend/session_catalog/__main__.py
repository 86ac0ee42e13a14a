import uvicorn

from session_catalog.config import get_settings
from session_catalog.logging_config import configure_logging, get_logging_config


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "session_catalog.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=get_logging_config(settings.log_level),
    )


if __name__ == "__main__":
    main()
