"""Process entry point: logging setup and the uvicorn server."""

from __future__ import annotations

import logging

import uvicorn

from discussion_tools.infrastructure.config import Settings, get_settings

logger = logging.getLogger("discussion_tools")


def configure_logging(settings: Settings) -> None:
    """Apply the configured level; httpx request lines only when asked for."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    if not settings.log_http_requests:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> None:
    """Start the discussion tool server."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "Serving discussion tools on %s:%d (GraphQL %s, REST %s, token %s)",
        settings.host,
        settings.port,
        settings.github_graphql_url,
        settings.github_api_url,
        "configured" if settings.github_token else "not set",
    )
    uvicorn.run(
        "discussion_tools.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
