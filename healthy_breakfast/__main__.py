"""Run the menu backend with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from healthy_breakfast.config import get_settings

logger = logging.getLogger("healthy_breakfast")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend running on port %s", settings.port)
    uvicorn.run(
        "healthy_breakfast.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
