"""Run the Series API with uvicorn: ``python -m series_api``."""
import logging

import uvicorn

from series_api.app import app
from series_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.getLogger(__name__).info(
        "Server running on http://localhost:%s", settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
