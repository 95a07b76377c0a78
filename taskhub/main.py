from __future__ import annotations

import logging
import sys

import uvicorn

from taskhub.api.app import create_app
from taskhub.config import SETTINGS
from taskhub.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(SETTINGS)
    try:
        app = create_app(SETTINGS)
    except Exception as exc:  # noqa: BLE001
        logger.critical("Could not initialise the task store: %s", exc)
        sys.exit(1)

    logger.info("API available at http://%s:%d", SETTINGS.api_host, SETTINGS.api_port)
    uvicorn.run(app, host=SETTINGS.api_host, port=SETTINGS.api_port, log_config=None)


if __name__ == "__main__":
    main()
