# app/server.py
import logging

import uvicorn

from .config import get_settings
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def run():
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Server is running on http://localhost:%d", settings.port)
    # log_config=None keeps uvicorn on the rich handler configured above
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
