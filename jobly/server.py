"""Process entrypoint: configure logging and serve the API with uvicorn."""
import logging

import uvicorn

from jobly.core import config
from jobly.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main():
    setup_logging(config.LOG_LEVEL)
    logger.info(f"Starting Jobly API on http://localhost:{config.PORT}")
    uvicorn.run("jobly.main:app", host="0.0.0.0", port=config.PORT, log_config=None)


if __name__ == "__main__":
    main()
