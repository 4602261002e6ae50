"""Run the Task Manager backend: ``python -m task_manager``."""

import logging

import uvicorn

from task_manager.config import HOST, PORT, settings
from task_manager.logging_setup import setup_logging
from task_manager.main import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Task Manager Backend running on %s:%d", HOST, PORT)
    # uvicorn exits the process if the port cannot be bound.
    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
