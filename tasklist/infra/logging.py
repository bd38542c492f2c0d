from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from tasklist.config import PROJECT_ROOT, SETTINGS, Settings


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or SETTINGS

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if settings.log_to_file:
        log_dir = PROJECT_ROOT / settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "task_list.log"

        file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3)
        file_handler.setFormatter(formatter)
        handlers.insert(0, file_handler)

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=handlers,
        force=True,
    )
