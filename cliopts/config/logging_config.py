# cliopts/config/logging_config.py

import logging
import logging.config
import os
from typing import Any, Dict, List

from cliopts.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Configure application-wide logging from Settings.

    - Root logger: console (stderr), plus .logs/app/cliopts.log when
      `settings.log_to_file` is set.
    """

    # ------------------------------------------------------------------ #
    # 1) Global log level
    # ------------------------------------------------------------------ #
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.captureWarnings(True)

    # ------------------------------------------------------------------ #
    # 2) Handlers
    # ------------------------------------------------------------------ #
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }

    if settings.log_to_file:
        app_dir = os.path.join(settings.logs_dir, "app")
        os.makedirs(app_dir, exist_ok=True)

        handlers["app_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "standard",
            "filename": os.path.join(app_dir, "cliopts.log"),
            "mode": "a",
            "maxBytes": 10_000_000,   # 10 MB
            "backupCount": 5,
            "encoding": "utf-8",
        }

    handler_names: List[str] = list(handlers)

    # ------------------------------------------------------------------ #
    # 3) dictConfig
    # ------------------------------------------------------------------ #
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "py.warnings": {
                "handlers": handler_names,
                "level": "WARNING",
                "propagate": False,
            },
        },
        "root": {
            "handlers": handler_names,
            "level": level,
        },
    }

    logging.config.dictConfig(config)
