"""
Logging configuration.

We use a YAML logging config (`src/geocenter/config/logging.yaml`) and then apply
runtime overrides from settings (e.g., `GEOCENTER_LOG_LEVEL`).

The library itself only emits records; applications call `configure_logging()`.
"""

from __future__ import annotations

import copy
import logging.config

from geocenter.config.settings import Settings, get_logging_config, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    settings = settings or get_settings()
    # The cached dict is shared between calls.
    config = copy.deepcopy(get_logging_config())

    level = settings.app.log_level.upper()
    config.setdefault("root", {})["level"] = level
    for handler in config.get("handlers", {}).values():
        if isinstance(handler, dict) and "level" in handler:
            handler["level"] = level

    logging.config.dictConfig(config)
