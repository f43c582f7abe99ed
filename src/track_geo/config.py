"""Environment-driven settings for the command-line front end."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from track_geo.geo import PROXIMITY_THRESHOLD_FT

logger = logging.getLogger(__name__)

ENV_THRESHOLD_FT = "TRACK_GEO_THRESHOLD_FT"
ENV_LOG_LEVEL = "TRACK_GEO_LOG_LEVEL"
ENV_STRICT = "TRACK_GEO_STRICT"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class Settings:
    """Defaults applied by the CLI when no option overrides them."""

    proximity_threshold_ft: float = PROXIMITY_THRESHOLD_FT
    log_level: str = "WARNING"
    strict: bool = False


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Read settings from the environment, falling back to defaults on bad values."""
    env = os.environ if environ is None else environ
    settings = Settings()

    raw_threshold = env.get(ENV_THRESHOLD_FT)
    if raw_threshold:
        try:
            settings.proximity_threshold_ft = float(raw_threshold)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a number", ENV_THRESHOLD_FT, raw_threshold)

    raw_level = env.get(ENV_LOG_LEVEL)
    if raw_level:
        if raw_level.upper() in LOG_LEVELS:
            settings.log_level = raw_level.upper()
        else:
            logger.warning("Ignoring %s=%r: unknown log level", ENV_LOG_LEVEL, raw_level)

    raw_strict = env.get(ENV_STRICT)
    if raw_strict:
        settings.strict = raw_strict.strip().lower() in ("1", "true", "yes", "on")

    return settings
