# pdfmerger/settings.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "SIMPLE_PDF_MERGER_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_directory() -> str:
    # Prefer Documents when it exists; otherwise fall back to a known existing folder.
    home_dir = Path.home()
    candidates = [home_dir / "Documents", home_dir / "Desktop", home_dir]
    return str(next((p for p in candidates if p.exists()), home_dir))


@dataclass
class AppSettings:
    log_level: str = "WARNING"
    initial_directory: str = field(default_factory=default_directory)
    window_width: int = 600
    window_height: int = 400


def _int_setting(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric setting %r", value)
        return default
    return number if number > 0 else default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    """Build settings from defaults and SIMPLE_PDF_MERGER_* environment variables.

    Nothing is read from or written to disk.
    """
    env = os.environ if environ is None else environ
    settings = AppSettings()

    level = env.get(ENV_PREFIX + "LOG_LEVEL", "").strip().upper()
    if level in LOG_LEVELS:
        settings.log_level = level

    start_dir = env.get(ENV_PREFIX + "START_DIR")
    if start_dir and os.path.isdir(start_dir):
        settings.initial_directory = start_dir

    settings.window_width = _int_setting(env.get(ENV_PREFIX + "WIDTH"), settings.window_width)
    settings.window_height = _int_setting(env.get(ENV_PREFIX + "HEIGHT"), settings.window_height)
    return settings
