"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

LOG_LEVEL_ENV = "LIST_COLORS_LOG_LEVEL"
RGB_TXT_ENV = "LIST_COLORS_RGB_TXT"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Settings for one run of the command."""
    log_level: str = DEFAULT_LOG_LEVEL
    rgb_txt: Optional[Path] = None  # None = bundled table

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Set LIST_COLORS_LOG_LEVEL to a logging level name (e.g. DEBUG) and
        LIST_COLORS_RGB_TXT to read colors from another rgb.txt file.
        """
        env = os.environ if environ is None else environ
        level = env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
        rgb_txt = None
        if path := env.get(RGB_TXT_ENV):
            rgb_txt = Path(path).expanduser()
        return cls(log_level=level, rgb_txt=rgb_txt)
