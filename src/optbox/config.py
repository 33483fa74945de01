from __future__ import annotations

import logging
import os

from dataclasses import dataclass
from typing import Mapping


DEFAULT_WIDTH = 80
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    width: int = DEFAULT_WIDTH

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Read settings from the environment:

          OPTBOX_LOG_LEVEL  logging level name used by the console script
          COLUMNS           terminal width used to wrap help text
        """
        if environ is None:
            environ = os.environ

        log_level = environ.get("OPTBOX_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL

        try:
            width = int(environ["COLUMNS"])
        except (KeyError, ValueError):
            width = DEFAULT_WIDTH
        if width <= 0:
            width = DEFAULT_WIDTH

        return cls(log_level=log_level, width=width)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
