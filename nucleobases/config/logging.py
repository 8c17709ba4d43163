import logging
from pathlib import Path
from typing import Dict, Optional

from .base import AbstractConfig, ConfigurationParseError


class LoggingConfig(AbstractConfig):
    def __init__(self, cfg_dict: Dict[str, str]):
        super().__init__("Logging", cfg_dict)
        self.level: int = self._parse_level()
        self.ini_path: Optional[Path] = self.get_path("INI") if self.has_item("INI") else None

    def _parse_level(self) -> int:
        if not self.has_item("LEVEL"):
            return logging.INFO
        token = self.get_str("LEVEL").upper()
        level = logging.getLevelName(token)
        if not isinstance(level, int):
            raise ConfigurationParseError(
                f"Field `LEVEL`: Expected a logging level name, got value `{token}`"
            )
        return level
