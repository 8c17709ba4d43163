from typing import Dict

from .base import AbstractConfig
from .logging import LoggingConfig
from .output import OutputConfig


class NucleobasesConfig(AbstractConfig):
    def __init__(self, cfg_dict: Dict[str, Dict[str, str]]):
        super().__init__("Nucleobases", cfg_dict)
        self.logging_cfg: LoggingConfig = LoggingConfig(self._section("Logging"))
        self.output_cfg: OutputConfig = OutputConfig(self._section("Output"))

    def _section(self, key: str) -> Dict[str, str]:
        if self.has_item(key):
            return self.get_item(key)
        return {}

    @staticmethod
    def default() -> 'NucleobasesConfig':
        return NucleobasesConfig({})
