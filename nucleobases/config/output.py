from typing import Dict

from .base import AbstractConfig


class OutputConfig(AbstractConfig):
    def __init__(self, cfg_dict: Dict[str, str]):
        super().__init__("Output", cfg_dict)
        self.separator: str = self._parse_separator()
        self.header: bool = self.get_bool("HEADER") if self.has_item("HEADER") else True

    def _parse_separator(self) -> str:
        if not self.has_item("SEPARATOR"):
            return "\t"
        # Surrounding whitespace is stripped by the INI parser, so a tab must be spelled out.
        token = self.get_item("SEPARATOR")
        if token.strip().lower() == "tab":
            return "\t"
        return token
