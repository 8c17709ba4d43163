from abc import ABCMeta
from typing import Any, Dict, Iterator
from pathlib import Path


class ConfigurationParseError(Exception):
    pass


class AbstractConfig(metaclass=ABCMeta):
    def __init__(self, name: str, cfg_dict: Dict[str, Any]):
        self.name = name
        self.cfg_dict = cfg_dict

    @staticmethod
    def key_variants(key: str) -> Iterator[str]:
        yield key
        yield key.upper()
        yield key.lower()

    def has_item(self, key: str) -> bool:
        return any(key_to_try in self.cfg_dict for key_to_try in self.key_variants(key))

    def get_item(self, key: str) -> Any:
        for key_to_try in self.key_variants(key):
            if key_to_try in self.cfg_dict:
                return self.cfg_dict[key_to_try]
        raise ConfigurationParseError("Could not find key {} in configuration section '{}'.".format(
            key,
            self.name,
        ))

    def get_str(self, key: str) -> str:
        return self.get_item(key).strip()

    def get_bool(self, key: str) -> bool:
        item = self.get_str(key).lower()
        if item in ("true", "yes", "1"):
            return True
        elif item in ("false", "no", "0"):
            return False
        raise ConfigurationParseError(
            f"[{self.name}] Field `{key}`: Expected `bool`, got value `{item}`"
        )

    def get_path(self, key: str) -> Path:
        return Path(self.get_str(key))
