import os
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "FAMILY_TREE_CONFIG"
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_tree.yml"


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.tree = data.get("tree", {})
        self.debug = data.get("debug", False)

    @property
    def header(self) -> str:
        return self.tree.get("header", "Family Tree:")


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'FTConfig':
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
