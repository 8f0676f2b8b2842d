import os
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "ENSEMBL_VARIATION_CONFIG"
# Default settings ship inside the package
CONFIG_PATH = Path(__file__).resolve().parent / "data" / "ensembl_variation.yml"

class EVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.database = data.get("database", {})
        self.pipeline = data.get("pipeline", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config(path: Path | None = None) -> 'EVConfig':
    path = path or config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return EVConfig(data)

_config_cache = None

def get_config() -> 'EVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache

def reset_config() -> None:
    global _config_cache
    _config_cache = None
