# clovo/config.py
"""
Simple settings persistence for Clovo.
Settings saved as JSON in %APPDATA%/Clovo/config.json (Windows) or ~/.clovo/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

from .generator import GeneratorOptions

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "data_dir": None,  # if None, storage.default_data_dir() is used
    "generate_length": 16,
    "passphrase_words": 4,
    "similarity_threshold": 0.7,
    "min_length": 8,
    "max_length": 64,
    "check_common": True,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "Clovo")
    else:
        d = os.path.join(os.path.expanduser("~"), ".clovo")
    os.makedirs(d, exist_ok=True)
    return d


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def generator_options_from_config(cfg: Dict[str, Any]) -> GeneratorOptions:
    return GeneratorOptions(
        min_length=int(cfg.get("min_length", DEFAULTS["min_length"])),
        max_length=int(cfg.get("max_length", DEFAULTS["max_length"])),
        check_common=bool(cfg.get("check_common", DEFAULTS["check_common"])),
    )
