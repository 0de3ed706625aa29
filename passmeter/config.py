# passmeter/config.py
"""
Simple settings persistence for PassMeter.
Settings saved as JSON in %APPDATA%/PassMeter/config.json (Windows) or ~/.passmeter/config.json (fallback).
PASSMETER_CONFIG overrides the file location.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .policy import DEFAULT_POLICY, Policy

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = DEFAULT_POLICY.to_dict()


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassMeter")
    return os.path.join(os.path.expanduser("~"), ".passmeter")


def config_path() -> str:
    override = os.getenv("PASSMETER_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return dict(DEFAULTS)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return dict(DEFAULTS)
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return dict(DEFAULTS)
    # merge defaults
    out = dict(DEFAULTS)
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.debug("Saved config to %s", p)
    return p


def load_policy(path: Optional[str] = None) -> Policy:
    """Policy from the settings file; raises PolicyError on bad values."""
    return Policy.from_mapping(load_config(path))
