import json
import os

from loguru import logger

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "dyngrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
ROW_EXTENT_DEFAULT = 24.0
OVERSCAN_DEFAULT = 3
SCROLL_THROTTLE_MS_DEFAULT = 16.0
POOL_SIZE_DEFAULT = 200


def default_config():
    return {
        "ROW_EXTENT": ROW_EXTENT_DEFAULT,
        "OVERSCAN": OVERSCAN_DEFAULT,
        "SCROLL_THROTTLE_MS": SCROLL_THROTTLE_MS_DEFAULT,
        "POOL_SIZE": POOL_SIZE_DEFAULT,
    }


def _number(value, minimum, integer=False):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value < minimum:
        return None
    return int(value) if integer else float(value)


def load_config():
    cfg = default_config()

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Ignoring unreadable config {CONFIG_JSON}: {exc}")
        return cfg

    grid = data.get("grid") if isinstance(data, dict) else None
    if not isinstance(grid, dict):
        return cfg

    row_extent = _number(grid.get("row_extent"), 1)
    if row_extent is not None:
        cfg["ROW_EXTENT"] = row_extent

    overscan = _number(grid.get("overscan"), 0, integer=True)
    if overscan is not None:
        cfg["OVERSCAN"] = overscan

    throttle = _number(grid.get("scroll_throttle_ms"), 0)
    if throttle is not None:
        cfg["SCROLL_THROTTLE_MS"] = throttle

    pool_size = _number(grid.get("pool_size"), 1, integer=True)
    if pool_size is not None:
        cfg["POOL_SIZE"] = pool_size

    return cfg
