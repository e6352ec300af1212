import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvpane")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "csvpane.log")

# default settings
WINDOW_ROWS_DEFAULT = 20
IGNORE_CASE_COLUMNS_DEFAULT = False
LOG_LEVEL_DEFAULT = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def ensure_config_dirs():
    try:
        os.makedirs(CONFIG_DIR, exist_ok=True)
    except OSError:
        return False
    return True


def load_config():
    cfg = {
        "WINDOW_ROWS": WINDOW_ROWS_DEFAULT,
        "IGNORE_CASE_COLUMNS": IGNORE_CASE_COLUMNS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    view = data.get("view")
    if isinstance(view, dict):
        rows = view.get("window_rows")
        # bool is an int subclass; reject it explicitly
        if isinstance(rows, int) and not isinstance(rows, bool) and rows > 0:
            cfg["WINDOW_ROWS"] = rows
        ignore_case = view.get("ignore_case_columns")
        if isinstance(ignore_case, bool):
            cfg["IGNORE_CASE_COLUMNS"] = ignore_case

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    return cfg
