"""Configuration management for Wochenplan."""

import datetime
import json
import os
from pathlib import Path
from typing import List

from .view import NameOrder

DEFAULT_CONFIG = {
    "workbook_path": "TMS-WorkSchedules.xlsx",
    "week_anchor": "2025-09-13",
    "excluded_sheets": ["NewEmployee", "FormTools"],
    "name_order": "first",
    "office_hours_only": False,
}


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".config"
    d = base / "wochenplan"
    d.mkdir(parents=True, exist_ok=True)
    return d


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_config() -> dict:
    path = get_config_path()
    if path.exists():
        with open(path) as f:
            cfg = json.load(f)
    else:
        cfg = {}

    # Merge with defaults so new keys are always present
    merged = {**DEFAULT_CONFIG, **cfg}

    # Save if newly created
    if not path.exists():
        save_config(merged)

    return merged


def save_config(cfg: dict) -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(cfg, f, indent=2, ensure_ascii=False)


def get_workbook_path(cfg: dict) -> Path:
    return Path(os.path.expanduser(cfg["workbook_path"]))


def get_week_anchor(cfg: dict) -> datetime.date:
    """Anchor date of week type 1, stored as YYYY-MM-DD."""
    value = cfg.get("week_anchor", DEFAULT_CONFIG["week_anchor"])
    try:
        return datetime.datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Ungueltiges Startdatum: '{value}'. Format: YYYY-MM-DD")


def get_excluded_sheets(cfg: dict) -> List[str]:
    return list(cfg.get("excluded_sheets", DEFAULT_CONFIG["excluded_sheets"]))


def get_name_order(cfg: dict) -> NameOrder:
    value = cfg.get("name_order", DEFAULT_CONFIG["name_order"])
    try:
        return NameOrder(value)
    except ValueError:
        raise ValueError(f"Ungueltige Sortierung: '{value}'. Erlaubt: first, last")
