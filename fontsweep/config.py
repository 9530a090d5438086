"""
config.py
Load configuration from TOML (Python 3.11+ tomllib).
Search order:
  1) explicit --config path (must exist)
  2) ./fontsweep.toml in the working directory
  3) built-in defaults
"""

from __future__ import annotations
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from .discover import FONT_MAX_FILE_SIZE, FONT_SCAN_MAX_DEPTH
from .types import Config

DEFAULT_CONFIG_NAME = "fontsweep.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _gv(d: Dict[str, Any], path: list[str], default=None):
    cur = d
    for k in path:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _load_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def find_config(path_arg: str | None) -> Optional[Path]:
    """Pick the config path based on CLI arg and availability; None means defaults."""
    if path_arg:
        # User explicitly specified a config - it must exist
        p = Path(path_arg)
        if not p.exists():
            raise FileNotFoundError(f"Specified config file does not exist: {path_arg}")
        return p

    p = Path.cwd() / DEFAULT_CONFIG_NAME
    if p.exists():
        return p
    return None


def load_config(path: Optional[Path]) -> Config:
    cfg = _load_toml(path) if path is not None else {}

    def gv(keys, default=None):
        return _gv(cfg, keys, default)

    max_depth = gv(["scan", "max_depth"])
    if max_depth is not None:
        max_depth = int(max_depth)
        if max_depth < 0:
            max_depth = None

    log_level = str(gv(["runtime", "log_level"], "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"runtime.log_level must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    filters = gv(["scan", "name_filters"], [])
    if not isinstance(filters, list):
        raise ValueError("scan.name_filters must be a list of strings")

    summary_dir = gv(["output", "summary_dir"])

    return Config(
        scan_recursive=bool(gv(["scan", "recursive"], False)),
        scan_include_hidden=bool(gv(["scan", "include_hidden"], False)),
        scan_max_depth=max_depth,
        scan_follow_symlinks=bool(gv(["scan", "follow_symlinks"], False)),
        scan_name_filters=[str(f) for f in filters],
        scan_max_entry_size_mb=int(gv(["scan", "max_entry_size_mb"], 0)),
        copy_overwrite=bool(gv(["copy", "overwrite"], False)),
        copy_max_depth=int(gv(["copy", "max_depth"], FONT_SCAN_MAX_DEPTH)),
        copy_max_file_size_mb=int(gv(["copy", "max_file_size_mb"], FONT_MAX_FILE_SIZE // (1024 * 1024))),
        log_level=log_level,
        summary_dir=Path(summary_dir).expanduser() if summary_dir else None,
    )
