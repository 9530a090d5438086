"""
util.py
Cross-cutting utilities:
- Elapsed wall-clock milliseconds
- Directory creation with readable errors
- Atomic JSON writing for run summaries (dataclasses, Paths and enums included)
- Human-readable byte sizes
"""

from __future__ import annotations
import dataclasses, json, time
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

_SIZE_UNITS = ("B", "KB", "MB", "GB")


def elapsed_ms(started: float) -> int:
    return max(0, int((time.time() - started) * 1000))


def utc_datestr(fmt):
    return datetime.now(timezone.utc).strftime(fmt)


def ensure_dir(p: Path):
    """Create directory with better error reporting."""
    try:
        p.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        raise PermissionError(f"Cannot create directory {p} - insufficient permissions")
    except FileExistsError:
        raise FileExistsError(f"Cannot create directory {p}: a file is in the way")
    except OSError as e:
        raise OSError(f"Cannot create directory {p}: {e}")


def to_jsonable(obj):
    """Convert result dataclasses into JSON-friendly dicts/lists/strings."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted(to_jsonable(x) for x in obj)
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    return obj


def dumps_json(obj) -> str:
    return json.dumps(to_jsonable(obj), indent=2, sort_keys=True, ensure_ascii=False)


def write_json(path: Path, obj):
    ensure_dir(path.parent)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(dumps_json(obj), encoding="utf-8")
    tmp.replace(path)


def format_file_size(size: int) -> str:
    """Integer bytes below 1 KB, two decimals in KB/MB/GB above."""
    value = float(size)
    unit = 0
    while value >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {_SIZE_UNITS[0]}"
    return f"{value:.2f} {_SIZE_UNITS[unit]}"
