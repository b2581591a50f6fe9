from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int, lo: int, hi: int) -> int:
    raw = str(os.getenv(name, str(default)) or "").strip()
    try:
        v = int(float(raw))
    except (ValueError, OverflowError):
        v = int(default)
    return max(lo, min(hi, v))


@dataclass
class VisitorSettings:
    # Logging
    log_level: str = os.getenv("VISITORCONF_LOG_LEVEL", "INFO")
    # empty: stdout only
    log_file: str = os.getenv("VISITORCONF_LOG_FILE", "")
    log_max_bytes: int = _env_int("VISITORCONF_LOG_MAX_BYTES", 5 * 1024 * 1024, 256 * 1024, 512 * 1024 * 1024)
    log_backup_count: int = _env_int("VISITORCONF_LOG_BACKUP_COUNT", 5, 1, 50)


CFG = VisitorSettings()
