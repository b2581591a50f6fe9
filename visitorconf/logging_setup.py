from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import CFG, VisitorSettings

_LOG_SETUP_DONE = False
_ACTIVE_LOG_FILE: Optional[Path] = None


def _log_level(settings: VisitorSettings) -> int:
    raw = str(settings.log_level or "INFO").strip().upper()
    level = getattr(logging, raw, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _runtime_formatter() -> logging.Formatter:
    return logging.Formatter("%(asctime)s %(levelname)s %(process)d %(threadName)s %(name)s | %(message)s")


def configure_runtime_logging(settings: Optional[VisitorSettings] = None) -> None:
    global _LOG_SETUP_DONE
    global _ACTIVE_LOG_FILE
    if _LOG_SETUP_DONE:
        return

    settings = settings or CFG
    level = _log_level(settings)
    root = logging.getLogger()
    root.setLevel(level)

    fmt = _runtime_formatter()

    # Keep stdout logging when root has no handlers (development mode).
    if not root.handlers:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(level)
        sh.setFormatter(fmt)
        setattr(sh, "_visitorconf_handler", "stdout")
        root.addHandler(sh)

    raw = str(settings.log_file or "").strip()
    if raw:
        log_path = Path(raw)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        already = False
        for h in root.handlers:
            if (
                getattr(h, "_visitorconf_handler", "") == "file"
                and getattr(h, "baseFilename", "") == str(log_path.resolve())
            ):
                already = True
                break
        if not already:
            fh = RotatingFileHandler(
                str(log_path),
                maxBytes=int(settings.log_max_bytes),
                backupCount=int(settings.log_backup_count),
                encoding="utf-8",
            )
            fh.setLevel(level)
            fh.setFormatter(fmt)
            setattr(fh, "_visitorconf_handler", "file")
            root.addHandler(fh)
        _ACTIVE_LOG_FILE = log_path

    _LOG_SETUP_DONE = True
    logging.getLogger(__name__).info("runtime logging enabled")


def get_runtime_log_file() -> Optional[Path]:
    return _ACTIVE_LOG_FILE


def reset_runtime_logging() -> None:
    """Remove the handlers installed by configure_runtime_logging()."""
    global _LOG_SETUP_DONE
    global _ACTIVE_LOG_FILE
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_visitorconf_handler", ""):
            root.removeHandler(h)
            h.close()
    _LOG_SETUP_DONE = False
    _ACTIVE_LOG_FILE = None
