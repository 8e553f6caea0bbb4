"""Append-only debug event log."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from sales_app.config import DEBUG_LOG_PATH


def log_debug(message: str, path: str | None = None) -> None:
    """Write one timestamped event line to the debug log."""
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_file = Path(path or DEBUG_LOG_PATH)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with log_file.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
