from __future__ import annotations

from pathlib import Path

# Log file used when EXPLORER_LOG_TO_FILE is set; lives under <repo>/storage/logs.
DEFAULT_LOGFILE = Path(__file__).resolve().parent.parent / "storage" / "logs" / "explorer.log"
