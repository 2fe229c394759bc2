from .paths import DEFAULT_LOGFILE
from .logger import configure_logging, get_logger
from .config import ExplorerSettings

__all__ = [
    "DEFAULT_LOGFILE",
    "configure_logging",
    "get_logger",
    "ExplorerSettings",
]
