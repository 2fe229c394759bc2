from .reader import TokenReader
from .runner import RunSummary, ScriptRunner

__all__ = [
    "TokenReader",
    "RunSummary",
    "ScriptRunner",
]
