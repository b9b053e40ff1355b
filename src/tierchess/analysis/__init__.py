"""Read-only position advice for human players."""

from tierchess.analysis.hints import HintAdvisor

__all__ = [
    "HintAdvisor",
]
