"""
Pipeline module: concurrent extraction over a log tree.

Implements the run state, the worker pool, and a full run that writes the
CSV only when no fatal error occurred.
"""

from .pool import ExtractionPool, extract_records
from .runner import RunSummary, run
from .state import RunState

__all__ = [
    "ExtractionPool",
    "extract_records",
    "RunState",
    "RunSummary",
    "run",
]
