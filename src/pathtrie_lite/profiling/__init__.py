"""Profiling harness and load generation for pathtrie-lite."""

from pathtrie_lite.profiling.harness import MatchingResult, run_matching
from pathtrie_lite.profiling.load_generator import LoadGenerator, LoadRequest
from pathtrie_lite.profiling.report import format_comparison, format_report

__all__ = [
    "LoadGenerator",
    "LoadRequest",
    "MatchingResult",
    "format_comparison",
    "format_report",
    "run_matching",
]
