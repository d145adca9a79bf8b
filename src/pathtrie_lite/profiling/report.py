"""Report generation for profiling results.

Formats MatchingResult data into human-readable tables for terminal
output.
"""
from __future__ import annotations

from pathtrie_lite.profiling.harness import MatchingResult


def _speedup(old: float, new: float) -> str:
    if new <= 0:
        return "inf"
    return f"{old / new:.1f}x"


def format_report(result: MatchingResult, label: str = "Path matching") -> str:
    """Format a MatchingResult as a readable report string."""
    lines = [
        f"=== {label} ===",
        f"Requests:          {result.total_requests:,}",
        f"Patterns:          {result.pattern_count:,}",
        f"Trie nodes:        {result.node_count:,}",
        f"Trie memory:       {result.trie_memory_bytes / 1024:.1f} KiB",
        f"Trie build:        {result.trie_build_time_ms:.1f} ms",
        f"Hits:              {result.hits:,} "
        f"({result.hits / max(result.total_requests, 1) * 100:.1f}%)",
        f"Mismatches:        {result.mismatches:,}",
    ]
    return "\n".join(lines)


def format_comparison(result: MatchingResult) -> str:
    """Format the trie vs naive query timing table."""
    lines = [
        f"{'Metric':<30} {'Naive':>12} {'Trie':>12} {'Speedup':>10}",
        "-" * 66,
        f"{'Match time (ms)':<30} {result.naive_match_time_ms:>12.1f} "
        f"{result.trie_match_time_ms:>12.1f} "
        f"{_speedup(result.naive_match_time_ms, result.trie_match_time_ms):>10}",
        f"{'Throughput (req/sec)':<30} {result.naive_requests_per_sec:>12,.0f} "
        f"{result.trie_requests_per_sec:>12,.0f} "
        f"{_speedup(result.trie_requests_per_sec, result.naive_requests_per_sec):>10}",
    ]
    return "\n".join(lines)
