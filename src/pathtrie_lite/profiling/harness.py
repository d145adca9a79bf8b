"""Profiling harness: trie vs naive path matching.

Builds both matchers from the same generated route table, replays the
same request stream through each, and records build time, query time
and how often the two disagreed (which should be never).
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from pathtrie_lite.profiling.load_generator import LoadGenerator
from pathtrie_lite.trie.matcher import GlobPathMatcher
from pathtrie_lite.trie.naive import NaivePathMatcher

log = logging.getLogger(__name__)


@dataclass(slots=True)
class MatchingResult:
    """Timing results from a single harness run."""
    total_requests: int
    pattern_count: int
    node_count: int
    trie_memory_bytes: int
    trie_build_time_ms: float
    trie_match_time_ms: float
    naive_match_time_ms: float
    hits: int
    mismatches: int
    cprofile_stats: str | None = None

    @property
    def trie_requests_per_sec(self) -> float:
        if self.trie_match_time_ms <= 0:
            return 0.0
        return self.total_requests / (self.trie_match_time_ms / 1000)

    @property
    def naive_requests_per_sec(self) -> float:
        if self.naive_match_time_ms <= 0:
            return 0.0
        return self.total_requests / (self.naive_match_time_ms / 1000)


def run_matching(
    total_requests: int = 10_000,
    num_patterns: int = 200,
    num_paths: int = 500,
    case_insensitive: bool = False,
    seed: int = 42,
    profile: bool = False,
) -> MatchingResult:
    """Replay a generated workload through the trie and the naive matcher.

    If profile=True, the trie query loop runs under cProfile and the
    stats are included in the result.
    """
    gen = LoadGenerator(
        num_patterns=num_patterns,
        num_paths=num_paths,
        total_requests=total_requests,
        seed=seed,
    )
    requests = gen.generate()

    t0 = time.perf_counter()
    trie = GlobPathMatcher.from_patterns(gen.patterns, case_insensitive=case_insensitive)
    build_ms = (time.perf_counter() - t0) * 1000

    naive = NaivePathMatcher(case_insensitive=case_insensitive)
    naive.add_paths(gen.patterns)

    trie_results: list[bool] = []

    def _run_trie() -> None:
        match = trie.match
        for req in requests:
            trie_results.append(match(req.path))

    cprofile_text = None
    t0 = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run_trie()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run_trie()
    trie_ms = (time.perf_counter() - t0) * 1000

    t0 = time.perf_counter()
    naive_results = [naive.match(req.path) for req in requests]
    naive_ms = (time.perf_counter() - t0) * 1000

    mismatches = sum(1 for a, b in zip(trie_results, naive_results) if a != b)
    if mismatches:
        log.warning("trie and naive matcher disagreed on %d requests", mismatches)

    return MatchingResult(
        total_requests=total_requests,
        pattern_count=trie.pattern_count,
        node_count=trie.node_count(),
        trie_memory_bytes=trie.memory_usage_bytes(),
        trie_build_time_ms=build_ms,
        trie_match_time_ms=trie_ms,
        naive_match_time_ms=naive_ms,
        hits=sum(trie_results),
        mismatches=mismatches,
        cprofile_stats=cprofile_text,
    )
