"""Simulate a route table and request traffic for profiling.

Pattern mix (per pattern):
  - 50% exact routes      "/api/v2/users/settings"
  - 30% trailing wildcard "/static/css/*"
  - 20% inner wildcard    "/api/*/orders"

Candidate paths follow a Zipf-like distribution over a pool of
concrete paths derived from the patterns (top 10% of paths get most of
the traffic), with a share of paths that match nothing so the miss
path gets exercised too.
"""
from __future__ import annotations

import random
from dataclasses import dataclass

_SECTIONS = [
    "api", "static", "assets", "admin", "auth", "media",
    "docs", "internal", "webhooks", "metrics",
]
_SEGMENTS = [
    "users", "orders", "items", "settings", "billing", "reports",
    "v1", "v2", "v3", "css", "js", "img", "login", "logout",
    "search", "export", "status", "health", "events", "profile",
]
_FILES = ["index.html", "site.css", "app.js", "logo.png", "data.json"]


@dataclass(slots=True)
class LoadRequest:
    """A synthetic request path for the profiling harness."""
    path: str


class LoadGenerator:
    """Generate route patterns and request paths deterministically."""

    __slots__ = (
        "_rng", "_patterns", "_paths", "_total_requests",
        "_miss_rate", "_zipf_weights",
    )

    def __init__(
        self,
        num_patterns: int = 200,
        num_paths: int = 500,
        total_requests: int = 10_000,
        miss_rate: float = 0.2,
        seed: int = 42,
    ) -> None:
        if num_patterns <= 0:
            raise ValueError(f"num_patterns must be positive, got {num_patterns}")
        if num_paths <= 0:
            raise ValueError(f"num_paths must be positive, got {num_paths}")
        if not (0.0 <= miss_rate <= 1.0):
            raise ValueError(f"miss_rate must be in [0, 1], got {miss_rate}")
        self._rng = random.Random(seed)
        self._total_requests = total_requests
        self._miss_rate = miss_rate
        self._patterns = self._generate_patterns(num_patterns)
        self._paths = self._generate_paths(num_paths)
        # Zipf weights: path i has weight 1/(i+1)
        self._zipf_weights = [1.0 / (i + 1) for i in range(len(self._paths))]

    def _segment(self) -> str:
        return self._rng.choice(_SEGMENTS)

    def _generate_patterns(self, n: int) -> list[str]:
        patterns = []
        for _ in range(n):
            section = self._rng.choice(_SECTIONS)
            depth = self._rng.randint(1, 3)
            parts = [section] + [self._segment() for _ in range(depth)]
            roll = self._rng.random()
            if roll < 0.5:
                pattern = "/" + "/".join(parts)
            elif roll < 0.8:
                pattern = "/" + "/".join(parts[:-1]) + "/*"
            else:
                parts[1] = "*"
                pattern = "/" + "/".join(parts)
            patterns.append(pattern)
        return patterns

    def _expand(self, pattern: str) -> str:
        """Replace every "*" with something concrete."""
        out = []
        for piece in pattern.split("*"):
            out.append(piece)
            out.append(f"{self._segment()}/{self._rng.choice(_FILES)}")
        return "".join(out[:-1])

    def _generate_paths(self, n: int) -> list[str]:
        paths = []
        for _ in range(n):
            if self._rng.random() < self._miss_rate:
                paths.append(f"/unrouted/{self._segment()}/{self._segment()}")
            else:
                paths.append(self._expand(self._rng.choice(self._patterns)))
        return paths

    @property
    def patterns(self) -> list[str]:
        return self._patterns

    @property
    def paths(self) -> list[str]:
        return self._paths

    def generate(self) -> list[LoadRequest]:
        """Generate all requests as a list (not iterator, for profiling)."""
        picks = self._rng.choices(
            range(len(self._paths)),
            weights=self._zipf_weights,
            k=self._total_requests,
        )
        return [LoadRequest(path=self._paths[i]) for i in picks]
