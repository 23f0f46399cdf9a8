from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RevenueBucket:
    """Revenue for one month (read-only)."""

    month: str
    revenue: int
