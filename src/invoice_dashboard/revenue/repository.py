from __future__ import annotations

from typing import Protocol, Sequence

from .model import RevenueBucket


class RevenueRepository(Protocol):
    def list_all(self) -> Sequence[RevenueBucket]:
        raise NotImplementedError
