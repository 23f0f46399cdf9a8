from __future__ import annotations

from typing import Protocol, Sequence

from .model import Customer, CustomerTotals


class CustomerRepository(Protocol):
    def list_all(self) -> Sequence[Customer]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def search_with_totals(self, query: str) -> Sequence[CustomerTotals]:
        raise NotImplementedError
