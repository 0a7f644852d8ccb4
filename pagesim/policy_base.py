from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .errors import InvalidConfiguration


class AccessOutcome(str, Enum):
    HIT = "hit"
    FAULT = "fault"


def validate_capacity(capacity: object) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidConfiguration(f"Capacity must be an integer, got {capacity!r}")
    if capacity <= 0:
        raise InvalidConfiguration(f"Capacity must be a positive integer, got {capacity}")
    return capacity


class ReplacementPolicy(ABC):
    """A fixed-capacity resident set plus the bookkeeping one policy needs to pick a victim."""

    name: str = ""

    def __init__(self, capacity: int):
        self.capacity = validate_capacity(capacity)
        self.last_victim: Optional[int] = None
        self.hits = 0
        self.faults = 0

    def prime(self, sequence: Iterable[int]) -> None:
        """Give the policy the whole reference sequence before replay. Online policies ignore it."""

    @abstractmethod
    def access(self, page_id: int) -> AccessOutcome:
        """Reference a page; return HIT if it was resident, FAULT otherwise."""

    @abstractmethod
    def resident_pages(self) -> List[int]:
        """Pages currently held, in the policy's internal order."""

    def _record(self, outcome: AccessOutcome) -> AccessOutcome:
        if outcome is AccessOutcome.HIT:
            self.hits += 1
        else:
            self.faults += 1
        return outcome

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "faults": self.faults, "resident": len(self.resident_pages())}
