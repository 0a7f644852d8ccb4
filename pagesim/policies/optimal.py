from __future__ import annotations

import math
from collections import defaultdict, deque
from typing import DefaultDict, Deque, Iterable, List, Optional, Set, Tuple

from ..errors import InvalidConfiguration
from ..policy_base import AccessOutcome, ReplacementPolicy

NEVER = math.inf


class OptimalPolicy(ReplacementPolicy):
    """Clairvoyant baseline: evict the page whose next use lies farthest ahead.

    Offline only, since it needs the whole sequence up front via ``prime``,
    and every ``access`` must follow that sequence step by step.
    Pages that are never referenced again tie at ``NEVER``; the smallest page
    id among the tied pages is evicted.
    """

    name = "Optimal"

    def __init__(self, capacity: int, sequence: Optional[Iterable[int]] = None):
        super().__init__(capacity)
        self.future_positions: DefaultDict[int, Deque[int]] = defaultdict(deque)
        self.resident: Set[int] = set()
        self.current_step = 0
        self.sequence: Optional[Tuple[int, ...]] = None

        if sequence is not None:
            self.prime(sequence)

    def prime(self, sequence: Iterable[int]) -> None:
        self.sequence = tuple(sequence)
        self.future_positions.clear()
        for index, page_id in enumerate(self.sequence):
            self.future_positions[page_id].append(index)
        self.current_step = 0

    def _check_step(self, page_id: int) -> None:
        if self.sequence is None:
            raise InvalidConfiguration("OptimalPolicy needs the reference sequence; call prime() first")
        if self.current_step >= len(self.sequence):
            raise InvalidConfiguration(
                f"Access past the end of the primed sequence ({len(self.sequence)} references)"
            )
        expected = self.sequence[self.current_step]
        if page_id != expected:
            raise InvalidConfiguration(
                f"Page {page_id} does not match primed page {expected} at step {self.current_step}"
            )

    def next_use(self, page_id: int) -> float:
        positions = self.future_positions.get(page_id)
        return positions[0] if positions else NEVER

    def _select_victim(self) -> int:
        return max(self.resident, key=lambda page: (self.next_use(page), -page))

    def access(self, page_id: int) -> AccessOutcome:
        self._check_step(page_id)
        self.last_victim = None
        self.future_positions[page_id].popleft()

        if page_id in self.resident:
            outcome = AccessOutcome.HIT
        else:
            outcome = AccessOutcome.FAULT
            if len(self.resident) >= self.capacity:
                victim = self._select_victim()
                self.resident.remove(victim)
                self.last_victim = victim
            self.resident.add(page_id)

        self.current_step += 1
        return self._record(outcome)

    def resident_pages(self) -> List[int]:
        return sorted(self.resident)
