from __future__ import annotations

from typing import Dict, List

from ..policy_base import AccessOutcome, ReplacementPolicy


class LRUPolicy(ReplacementPolicy):
    """Least-recently-used, tracked as the sequence index of each page's last reference.

    Indices grow strictly, so no two resident pages share a timestamp and the
    minimum is always a single page.
    """

    name = "LRU"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.last_used: Dict[int, int] = {}
        self.clock = 0

    def access(self, page_id: int) -> AccessOutcome:
        self.last_victim = None
        if page_id in self.last_used:
            outcome = AccessOutcome.HIT
        else:
            outcome = AccessOutcome.FAULT
            if len(self.last_used) >= self.capacity:
                victim = min(self.last_used, key=self.last_used.__getitem__)
                del self.last_used[victim]
                self.last_victim = victim

        self.last_used[page_id] = self.clock
        self.clock += 1
        return self._record(outcome)

    def resident_pages(self) -> List[int]:
        return list(self.last_used)
