from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from ..policy_base import AccessOutcome, ReplacementPolicy


class FIFOPolicy(ReplacementPolicy):

    name = "FIFO"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.queue: Deque[int] = deque()
        self.members: Set[int] = set()

    def access(self, page_id: int) -> AccessOutcome:
        self.last_victim = None
        if page_id in self.members:
            return self._record(AccessOutcome.HIT)

        if len(self.queue) >= self.capacity:
            evicted = self.queue.popleft()
            self.members.remove(evicted)
            self.last_victim = evicted

        self.queue.append(page_id)
        self.members.add(page_id)
        return self._record(AccessOutcome.FAULT)

    def resident_pages(self) -> List[int]:
        return list(self.queue)
