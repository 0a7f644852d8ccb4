from __future__ import annotations

from typing import Dict, List

from ..policy_base import AccessOutcome, ReplacementPolicy


class SecondChancePolicy(ReplacementPolicy):
    """Clock algorithm: frames in a ring, one reference bit per frame, a hand that sweeps for a 0 bit."""

    name = "Second Chance"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.frames: List[int] = []
        self.bits: List[int] = []
        self.slots: Dict[int, int] = {}
        self.hand = 0

    def access(self, page_id: int) -> AccessOutcome:
        self.last_victim = None
        slot = self.slots.get(page_id)
        if slot is not None:
            self.bits[slot] = 1
            return self._record(AccessOutcome.HIT)

        if len(self.frames) < self.capacity:
            self.slots[page_id] = len(self.frames)
            self.frames.append(page_id)
            self.bits.append(1)
        else:
            self._replace(page_id)
        return self._record(AccessOutcome.FAULT)

    def _replace(self, page_id: int) -> None:
        # One pass clears every set bit, so the second pass must land on a 0.
        for _ in range(2 * self.capacity):
            if self.bits[self.hand] == 0:
                victim = self.frames[self.hand]
                del self.slots[victim]
                self.frames[self.hand] = page_id
                self.bits[self.hand] = 1
                self.slots[page_id] = self.hand
                self.hand = (self.hand + 1) % self.capacity
                self.last_victim = victim
                return
            self.bits[self.hand] = 0
            self.hand = (self.hand + 1) % self.capacity
        raise RuntimeError("clock sweep found no victim within two passes")

    def resident_pages(self) -> List[int]:
        return list(self.frames)
