"""Page replacement policies compared by the simulator."""

from typing import Tuple, Type

from ..policy_base import ReplacementPolicy
from .fifo import FIFOPolicy
from .lru import LRUPolicy
from .optimal import OptimalPolicy
from .second_chance import SecondChancePolicy

# Report order; ties on success rate go to the earlier entry.
POLICIES: Tuple[Type[ReplacementPolicy], ...] = (
    FIFOPolicy,
    SecondChancePolicy,
    LRUPolicy,
    OptimalPolicy,
)

__all__ = ["POLICIES", "FIFOPolicy", "LRUPolicy", "OptimalPolicy", "SecondChancePolicy"]
