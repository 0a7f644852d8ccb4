from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidConfiguration
from .reference import ReferenceGenerator
from .policy_base import validate_capacity

DEFAULT_LENGTH = 16
DEFAULT_PAGE_RANGE = 7
DEFAULT_CAPACITIES = (3, 4, 5)


@dataclass
class SimulationConfig:
    length: int = DEFAULT_LENGTH
    page_range: int = DEFAULT_PAGE_RANGE
    capacities: List[int] = field(default_factory=lambda: list(DEFAULT_CAPACITIES))
    seed: Optional[int] = None
    sequence: Optional[List[int]] = None
    chart_path: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.capacities:
            raise InvalidConfiguration("At least one capacity is required")
        self.capacities = [validate_capacity(capacity) for capacity in self.capacities]

    def reference_sequence(self) -> List[int]:
        """The explicit sequence when one was given, otherwise a generated one."""
        if self.sequence is not None:
            return list(self.sequence)
        return ReferenceGenerator(self.length, self.page_range, self.seed).generate()
