from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from .policies import POLICIES
from .policy_base import ReplacementPolicy, validate_capacity

logger = logging.getLogger(__name__)


@dataclass
class PolicyResult:
    """Outcome of replaying one reference sequence through one policy at one capacity."""

    policy: str
    capacity: int
    total_requests: int
    hits: int
    faults: int
    policy_stats: Dict[str, int] = field(default_factory=dict)

    @property
    def failure_rate(self) -> float:
        """Faults / total requests, as a percentage."""
        return (self.faults / self.total_requests) * 100 if self.total_requests else 0.0

    @property
    def success_rate(self) -> float:
        """Hits / total requests, as a percentage."""
        return (self.hits / self.total_requests) * 100 if self.total_requests else 0.0


@dataclass
class CapacityReport:
    capacity: int
    results: List[PolicyResult]
    best: Optional[str] = None
    best_rate: float = 0.0
    worst: Optional[str] = None
    worst_rate: float = 100.0

    def result_for(self, policy: str) -> PolicyResult:
        for result in self.results:
            if result.policy == policy:
                return result
        raise KeyError(policy)


class Simulator:
    """Replays a fixed reference sequence through fresh policy instances."""

    def __init__(self, sequence: Iterable[int]):
        self.sequence: Tuple[int, ...] = tuple(sequence)

    def run(self, policy_cls: Type[ReplacementPolicy], capacity: int) -> PolicyResult:
        """Run the full sequence through a new ``policy_cls(capacity)`` and collect counts."""
        policy = policy_cls(capacity)
        policy.prime(self.sequence)
        for page_id in self.sequence:
            policy.access(page_id)

        logger.debug("%s capacity=%d faults=%d hits=%d", policy_cls.name, capacity, policy.faults, policy.hits)
        return PolicyResult(
            policy=policy_cls.name,
            capacity=capacity,
            total_requests=len(self.sequence),
            hits=policy.hits,
            faults=policy.faults,
            policy_stats=policy.get_stats(),
        )

    def compare(
        self,
        capacity: int,
        policies: Sequence[Type[ReplacementPolicy]] = POLICIES,
    ) -> CapacityReport:
        results = [self.run(policy_cls, capacity) for policy_cls in policies]
        report = CapacityReport(capacity=capacity, results=results)

        # Strict comparison: the first policy to reach an extremum keeps it.
        for result in results:
            rate = result.success_rate
            if rate > report.best_rate:
                report.best_rate = rate
                report.best = result.policy
            if rate < report.worst_rate:
                report.worst_rate = rate
                report.worst = result.policy

        logger.info(
            "capacity=%d best=%s (%.1f%%) worst=%s (%.1f%%)",
            capacity,
            report.best,
            report.best_rate,
            report.worst,
            report.worst_rate,
        )
        return report


def run_policy(policy_cls: Type[ReplacementPolicy], sequence: Iterable[int], capacity: int) -> PolicyResult:
    return Simulator(sequence).run(policy_cls, capacity)


def simulate(
    sequence: Iterable[int],
    capacities: Iterable[int],
    policies: Sequence[Type[ReplacementPolicy]] = POLICIES,
) -> List[CapacityReport]:
    """Compare every policy at every capacity, keeping the capacities in the order given."""
    capacity_list = [validate_capacity(capacity) for capacity in capacities]
    simulator = Simulator(sequence)
    return [simulator.compare(capacity, policies) for capacity in capacity_list]
