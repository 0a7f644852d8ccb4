"""pagesim - page replacement policy simulator (FIFO, Second Chance, LRU, Optimal)."""

from .errors import InvalidConfiguration  # noqa: F401
from .policies import POLICIES  # noqa: F401
from .policy_base import AccessOutcome, ReplacementPolicy  # noqa: F401
from .reference import ReferenceGenerator, parse_sequence  # noqa: F401
from .simulator import CapacityReport, PolicyResult, Simulator, run_policy, simulate  # noqa: F401
