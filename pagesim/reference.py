from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidConfiguration


@dataclass
class ReferenceGenerator:
    """Uniform random page references in ``[0, page_range)``."""

    length: int
    page_range: int
    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for label, value in (("Sequence length", self.length), ("Page range", self.page_range)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{label} must be an integer, got {value!r}")
        if self.length < 0:
            raise InvalidConfiguration(f"Sequence length must not be negative, got {self.length}")
        if self.page_range <= 0:
            raise InvalidConfiguration(f"Page range must be a positive integer, got {self.page_range}")
        self.rng = random.Random(self.seed)

    def generate(self) -> List[int]:
        return [self.rng.randrange(self.page_range) for _ in range(self.length)]


def parse_sequence(text: str) -> List[int]:
    """Parse "1,2,3" or "1 2 3" (or a mix) into page ids."""
    pages: List[int] = []
    for part in text.replace(",", " ").split():
        try:
            page = int(part)
        except ValueError:
            raise InvalidConfiguration(f"'{part}' is not a valid page id") from None
        if page < 0:
            raise InvalidConfiguration(f"Page ids must not be negative, got {page}")
        pages.append(page)
    return pages
