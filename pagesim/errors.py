from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a simulation parameter is out of range or malformed."""
