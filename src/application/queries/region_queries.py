"""Region queries (read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class ListRegions:
    """List every region ordered by name."""
