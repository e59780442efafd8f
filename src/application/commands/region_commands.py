"""Region commands (write operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class CreateRegion:
    """Create a region with a unique name."""

    name: str
