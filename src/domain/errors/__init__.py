"""Domain error message constants."""

from src.domain.errors.account_error import AccountError, RegionError

__all__ = ["AccountError", "RegionError"]
