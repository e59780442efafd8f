"""Domain value objects."""

from src.domain.value_objects.token_claims import TokenClaims

__all__ = ["TokenClaims"]
