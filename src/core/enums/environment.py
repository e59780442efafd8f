"""Application environment types.

Used by Settings to select environment-specific behavior:
- DEVELOPMENT: local run, coloured console logs, stub notification channels
- TESTING: automated test execution
- CI: continuous integration
- PRODUCTION: JSON logs, real notification providers expected
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
