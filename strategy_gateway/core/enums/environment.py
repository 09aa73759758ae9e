"""Application environment types.

Used by Settings to select environment-specific behavior (log rendering,
table bootstrap).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
