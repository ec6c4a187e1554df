"""Application environment types.

Environments:
- DEVELOPMENT: Local development with auto-reload and colored logs
- TESTING: Automated test execution
- CI: Continuous integration runs
- PRODUCTION: Deployed API
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
