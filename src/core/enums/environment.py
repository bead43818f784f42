"""Application environment types.

Defines the runtime environments for the Shop API.
Used by Settings and the container to pick environment-specific behavior
(e.g., JSON log rendering in testing/CI).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution with isolated database
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
