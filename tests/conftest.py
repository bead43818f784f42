"""Pytest configuration for the Shop API test suite.

This configuration ensures:
1. Settings load in the testing environment (JSON logs, no startup seeding)
2. The application-wide database points at a throwaway SQLite file
3. Integration tests get a fresh database per test (tmp_path)
4. Shared mock fixtures for cross-cutting concerns (logger)
"""

import os
import tempfile

# Must run before src.core.config is imported anywhere
_TEST_DB_DIR = tempfile.mkdtemp(prefix="shop-api-tests-")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR}/shop_test.db"
)
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")


# =============================================================================
# Database Fixtures
# =============================================================================


def sqlite_url(directory) -> str:
    """Build an aiosqlite URL for a database file inside directory."""
    return f"sqlite+aiosqlite:///{directory}/shop.db"


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide an empty database with the shop tables created.

    Each test gets its own SQLite file, so no data leaks between tests.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=sqlite_url(tmp_path))
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def seeded_database(test_database):
    """Provide a database holding the sample data.

    Two members (userA, userB), four books, two orders with two lines
    each. Seeded through its own session, so a test session opened
    afterwards starts with an empty identity map.
    """
    from src.infrastructure.persistence.seed import seed_sample_data

    async with test_database.get_session() as session:
        await seed_sample_data(session)
    return test_database


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Returns a Mock object with standard logging methods.

    Usage:
        def test_something(mock_logger):
            handler = ListMembersHandler(member_repo=repo, logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    from unittest.mock import Mock

    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    return logger
