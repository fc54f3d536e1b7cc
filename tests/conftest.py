"""Global pytest configuration and fixtures."""

# Standard library imports
from pathlib import Path

# Load test environment variables
from dotenv import load_dotenv

test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)

# Third-party imports
import pytest

# Local imports
from tzledger.domain.services.zone_conversion import ZoneConversionService
from tzledger.infrastructure.repositories import InMemoryTimestampRepository
from tzledger.infrastructure.time import ZoneInfoDatabase


@pytest.fixture
def zone_database() -> ZoneInfoDatabase:
    """Zone database using the default zoneinfo backend."""
    return ZoneInfoDatabase()


@pytest.fixture
def conversion_service(zone_database) -> ZoneConversionService:
    """Zone conversion service over the default zone database."""
    return ZoneConversionService(zone_database)


@pytest.fixture
def repository() -> InMemoryTimestampRepository:
    """Empty in-memory timestamp store."""
    return InMemoryTimestampRepository()
