"""
Dependency Injection Container - wiring of the service components.

The container owns the single timestamp store for the lifetime of the
application and hands the same instance to every use case, instead of the
store living in module-global state.
"""

import logging

from tzledger.application.config import ApplicationConfig
from tzledger.application.interfaces.repositories import ITimestampRepository
from tzledger.application.use_cases import CreateTimestampUseCase, FetchTimestampsUseCase
from tzledger.domain.interfaces.time_service import IZoneDatabase
from tzledger.domain.services.zone_conversion import ZoneConversionService

from .exceptions_mapper import ExceptionMapper
from .repositories import InMemoryTimestampRepository
from .time import ZoneInfoDatabase

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency container for the timestamp service.

    Args:
        config: Application configuration
        repository: Store to use; a fresh in-memory store by default
        zone_database: Zone database to use; built from config by default
    """

    def __init__(
        self,
        config: ApplicationConfig | None = None,
        repository: ITimestampRepository | None = None,
        zone_database: IZoneDatabase | None = None,
    ) -> None:
        self.config = config or ApplicationConfig()
        self.repository: ITimestampRepository = repository or InMemoryTimestampRepository()
        self.zone_database: IZoneDatabase = zone_database or ZoneInfoDatabase(
            self.config.timezone.backend
        )
        self.conversion_service = ZoneConversionService(self.zone_database)
        self.exception_mapper = ExceptionMapper()

        self.create_timestamp = CreateTimestampUseCase(self.repository, self.conversion_service)
        self.fetch_timestamps = FetchTimestampsUseCase(self.repository, self.conversion_service)

        logger.info(
            "Container initialized",
            extra={
                "environment": self.config.environment.value,
                "zone_database": self.zone_database.version,
            },
        )
