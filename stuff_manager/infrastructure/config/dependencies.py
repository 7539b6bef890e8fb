from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stuff_manager.domain.ports.repositories.stuff_repository import StuffRepository
from stuff_manager.domain.ports.services.logger import LoggerPort
from stuff_manager.domain.ports.services.stuff_api_client import StuffApiClientPort
from stuff_manager.infrastructure.adapters.repositories.sqlalchemy_stuff_repository import (
    SQLAlchemyStuffRepository,
)
from stuff_manager.infrastructure.adapters.services.httpx_stuff_api_client import HttpxStuffApiClient
from stuff_manager.infrastructure.config.settings import ClientSettings
from stuff_manager.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from stuff_manager.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("stuff_manager")


def get_client_settings() -> ClientSettings:
    return ClientSettings()


def get_stuff_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> StuffRepository:
    return SQLAlchemyStuffRepository(session)


def get_stuff_api_client(
    client_settings: Annotated[ClientSettings, Depends(get_client_settings)],
) -> StuffApiClientPort:
    return HttpxStuffApiClient(
        base_url=client_settings.BASE_URL,
        timeout_seconds=client_settings.TIMEOUT_SECONDS,
    )
