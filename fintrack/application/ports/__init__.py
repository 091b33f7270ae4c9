"""Application ports package."""

from .auth import AuthGatewayPort
from .database import DatabaseEnginePort
from .exchange_rates import ExchangeRateSourcePort
from .repositories import (
    EntriesRepositoryPort,
    NetWorthHistoryRepositoryPort,
    UsersRepositoryPort,
)
from .table_gateway import Row, TableGatewayPort

__all__ = [
    "AuthGatewayPort",
    "DatabaseEnginePort",
    "ExchangeRateSourcePort",
    "EntriesRepositoryPort",
    "NetWorthHistoryRepositoryPort",
    "UsersRepositoryPort",
    "Row",
    "TableGatewayPort",
]
