"""Tests for table backend selection."""

from unittest.mock import MagicMock

import pytest

from fintrack.infrastructure.settings import FinTrackSettings
from fintrack.infrastructure.sqlalchemy_tables import SqlAlchemyTableGateway
from fintrack.infrastructure.supabase_tables import SupabaseTableGateway
from fintrack.infrastructure.table_gateway_factory import create_table_gateway


def test_factory_defaults_to_supabase() -> None:
    gateway = create_table_gateway(
        "assets",
        FinTrackSettings(),
        supabase_client=MagicMock(),
        logger=MagicMock(),
    )

    assert isinstance(gateway, SupabaseTableGateway)
    assert gateway.table_name == "assets"


def test_supabase_backend_requires_client() -> None:
    with pytest.raises(RuntimeError):
        create_table_gateway("assets", FinTrackSettings(), logger=MagicMock())


def test_factory_uses_sqlalchemy_backend() -> None:
    db_port = MagicMock()

    gateway = create_table_gateway(
        "debts",
        FinTrackSettings(data_backend="sqlalchemy"),
        db_port=db_port,
        owner_id="user-1",
        logger=MagicMock(),
    )

    assert isinstance(gateway, SqlAlchemyTableGateway)
    assert gateway.table_name == "debts"
    db_port.get_engine.assert_not_called()


def test_sqlalchemy_backend_warns_without_owner() -> None:
    logger = MagicMock()

    create_table_gateway(
        "net_worth_history",
        FinTrackSettings(data_backend="sqlalchemy"),
        db_port=MagicMock(),
        logger=logger,
    )
    create_table_gateway(
        "users",
        FinTrackSettings(data_backend="sqlalchemy"),
        db_port=MagicMock(),
        logger=logger,
    )

    logger.warning.assert_called_once()


def test_factory_rejects_unknown_table_and_backend() -> None:
    with pytest.raises(ValueError, match="Unknown table"):
        create_table_gateway(
            "transactions",
            FinTrackSettings(),
            supabase_client=MagicMock(),
            logger=MagicMock(),
        )
    with pytest.raises(ValueError, match="Unsupported data backend"):
        create_table_gateway(
            "assets",
            FinTrackSettings(data_backend="firebase"),
            logger=MagicMock(),
        )
