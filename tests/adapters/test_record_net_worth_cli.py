"""Tests for the record_net_worth_cli adapter."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from fintrack.adapters import record_net_worth_cli
from fintrack.domain.models import AuthIdentity, AuthResult, NetWorthRecord
from fintrack.infrastructure.settings import FinTrackSettings


def _wire(monkeypatch, refresh_ok=True):
    settings = FinTrackSettings(default_currency="RON")
    auth = MagicMock()
    auth.sign_in.return_value = AuthResult(
        user=AuthIdentity(user_id="user-1", email="me@example.com"),
        session=None,
    )
    refresher = MagicMock()
    refresher.execute.return_value = refresh_ok
    snapshot = MagicMock()
    snapshot.execute.return_value = NetWorthRecord(
        id="nw-1",
        user_id="user-1",
        date=date(2024, 6, 30),
        total_assets=Decimal("1000.00"),
        total_debts=Decimal("250.00"),
        net_worth=Decimal("750.00"),
        base_currency="RON",
    )
    logger = MagicMock()
    captured = SimpleNamespace(snapshot_args=None)

    def _build_snapshot(client, owner_id, rate_table, resolved):
        captured.snapshot_args = (client, owner_id, resolved)
        return snapshot

    monkeypatch.setattr(record_net_worth_cli.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FINTRACK_EMAIL", "me@example.com")
    monkeypatch.setenv("FINTRACK_PASSWORD", "secret")
    monkeypatch.setattr(record_net_worth_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(record_net_worth_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        record_net_worth_cli,
        "build_supabase_client",
        lambda resolved: "client",
    )
    monkeypatch.setattr(
        record_net_worth_cli,
        "build_authenticate_use_case",
        lambda client, resolved: auth,
    )
    monkeypatch.setattr(
        record_net_worth_cli,
        "build_rate_refresher",
        lambda rate_table, resolved: refresher,
    )
    monkeypatch.setattr(
        record_net_worth_cli,
        "build_snapshot_use_case",
        _build_snapshot,
    )
    return auth, snapshot, logger, captured, settings


def test_main_records_snapshot_and_prints_result(monkeypatch, capsys):
    """The CLI should sign in, record a snapshot and print the total."""
    auth, snapshot, logger, captured, settings = _wire(monkeypatch)

    record_net_worth_cli.main([])

    auth.sign_in.assert_called_once_with("me@example.com", "secret")
    snapshot.execute.assert_called_once_with("user-1", base_currency="RON")
    assert captured.snapshot_args == ("client", "user-1", settings)
    auth.sign_out.assert_called_once_with()
    logger.warning.assert_not_called()
    out = capsys.readouterr().out
    assert "750.00 RON" in out
    assert "2024-06-30" in out


def test_main_accepts_currency_argument(monkeypatch):
    _, snapshot, logger, _, _ = _wire(monkeypatch, refresh_ok=False)

    record_net_worth_cli.main(["usd"])

    snapshot.execute.assert_called_once_with("user-1", base_currency="USD")
    logger.warning.assert_called_once()


def test_main_requires_credentials(monkeypatch):
    _wire(monkeypatch)
    monkeypatch.delenv("FINTRACK_PASSWORD")

    with pytest.raises(RuntimeError, match="FINTRACK_PASSWORD"):
        record_net_worth_cli.main([])


def test_main_signs_out_when_snapshot_fails(monkeypatch):
    auth, snapshot, _, _, _ = _wire(monkeypatch)
    snapshot.execute.side_effect = ConnectionError("backend down")

    with pytest.raises(ConnectionError):
        record_net_worth_cli.main([])

    auth.sign_out.assert_called_once_with()


def test_main_reports_missing_stored_row(monkeypatch, capsys):
    auth, snapshot, _, _, _ = _wire(monkeypatch)
    snapshot.execute.return_value = None

    with pytest.raises(RuntimeError, match="not stored"):
        record_net_worth_cli.main([])

    auth.sign_out.assert_called_once_with()
    assert capsys.readouterr().out == ""
