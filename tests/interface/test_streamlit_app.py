"""Tests for the Streamlit app module."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from fintrack.adapters.interface.streamlit import app
from fintrack.domain.errors import AuthenticationRequiredError, ValidationError
from fintrack.domain.models import AuthIdentity, EntryKind, FinancialEntry
from fintrack.domain.services.finance import compute_dashboard_summary
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.infrastructure.settings import FinTrackSettings

USER = AuthIdentity(user_id="user-1", email="me@example.com")
SETTINGS = FinTrackSettings(default_currency="EUR")


def _fake_st() -> MagicMock:
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    fake_st.button.return_value = False
    fake_st.sidebar.button.return_value = False
    return fake_st


def _entry(entry_id: str, category: str, value: str) -> FinancialEntry:
    return FinancialEntry(
        id=entry_id,
        name=entry_id.title(),
        category=category,
        value=Decimal(value),
        currency="USD",
        last_updated=datetime(2024, 6, 1, tzinfo=timezone.utc),
    )


def test_main_shows_login_when_signed_out(monkeypatch):
    fake_st = _fake_st()
    rendered = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_rate_table", lambda: ExchangeRateTable())
    monkeypatch.setattr(app, "_current_user", lambda: None)
    monkeypatch.setattr(app, "_render_login", lambda: rendered.append(True))

    app.main()

    fake_st.set_page_config.assert_called_once()
    assert rendered == [True]
    fake_st.sidebar.radio.assert_not_called()


def test_main_routes_to_selected_page(monkeypatch):
    fake_st = _fake_st()
    fake_st.sidebar.radio.return_value = "Debts"
    fake_st.sidebar.selectbox.return_value = "EUR"
    pages = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "_get_rate_table", lambda: ExchangeRateTable())
    monkeypatch.setattr(app, "_current_user", lambda: USER)
    monkeypatch.setattr(
        app,
        "_render_entries",
        lambda kind, user, currency, rate_table: pages.append(
            (kind, user, currency)
        ),
    )

    app.main()

    assert pages == [(EntryKind.DEBT, USER, "EUR")]
    selectbox_kwargs = fake_st.sidebar.selectbox.call_args.kwargs
    assert selectbox_kwargs["options"] == ("RON", "EUR", "USD")
    assert selectbox_kwargs["index"] == 1
    fake_st.sidebar.caption.assert_any_call("Using default exchange rates")


def test_current_user_returns_none_on_auth_failure(monkeypatch):
    auth = MagicMock()
    auth.get_session.side_effect = RuntimeError("expired")
    monkeypatch.setattr(app, "_get_auth", lambda: auth)
    monkeypatch.setattr(app, "get_app_logger", lambda: MagicMock())

    assert app._current_user() is None


def test_render_dashboard_shows_totals_and_charts(monkeypatch):
    fake_st = _fake_st()
    columns = []
    fake_st.columns.side_effect = lambda count: columns.append(
        [MagicMock() for _ in range(count)]
    ) or columns[-1]
    dashboard = compute_dashboard_summary(
        [_entry("wallet", "cash", "100"), _entry("house", "real_estate", "900")],
        [_entry("card", "credit_card", "1200")],
        ExchangeRateTable().rates,
        "USD",
    )
    use_case = MagicMock()
    use_case.execute.return_value = dashboard
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "_get_client", lambda: "client")
    monkeypatch.setattr(
        app.container,
        "build_dashboard_use_case",
        lambda client, owner_id, rate_table, settings: use_case,
    )

    app._render_dashboard(USER, "USD", ExchangeRateTable())

    use_case.execute.assert_called_once_with("USD")
    assets_col, debts_col, net_worth_col = columns[0]
    assets_col.metric.assert_called_once_with("Total Assets", "$1,000.00")
    debts_col.caption.assert_called_once_with("1 debts tracked")
    net_worth_col.metric.assert_called_once_with("Net Worth", "$-200.00")
    net_worth_col.caption.assert_called_once_with("Negative net worth")
    assert fake_st.altair_chart.call_count == 2


def test_render_dashboard_reports_fetch_errors(monkeypatch):
    fake_st = _fake_st()
    use_case = MagicMock()
    use_case.execute.side_effect = RuntimeError("JWT expired")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_settings", lambda: SETTINGS)
    monkeypatch.setattr(app, "_get_client", lambda: "client")
    monkeypatch.setattr(app, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        app.container,
        "build_dashboard_use_case",
        lambda *args: use_case,
    )

    app._render_dashboard(USER, "USD", ExchangeRateTable())

    fake_st.error.assert_called_once_with("Error fetching data.")
    fake_st.metric.assert_not_called()


def test_submit_entry_shows_each_validation_message(monkeypatch):
    fake_st = _fake_st()
    monkeypatch.setattr(app, "st", fake_st)

    def _action(user_id, **fields):
        raise ValidationError(
            {
                "name": "Asset name is required",
                "value": "Value must be greater than 0",
            }
        )

    app._submit_entry(_action, "user-1", {"name": ""}, EntryKind.ASSET)

    assert [call.args[0] for call in fake_st.error.call_args_list] == [
        "Asset name is required",
        "Value must be greater than 0",
    ]
    fake_st.rerun.assert_not_called()


def test_submit_entry_warns_when_signed_out(monkeypatch):
    fake_st = _fake_st()
    monkeypatch.setattr(app, "st", fake_st)

    def _action(user_id, **fields):
        raise AuthenticationRequiredError("Please log in to add debts")

    app._submit_entry(_action, None, {}, EntryKind.DEBT)

    fake_st.warning.assert_called_once_with("Please log in to add debts")


def test_submit_entry_reruns_after_save(monkeypatch):
    fake_st = _fake_st()
    calls = []
    monkeypatch.setattr(app, "st", fake_st)

    app._submit_entry(
        lambda user_id, **fields: calls.append((user_id, fields)),
        "user-1",
        {"name": "Cash"},
        EntryKind.ASSET,
    )

    assert calls == [("user-1", {"name": "Cash"})]
    fake_st.rerun.assert_called_once_with()


def test_entries_table_formats_rows():
    rows = app._entries_table(
        [_entry("wallet", "bank_deposit", "1234.5")],
        "USD",
        ExchangeRateTable(),
    )

    assert rows == [
        {
            "Name": "Wallet",
            "Category": "Bank Deposit",
            "Amount": "$1,234.50",
            "Original": "$1,234.50",
            "Last Updated": "2024-06-01",
            "Comments": "",
        }
    ]


def test_entries_table_converts_to_display_currency():
    rows = app._entries_table(
        [_entry("wallet", "bank_deposit", "1234.5")],
        "EUR",
        ExchangeRateTable(),
    )

    assert rows[0]["Amount"] == "€1,135.74"
    assert rows[0]["Original"] == "$1,234.50"


def test_render_entries_lists_values_in_display_currency(monkeypatch):
    fake_st = _fake_st()
    fake_st.text_input.return_value = ""
    fake_st.form_submit_button.return_value = False
    fake_st.selectbox.side_effect = (
        lambda *args, options, index=0, **kwargs: options[index]
    )
    use_case = MagicMock()
    use_case.list_entries.return_value = [
        _entry("wallet", "cash", "100"),
        _entry("house", "real_estate", "50000"),
    ]
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_get_client", lambda: None)
    monkeypatch.setattr(app, "_load_settings", lambda: SETTINGS)
    monkeypatch.setattr(
        app.container,
        "build_manage_entries_use_case",
        lambda kind, client, owner_id, settings: use_case,
    )

    app._render_entries(EntryKind.ASSET, USER, "RON", ExchangeRateTable())

    rows = fake_st.dataframe.call_args.args[0]
    assert [row["Amount"] for row in rows] == ["lei456.00", "lei228,000.00"]
    assert [row["Original"] for row in rows] == ["$100.00", "$50,000.00"]
    fake_st.caption.assert_any_call("2 of 2 assets shown")


def test_get_rate_table_survives_unexpected_refresh_errors(monkeypatch):
    rate_table = ExchangeRateTable()
    refresher = MagicMock()
    refresher.refresh_if_stale.side_effect = KeyError("rates")
    logger = MagicMock()
    monkeypatch.setattr(
        app, "_load_rate_services", lambda: (rate_table, refresher)
    )
    monkeypatch.setattr(app, "get_app_logger", lambda: logger)

    assert app._get_rate_table() is rate_table
    logger.error.assert_called_once()
    assert rate_table.convert(Decimal("100"), "USD", "RON") == Decimal(
        "456.00"
    )
