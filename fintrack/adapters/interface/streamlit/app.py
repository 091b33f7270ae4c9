"""Streamlit dashboard entry point."""

from collections.abc import Sequence

import streamlit as st

from fintrack.domain.constants import AVAILABLE_CURRENCIES
from fintrack.domain.errors import AuthenticationRequiredError, ValidationError
from fintrack.domain.models import (
    AuthIdentity,
    CategoryBreakdown,
    EntryKind,
    FinancialEntry,
    RankedEntry,
)
from fintrack.domain.services.finance import filter_entries
from fintrack.domain.services.formatting import (
    format_category_name,
    format_currency_with_symbol,
    format_share,
)
from fintrack.domain.services.fx import ExchangeRateTable
from fintrack.domain.services.validation import (
    categories_for,
    coerce_category,
)
from fintrack.adapters.interface.streamlit.charts import (
    build_allocation_chart,
    build_trend_chart,
)
from fintrack.infrastructure import container
from fintrack.infrastructure.logging.logger import get_app_logger

PAGES = ("Dashboard", "Assets", "Debts", "Net Worth")
CURRENCY_CODES = tuple(item.code for item in AVAILABLE_CURRENCIES)
CURRENCY_SYMBOLS = {item.code: item.symbol for item in AVAILABLE_CURRENCIES}


@st.cache_resource(show_spinner=False)
def _load_settings():
    """Process-wide settings."""
    return container.build_settings()


@st.cache_resource(show_spinner=False)
def _load_rate_services():
    """Process-wide rate table and its refresher."""
    rate_table = ExchangeRateTable(logger=get_app_logger())
    refresher = container.build_rate_refresher(rate_table, _load_settings())
    return rate_table, refresher


def _get_rate_table() -> ExchangeRateTable:
    """Return the shared rate table, refreshing it when stale."""
    rate_table, refresher = _load_rate_services()
    try:
        refresher.refresh_if_stale()
    except Exception as exc:
        get_app_logger().error(f"Unexpected exchange rate refresh error: {exc}")
    return rate_table


def _get_client():
    """Return this session's Supabase client."""
    if "supabase_client" not in st.session_state:
        st.session_state["supabase_client"] = container.build_supabase_client(
            _load_settings()
        )
    return st.session_state["supabase_client"]


def _get_auth():
    return container.build_authenticate_use_case(
        _get_client(),
        _load_settings(),
    )


def _current_user() -> AuthIdentity | None:
    """Return the signed-in identity for this session, if any."""
    try:
        session = _get_auth().get_session()
    except Exception as exc:
        get_app_logger().error(f"Error getting session: {exc}")
        return None
    return session.user if session else None


def _report_failure(message: str, exc: Exception) -> None:
    get_app_logger().error(f"{message}: {exc}")
    st.error(message)


def _format_currency_option(code: str) -> str:
    return f"{code} ({CURRENCY_SYMBOLS[code]})"


def _select_currency() -> str:
    """Render the sidebar display-currency selector."""
    default_code = _load_settings().default_currency
    index = (
        CURRENCY_CODES.index(default_code)
        if default_code in CURRENCY_CODES
        else 0
    )
    return st.sidebar.selectbox(
        "Display currency",
        options=CURRENCY_CODES,
        index=index,
        format_func=_format_currency_option,
        key="display_currency",
    )


def _render_rates_caption(rate_table: ExchangeRateTable) -> None:
    refreshed_at = rate_table.refreshed_at
    if refreshed_at is None:
        st.sidebar.caption("Using default exchange rates")
    else:
        st.sidebar.caption(
            f"Rates updated {refreshed_at:%Y-%m-%d %H:%M} UTC"
        )


def _render_login() -> None:
    """Render the sign-in and sign-up forms."""
    st.title("FinTrack")
    st.caption("Track your assets, debts and net worth.")
    sign_in_tab, sign_up_tab = st.tabs(["Sign in", "Sign up"])
    with sign_in_tab:
        with st.form("sign_in"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign in")
        if submitted:
            try:
                _get_auth().sign_in(email, password)
            except Exception as exc:
                _report_failure("Sign in failed. Check your credentials.", exc)
            else:
                st.rerun()
    with sign_up_tab:
        with st.form("sign_up"):
            email = st.text_input("Email", key="sign_up_email")
            password = st.text_input(
                "Password",
                type="password",
                key="sign_up_password",
            )
            submitted = st.form_submit_button("Create account")
        if submitted:
            try:
                result = _get_auth().sign_up(email, password)
            except Exception as exc:
                _report_failure("Sign up failed.", exc)
            else:
                if result.session is None:
                    st.success("Check your email to confirm your account.")
                else:
                    st.rerun()


def _render_breakdown(
    title: str,
    breakdown: CategoryBreakdown,
    top_entries: Sequence[RankedEntry],
    empty_message: str,
) -> None:
    """Render an allocation donut, its legend and the top entries."""
    st.subheader(title)
    if not breakdown.categories:
        st.info(empty_message)
        return
    st.altair_chart(build_allocation_chart(breakdown), width="stretch")
    st.dataframe(
        [
            {
                "Category": format_category_name(item.category),
                "Amount": format_currency_with_symbol(
                    item.amount,
                    breakdown.currency_code,
                ),
                "Share": format_share(item.share),
            }
            for item in breakdown.categories
        ],
        width="stretch",
        hide_index=True,
    )
    st.markdown(f"**Top {title.split()[0]}**")
    for ranked in top_entries:
        entry = ranked.entry
        st.write(
            f"{entry.name}: "
            f"{format_currency_with_symbol(ranked.converted_value, breakdown.currency_code)}"
        )
        st.caption(
            f"{format_category_name(entry.category)} · "
            f"Last updated: {entry.last_updated:%Y-%m-%d}"
        )


def _render_dashboard(
    user: AuthIdentity,
    currency: str,
    rate_table: ExchangeRateTable,
) -> None:
    st.header("Dashboard")
    use_case = container.build_dashboard_use_case(
        _get_client(),
        user.user_id,
        rate_table,
        _load_settings(),
    )
    try:
        dashboard = use_case.execute(currency)
    except Exception as exc:
        _report_failure("Error fetching data.", exc)
        return

    summary = dashboard.summary
    assets_col, debts_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Total Assets",
        format_currency_with_symbol(summary.asset_total, currency),
    )
    assets_col.caption(f"{dashboard.asset_count} assets tracked")
    debts_col.metric(
        "Total Debts",
        format_currency_with_symbol(summary.debt_total, currency),
    )
    debts_col.caption(f"{dashboard.debt_count} debts tracked")
    net_worth_col.metric(
        "Net Worth",
        format_currency_with_symbol(summary.net_worth, currency),
    )
    net_worth_col.caption(
        "Positive net worth" if summary.net_worth > 0
        else "Negative net worth"
    )

    asset_col, debt_col = st.columns(2)
    with asset_col:
        _render_breakdown(
            "Assets Allocation",
            dashboard.asset_breakdown,
            dashboard.top_assets,
            "No assets added yet.",
        )
    with debt_col:
        _render_breakdown(
            "Debts Allocation",
            dashboard.debt_breakdown,
            dashboard.top_debts,
            "No debts added yet.",
        )


def _entry_form(
    kind: EntryKind,
    form_key: str,
    initial: FinancialEntry | None = None,
) -> dict | None:
    """Render an entry form and return its fields when submitted."""
    categories = categories_for(kind)
    category = coerce_category(initial.category if initial else None, kind)
    currency = initial.currency if initial else "USD"
    with st.form(form_key, clear_on_submit=initial is None):
        name = st.text_input(
            f"{kind.label} name",
            value=initial.name if initial else "",
            max_chars=100,
        )
        selected_category = st.selectbox(
            "Category",
            options=categories,
            index=categories.index(category),
            format_func=format_category_name,
        )
        value = st.text_input(
            "Value",
            value=str(initial.value) if initial else "",
            placeholder="0.00",
        )
        selected_currency = st.selectbox(
            "Currency",
            options=CURRENCY_CODES,
            index=(
                CURRENCY_CODES.index(currency)
                if currency in CURRENCY_CODES
                else 0
            ),
            format_func=_format_currency_option,
        )
        comments = st.text_area(
            "Comments",
            value=(initial.comments or "") if initial else "",
        )
        submitted = st.form_submit_button(
            f"Update {kind.label}" if initial else f"Add {kind.label}"
        )
    if not submitted:
        return None
    return {
        "name": name,
        "category": selected_category,
        "value": value,
        "currency": selected_currency,
        "comments": comments,
    }


def _entries_table(
    entries: Sequence[FinancialEntry],
    currency: str,
    rate_table: ExchangeRateTable,
) -> list[dict]:
    """Rows with each value converted to the display currency."""
    return [
        {
            "Name": entry.name,
            "Category": format_category_name(entry.category),
            "Amount": format_currency_with_symbol(
                rate_table.convert(entry.value, entry.currency, currency),
                currency,
            ),
            "Original": format_currency_with_symbol(
                entry.value,
                entry.currency,
            ),
            "Last Updated": f"{entry.last_updated:%Y-%m-%d}",
            "Comments": entry.comments or "",
        }
        for entry in entries
    ]


def _render_entries(
    kind: EntryKind,
    user: AuthIdentity,
    currency: str,
    rate_table: ExchangeRateTable,
) -> None:
    """Render the searchable list and forms for assets or debts."""
    plural = kind.plural_label.lower()
    st.header(kind.plural_label)
    use_case = container.build_manage_entries_use_case(
        kind,
        _get_client(),
        user.user_id,
        _load_settings(),
    )
    try:
        entries = use_case.list_entries()
    except Exception as exc:
        _report_failure(f"Error fetching {plural}.", exc)
        return

    query = st.text_input(
        "Search",
        placeholder=f"Search {plural}...",
        key=f"{kind.value}_search",
    )
    if not entries:
        st.info(f"No {plural} added yet.")
    else:
        filtered = filter_entries(entries, query)
        st.caption(f"{len(filtered)} of {len(entries)} {plural} shown")
        st.dataframe(
            _entries_table(filtered, currency, rate_table),
            width="stretch",
            hide_index=True,
        )

    with st.expander(f"Add New {kind.label}"):
        fields = _entry_form(kind, f"add_{kind.value}")
        if fields is not None:
            _submit_entry(use_case.add_entry, user.user_id, fields, kind)

    if not entries:
        return
    with st.expander(f"Edit or delete a {kind.label.lower()}"):
        by_id = {entry.id: entry for entry in entries}
        selected_id = st.selectbox(
            kind.label,
            options=list(by_id),
            format_func=lambda entry_id: by_id[entry_id].name,
            key=f"{kind.value}_selected",
        )
        selected = by_id[selected_id]
        fields = _entry_form(kind, f"edit_{kind.value}", initial=selected)
        if fields is not None:
            _submit_entry(
                lambda user_id, **kwargs: use_case.update_entry(
                    user_id, selected, **kwargs
                ),
                user.user_id,
                fields,
                kind,
            )
        if st.button(
            f"Delete {selected.name}",
            key=f"delete_{kind.value}",
            type="secondary",
        ):
            try:
                use_case.delete_entry(user.user_id, selected.id)
            except AuthenticationRequiredError as exc:
                st.warning(str(exc))
            except Exception as exc:
                _report_failure(
                    f"Failed to delete {kind.label.lower()}. "
                    "Please check if you are logged in.",
                    exc,
                )
            else:
                st.rerun()


def _submit_entry(action, user_id: str, fields: dict, kind: EntryKind) -> None:
    """Run an add/update action and surface validation or remote errors."""
    try:
        action(user_id, **fields)
    except ValidationError as exc:
        for message in exc.errors.values():
            st.error(message)
    except AuthenticationRequiredError as exc:
        st.warning(str(exc))
    except Exception as exc:
        _report_failure(
            f"Failed to save {kind.label.lower()}. "
            "Please check if you are logged in.",
            exc,
        )
    else:
        st.rerun()


def _render_net_worth(
    user: AuthIdentity,
    currency: str,
    rate_table: ExchangeRateTable,
) -> None:
    st.header("Net Worth")
    settings = _load_settings()
    client = _get_client()
    trend_use_case = container.build_net_worth_trend_use_case(
        client, user.user_id, rate_table, settings
    )
    history_use_case = container.build_net_worth_history_use_case(
        client, user.user_id, settings
    )
    try:
        overview = trend_use_case.execute(currency)
        latest = history_use_case.get_latest()
    except Exception as exc:
        _report_failure("Error fetching financial data.", exc)
        return

    summary = overview.summary
    assets_col, debts_col = st.columns(2)
    assets_col.metric(
        "Total Assets",
        format_currency_with_symbol(summary.asset_total, currency),
    )
    debts_col.metric(
        "Total Debts",
        format_currency_with_symbol(summary.debt_total, currency),
    )
    st.metric(
        "Current Net Worth",
        format_currency_with_symbol(summary.net_worth, currency),
    )
    if summary.net_worth >= 0:
        st.success(
            "Your assets exceed your debts. "
            "Great job managing your finances!"
        )
    else:
        st.warning(
            "Your debts exceed your assets. "
            "Consider strategies to reduce debt or increase assets."
        )

    st.subheader("Net Worth Trend")
    if overview.trend.points:
        st.altair_chart(build_trend_chart(overview.trend), width="stretch")
    else:
        st.info("No historical data available yet.")

    if latest is not None:
        st.caption(f"Last snapshot: {latest.date:%Y-%m-%d}")
    if st.button("Record today's net worth"):
        snapshot_use_case = container.build_snapshot_use_case(
            client, user.user_id, rate_table, settings
        )
        try:
            snapshot_use_case.execute(user.user_id, base_currency=currency)
        except Exception as exc:
            _report_failure("Failed to record net worth snapshot.", exc)
        else:
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="FinTrack", layout="wide")
    rate_table = _get_rate_table()

    user = _current_user()
    if user is None:
        _render_login()
        return

    st.sidebar.title("FinTrack")
    st.sidebar.caption(user.email or user.user_id)
    page = st.sidebar.radio("Page", PAGES)
    currency = _select_currency()
    _render_rates_caption(rate_table)
    if st.sidebar.button("Sign out"):
        try:
            _get_auth().sign_out()
        except Exception as exc:
            _report_failure("Sign out failed.", exc)
        else:
            st.rerun()

    if page == "Dashboard":
        _render_dashboard(user, currency, rate_table)
    elif page == "Assets":
        _render_entries(EntryKind.ASSET, user, currency, rate_table)
    elif page == "Debts":
        _render_entries(EntryKind.DEBT, user, currency, rate_table)
    else:
        _render_net_worth(user, currency, rate_table)


if __name__ == "__main__":  # pragma: no cover
    main()
