"""Altair chart builders for the Streamlit views."""

from collections.abc import Sequence

import altair as alt

from fintrack.domain.models import CategoryBreakdown, NetWorthTrend
from fintrack.domain.services.formatting import (
    format_category_name,
    format_currency_with_symbol,
    format_share,
)

PALETTE = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884D8",
    "#82CA9D",
    "#A4DE6C",
    "#D0ED57",
    "#FFC658",
    "#FF7300",
)


def prepare_donut_chart_data(
    breakdown: CategoryBreakdown,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data, one slice per category.

    Args:
        breakdown: Category totals, largest first.

    Returns:
        list[dict[str, str | float]]: Altair-ready rows.
    """
    return [
        {
            "category": format_category_name(item.category),
            "amount": float(item.amount),
            "amount_label": format_currency_with_symbol(
                item.amount,
                breakdown.currency_code,
            ),
            "share_label": format_share(item.share),
        }
        for item in breakdown.categories
    ]


def build_allocation_chart(
    breakdown: CategoryBreakdown,
    chart_size: int = 260,
    palette: Sequence[str] | None = None,
) -> alt.LayerChart:
    """Build a donut chart of amounts by category.

    Args:
        breakdown: Category totals, largest first.
        chart_size: Width/height for the chart canvas.
        palette: Optional color palette override.

    Returns:
        alt.LayerChart: Donut with a hover label in the middle.
    """
    data = prepare_donut_chart_data(breakdown)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(palette or PALETTE)),
            sort=[row["category"] for row in data],
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("amount_label:N", title="Amount"),
            alt.Tooltip("share_label:N", title="Share"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=14,
        fontWeight="bold",
    ).encode(text="share_label:N")

    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def prepare_trend_chart_data(
    trend: NetWorthTrend,
) -> list[dict[str, str | float]]:
    """Return Altair rows for the net worth trend, oldest first."""
    return [
        {
            "date": point.date.isoformat(),
            "label": point.label,
            "net_worth": float(point.net_worth),
            "amount_label": format_currency_with_symbol(
                point.net_worth,
                trend.currency_code,
            ),
        }
        for point in trend.points
    ]


def build_trend_chart(trend: NetWorthTrend, height: int = 320) -> alt.Chart:
    """Build a line chart of net worth over time."""
    data = prepare_trend_chart_data(trend)
    return alt.Chart(alt.Data(values=data)).mark_line(
        point=alt.OverlayMarkDef(size=60),
        strokeWidth=2,
        color="#8884d8",
    ).encode(
        x=alt.X("date:T", title=None, axis=alt.Axis(format="%b %Y")),
        y=alt.Y("net_worth:Q", title=f"Net Worth ({trend.currency_code})"),
        tooltip=[
            alt.Tooltip("label:N", title="Month"),
            alt.Tooltip("amount_label:N", title="Net Worth"),
        ],
    ).properties(height=height)


__all__ = [
    "PALETTE",
    "prepare_donut_chart_data",
    "build_allocation_chart",
    "prepare_trend_chart_data",
    "build_trend_chart",
]
