"""Streamlit dashboard for comparing FRED series.

Up to three series on one chart, with:
- NBER recession shading
- Date range clipping
- Optional second y-axis
"""

from datetime import date

import httpx
import streamlit as st

from econ_series_dashboard.alignment import bundle_to_frame
from econ_series_dashboard.config import ALL_SERIES, Settings
from econ_series_dashboard.data.chart_loader import (
    ChartRequest,
    ChartResult,
    adjust_window,
    load_chart,
)
from econ_series_dashboard.models import DateWindow, MergedBundle
from econ_series_dashboard.ui.charts import build_overlay_figure


NO_SERIES = ""
DEFAULT_SELECTION = ["UNRATE", NO_SERIES, NO_SERIES]
WINDOW_KEYS = {"min": "window_min", "max": "window_max"}


def series_label(series_id: str) -> str:
    """Selector label for a series id."""
    if series_id == NO_SERIES:
        return "None"
    return f"{ALL_SERIES[series_id]} ({series_id})"


def render_series_selectors(max_series: int) -> list[str]:
    """Render one selectbox per chart slot and return the chosen ids."""
    options = [NO_SERIES, *ALL_SERIES.keys()]
    chosen = []
    columns = st.columns(max_series)
    for slot, column in enumerate(columns):
        default = DEFAULT_SELECTION[slot] if slot < len(DEFAULT_SELECTION) else NO_SERIES
        with column:
            chosen.append(st.selectbox(
                f"Series {chr(ord('A') + slot)}",
                options=options,
                index=options.index(default),
                format_func=series_label,
                key=f"series_{slot}",
            ))
    return chosen


def sync_window_inputs(window: DateWindow) -> None:
    """Point both date inputs at ``window`` before they are drawn."""
    st.session_state[WINDOW_KEYS["min"]] = date.fromisoformat(window.min_date)
    st.session_state[WINDOW_KEYS["max"]] = date.fromisoformat(window.max_date)


def on_window_edit(bound: str) -> None:
    """Apply an edit to one bound only, dragging the other along if needed."""
    window = st.session_state.get("window", DateWindow())
    picked = st.session_state[WINDOW_KEYS[bound]]
    if picked is not None:
        window = adjust_window(window, bound, picked.isoformat())
    st.session_state["window"] = window
    sync_window_inputs(window)


def render_window_inputs(result: ChartResult) -> None:
    """Render date range inputs bounded by the available data."""
    st.session_state["window"] = result.window
    available = result.available_range
    if available is None:
        return

    first, last = (date.fromisoformat(d) for d in available)
    sync_window_inputs(result.window)

    col_from, col_to = st.columns(2)
    with col_from:
        st.date_input(
            "From",
            value=None,
            min_value=first,
            max_value=last,
            key=WINDOW_KEYS["min"],
            on_change=on_window_edit,
            args=("min",),
        )
    with col_to:
        st.date_input(
            "To",
            value=None,
            min_value=first,
            max_value=last,
            key=WINDOW_KEYS["max"],
            on_change=on_window_edit,
            args=("max",),
        )


def render_chart(view: MergedBundle, selected: list[str], dual_axis: bool, note: str) -> None:
    """Render the overlay chart, or a placeholder when there is nothing to draw."""
    if view.is_empty or not view.series:
        message = (
            "No observations in the selected date range."
            if selected
            else "Choose at least one series to see a chart."
        )
        st.info(message)
        return

    fig = build_overlay_figure(view, dual_axis=dual_axis, note=note or None)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    with st.expander("Data"):
        st.dataframe(bundle_to_frame(view), use_container_width=True)


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Economic Series Dashboard",
        page_icon="",
        layout="wide",
    )
    st.markdown("## Economic Series Dashboard")
    st.caption("Data: FRED, Federal Reserve Bank of St. Louis. Shaded areas mark NBER recessions.")

    settings = Settings()
    selected = [sid for sid in render_series_selectors(settings.max_series) if sid]

    col_axis, col_note = st.columns([1, 3])
    with col_axis:
        dual_axis = st.checkbox("Dual y-axes", value=False)
    with col_note:
        note = st.text_input("Note", value="", placeholder="Add a note to show under the chart")

    request = ChartRequest(
        series_ids=selected,
        window=st.session_state.get("window", DateWindow()),
        dual_axis=dual_axis,
    )

    try:
        with st.spinner("Fetching data from FRED..."):
            result = load_chart(request, settings=settings)
    except ValueError as e:
        st.error(f"Configuration error: {e}")
        return
    except httpx.HTTPStatusError as e:
        st.error(f"FRED request failed with status {e.response.status_code}")
        return
    except httpx.HTTPError as e:
        st.error(f"Could not reach FRED: {e}")
        return

    render_window_inputs(result)
    render_chart(result.view, selected, result.dual_axis, note)


if __name__ == "__main__":
    main()
