"""Cycle Time Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.services.cycletime import WINDOWS  # noqa: E402
from app.services.cycletime.formulas import format_duration  # noqa: E402
from web.api import cycletime  # noqa: E402

st.set_page_config(page_title="Cycle Time", page_icon="⏱️", layout="wide")

WINDOW_LABELS = {
    "all": "All time",
    "week": "Last week",
    "month": "Last month",
}


@st.cache_data(ttl=300, show_spinner=False)
def get_report(window: str) -> list[dict]:
    """Get per-list breakdown via views."""
    logger.info("Loading cycle time report (window={})", window)
    resp = cycletime.get_breakdown(window)
    return [b.model_dump() for b in resp.items]


def bar_chart(data: list, title: str = "") -> go.Figure:
    return go.Figure(
        go.Bar(
            x=[d["list_name"] for d in data],
            y=[d["total_hours"] for d in data],
            text=[format_duration(d["avg_cycle_time"]) for d in data],
            textposition="outside",
            marker_color="#2563EB",
        )
    ).update_layout(
        title=title,
        xaxis_title="",
        yaxis_title="Hours",
        margin=dict(t=40, b=40, l=40, r=20),
        height=400,
    )


def report_view(data: list) -> None:
    if not data:
        st.info("No cycle time data for this period. Run `python sync_data.py` first.")
        return

    slowest = data[0]
    fastest = data[-1]

    cols = st.columns(3)
    cols[0].metric("Lists", len(data))
    cols[1].metric("Slowest", slowest["list_name"], format_duration(slowest["avg_cycle_time"]), delta_color="off")
    cols[2].metric("Fastest", fastest["list_name"], format_duration(fastest["avg_cycle_time"]), delta_color="off")

    st.subheader("📊 Average Cycle Time per List")
    st.plotly_chart(bar_chart(data), width="stretch")

    st.subheader("🗂️ Breakdown")
    st.dataframe(
        [
            {
                "List": d["list_name"],
                "Seconds": round(d["avg_cycle_time"], 2),
                "Minutes": d["total_minutes"],
                "Hours": d["total_hours"],
                "Duration": format_duration(d["avg_cycle_time"]),
            }
            for d in data
        ],
        width="stretch",
        hide_index=True,
    )


def main():
    st.title("⏱️ Cycle Time")
    st.markdown("*Average time cards spend in each list*")

    window = st.sidebar.selectbox(
        "Period",
        list(WINDOWS),
        format_func=lambda w: WINDOW_LABELS.get(w, w),
        index=0,
    )

    with st.spinner("Loading data..."):
        data = get_report(window)

    report_view(data)

    # Footer
    st.sidebar.markdown("---")
    st.sidebar.markdown("**Data Source:** [Trello](https://trello.com)")


if __name__ == "__main__":
    main()
