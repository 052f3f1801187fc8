import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple

from awards.data import DATA_FILE, load_dashboard_data, records_frame
from awards.filters import normalize_params
from awards.metrics_categories import compute_categories
from awards.metrics_decades import compute_decades
from awards.metrics_hierarchy import compute_hierarchy
from awards.metrics_leaderboard import compute_leaderboard
from awards.metrics_network import compute_network
from awards.metrics_overview import compute_overview
from awards.metrics_trend import compute_trend

st.set_page_config(page_title="Oscars Dashboard", layout="wide")


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(f"<div class='card-title'>{title}</div>", unsafe_allow_html=True)
    body = container.container()
    with body:
        yield body


def format_filter_summary(decade_range: Optional[Tuple[int, int]], metric: str, top_n: int) -> str:
    decade_chip = f"Decades: {decade_range[0]}s–{decade_range[1]}s" if decade_range else "Decades: All"
    chips = [decade_chip, f"Metric: {metric}", f"Top N: {top_n}"]
    return "<div class='chip-row'>" + "".join([f"<span class='chip'>{txt}</span>" for txt in chips]) + "</div>"


def render_page_header(title: str, breadcrumb: str, filter_summary_html: str, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    inject_base_styles()
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(
            f"<div class='app-top-bar'><div class='breadcrumb'>{breadcrumb}</div><div class='page-title'>{title}</div></div>",
            unsafe_allow_html=True,
        )
        st.markdown(filter_summary_html, unsafe_allow_html=True)
    with c2:
        if export_df is not None and not export_df.empty:
            st.download_button("Export CSV", export_df.to_csv(index=False).encode("utf-8"), file_name=export_name, mime="text/csv")


def render_chart(payload: Dict[str, Any], name: str, empty_msg: str = "No data for the current selection."):
    spec = payload.get("charts", {}).get(name)
    if not spec:
        st.info(empty_msg)
        return
    st.vega_lite_chart(spec, use_container_width=True)


data_ctx = load_dashboard_data()
records = data_ctx.get("records", ())
if not records:
    st.error(f"No nominations loaded. Place the dataset at {DATA_FILE}.")
    st.stop()

# ----- Sidebar: navigation + controls -----
decades: List[int] = data_ctx.get("decades", [])
categories: List[str] = data_ctx.get("categories", [])
with st.sidebar:
    st.markdown("### Navigate")
    page = st.radio("Navigate", ["Overview", "Categories", "Decades", "Trend", "Hierarchy", "Network", "Leaderboard"], index=0)

    st.markdown("---")
    st.markdown("### Controls")
    metric = st.selectbox("Rank categories by", ["nominations", "wins"], index=0)
    top_n = st.slider("Top N categories", min_value=5, max_value=50, value=15, step=1)
    decade_range = (
        st.select_slider("Decade range", options=decades, value=(decades[0], decades[-1]))
        if len(decades) > 1
        else None
    )
    stack_mode = st.radio("Stacked mode", ["counts", "percent"], horizontal=True)
    category = st.selectbox("Trend category", categories, index=0) if categories else None

    with st.expander("Advanced settings", expanded=False):
        stream_top_n = st.slider("Stream: top categories", 3, 20, 8)
        network_top_n = st.slider("Network: top films", 5, 40, 15)
        leaderboard_top_n = st.slider("Leaderboard: top names", 5, 30, 10)
        bubble_top_n = st.slider("Bubble: top categories", 5, 50, 20)

params = normalize_params(
    {
        "metric": metric,
        "top_n": top_n,
        "decade_range": decade_range,
        "stack_mode": stack_mode,
        "category": category,
        "stream_top_n": stream_top_n,
        "network_top_n": network_top_n,
        "leaderboard_top_n": leaderboard_top_n,
        "bubble_top_n": bubble_top_n,
    },
    available_decades=decades,
    categories=categories,
)
filter_summary_html = format_filter_summary(params.decade_range, params.metric, params.top_n)


def render_overview_page():
    payload = compute_overview(params, data_ctx)
    render_page_header("Overview", "Home / Overview", filter_summary_html, export_df=records_frame(records), export_name="nominations.csv")
    kpis = payload["kpis"]
    cols = st.columns(5)
    cols[0].metric("Rows", f"{kpis['total']:,}")
    cols[1].metric("Span", kpis["span"])
    cols[2].metric("Categories", f"{kpis['cats']:,}")
    cols[3].metric("Films", f"{kpis['films']:,}")
    cols[4].metric("People", f"{kpis['people']:,}")
    with card("Films per decade"):
        render_chart(payload, "films_per_decade")


def render_categories_page():
    payload = compute_categories(params, data_ctx)
    render_page_header("Categories", "Home / Categories", filter_summary_html, export_df=pd.DataFrame(payload["totals"]), export_name="categories.csv")
    left, right = st.columns(2)
    with left:
        with card(f"Top {params.top_n} categories by {params.metric}"):
            render_chart(payload, "totals")
    with right:
        with card(payload["pie"]["label"]):
            render_chart(payload, "pie")
    with card("Nominations vs wins"):
        render_chart(payload, "bubble")


def render_decades_page():
    payload = compute_decades(params, data_ctx)
    render_page_header("Decades", "Home / Decades", filter_summary_html)
    with card("Category distribution by decade"):
        render_chart(payload, "stacked")
    with card("Category stream"):
        render_chart(payload, "stream")
    with card("Decade x category heatmap"):
        render_chart(payload, "heatmap")


def render_trend_page():
    payload = compute_trend(params, data_ctx)
    render_page_header("Trend", "Home / Trend", filter_summary_html, export_df=pd.DataFrame(payload["yearly"]), export_name="trend.csv")
    with card(f"Nominations per year: {payload['category']}"):
        render_chart(payload, "trend")


def render_hierarchy_page():
    payload = compute_hierarchy(params, data_ctx)
    render_page_header("Hierarchy", "Home / Hierarchy", filter_summary_html)
    left, right = st.columns(2)
    with left:
        with card("Class → category → film"):
            render_chart(payload, "sunburst")
    with right:
        with card(f"Category → film (top {params.top_n} categories)"):
            render_chart(payload, "treemap")
    with st.expander("Category totals"):
        rows = [
            {"category": c["name"], "films": len(c.get("children", [])), "nominations": c["value"]}
            for c in payload["treemap"].get("children", [])
        ]
        st.dataframe(pd.DataFrame(rows, columns=["category", "films", "nominations"]).sort_values("nominations", ascending=False), hide_index=True, use_container_width=True)


def render_network_page():
    payload = compute_network(params, data_ctx)
    render_page_header("Network", "Home / Network", filter_summary_html)
    with card(f"Film ↔ category wins (top {params.network_top_n} films)"):
        render_chart(payload, "network", "No winning films found.")
    with st.expander("Nodes and edges"):
        st.dataframe(pd.DataFrame(payload["graph"]["nodes"]), hide_index=True, use_container_width=True)
        st.dataframe(pd.DataFrame(payload["graph"]["edges"]), hide_index=True, use_container_width=True)


def render_leaderboard_page():
    payload = compute_leaderboard(params, data_ctx)
    render_page_header("Leaderboard", "Home / Leaderboard", filter_summary_html, export_df=pd.DataFrame(payload["top"]), export_name="leaderboard.csv")
    title = "Top award winners" if payload["winners_only"] else "Most nominated"
    with card(title):
        render_chart(payload, "leaderboard")


if page == "Overview":
    render_overview_page()
elif page == "Categories":
    render_categories_page()
elif page == "Decades":
    render_decades_page()
elif page == "Trend":
    render_trend_page()
elif page == "Hierarchy":
    render_hierarchy_page()
elif page == "Network":
    render_network_page()
else:
    render_leaderboard_page()
