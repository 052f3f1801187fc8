from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

import altair as alt
import pandas as pd

from awards.charts import category_color_scale, to_vega_spec
from awards.filters import ViewParams
from awards.summaries import heatmap_grid, stacked_by_decade, stream_series


def _stacked_long(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    long_rows = [
        {"decade": row["decade"], "cat": cat, "count": cnt, "pct": row["pct"][cat]}
        for row in rows
        for cat, cnt in row["counts"].items()
    ]
    return pd.DataFrame(long_rows, columns=["decade", "cat", "count", "pct"])


def compute_decades(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    color_scale = category_color_scale(ctx.get("categories", []))
    stacked = stacked_by_decade(records, decade_range=params.decade_range)
    heatmap = heatmap_grid(records)
    stream = stream_series(records, top_n_items=params.stream_top_n)

    charts: Dict[str, Any] = {}
    if stacked:
        value_col = "pct" if params.stack_mode == "percent" else "count"
        value_format = ".0%" if params.stack_mode == "percent" else ",d"
        hover = alt.selection_point(fields=["cat"], on="mouseover", empty="all")
        bars = (
            alt.Chart(_stacked_long(stacked))
            .mark_bar()
            .encode(
                x=alt.X("decade:O", title="Decade", axis=alt.Axis(labelExpr="datum.value + 's'", grid=False)),
                y=alt.Y(f"{value_col}:Q", stack="zero", title="Share" if value_col == "pct" else "Nominations", axis=alt.Axis(format=value_format)),
                color=alt.Color("cat:N", scale=color_scale, legend=None),
                opacity=alt.condition(hover, alt.value(1), alt.value(0.3)),
                tooltip=[
                    alt.Tooltip("decade:O", title="Decade"),
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("count:Q", title="Count", format=","),
                    alt.Tooltip("pct:Q", title="Share of decade", format=".1%"),
                ],
            )
            .add_params(hover)
            .properties(height=360)
        )
        charts["stacked"] = to_vega_spec(bars)

    if heatmap["cells"]:
        grid = (
            alt.Chart(pd.DataFrame(heatmap["cells"]))
            .mark_rect()
            .encode(
                x=alt.X("decade:O", title="Decade", axis=alt.Axis(labelExpr="datum.value + 's'")),
                y=alt.Y("cat:N", title=None),
                color=alt.Color("value:Q", title="Nominations", scale=alt.Scale(scheme="yellowgreenblue", domain=[0, heatmap["max"] or 1])),
                tooltip=[
                    alt.Tooltip("decade:O", title="Decade"),
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("value:Q", title="Nominations", format=","),
                ],
            )
            .properties(height=max(600, 14 * len(heatmap["categories"])))
        )
        charts["heatmap"] = to_vega_spec(grid)

    if stream["series"]:
        stream_df = pd.DataFrame(
            [{"cat": s["name"], "decade": v["decade"], "value": v["value"]} for s in stream["series"] for v in s["values"]]
        )
        hover = alt.selection_point(fields=["cat"], on="mouseover", empty="all")
        areas = (
            alt.Chart(stream_df)
            .mark_area(interpolate="monotone")
            .encode(
                x=alt.X("decade:O", title="Decade", axis=alt.Axis(labelExpr="datum.value + 's'")),
                y=alt.Y("value:Q", stack="center", title=None, axis=None),
                color=alt.Color("cat:N", scale=color_scale, title="Category"),
                opacity=alt.condition(hover, alt.value(0.9), alt.value(0.3)),
                tooltip=[
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("decade:O", title="Decade"),
                    alt.Tooltip("value:Q", title="Nominations", format=","),
                ],
            )
            .add_params(hover)
        )
        charts["stream"] = to_vega_spec(areas)

    return {
        "filters": asdict(params),
        "decade_range": list(params.decade_range) if params.decade_range else None,
        "stacked": stacked,
        "heatmap": heatmap,
        "stream": stream,
        "charts": charts,
    }
