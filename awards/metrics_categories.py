from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt
import pandas as pd

from awards.charts import category_color_scale, to_vega_spec
from awards.filters import ViewParams
from awards.summaries import category_bubble, category_totals, pie_share


def compute_categories(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    color_scale = category_color_scale(ctx.get("categories", []))
    totals = category_totals(records, metric=params.metric, top_n_items=params.top_n)
    bubble = category_bubble(records, top_n_items=params.bubble_top_n)
    pie = pie_share(records)

    charts: Dict[str, Any] = {}
    if totals:
        df = pd.DataFrame(totals)
        hover = alt.selection_point(fields=["cat"], on="mouseover", empty="all")
        bar = (
            alt.Chart(df)
            .mark_bar()
            .encode(
                y=alt.Y("cat:N", title=None, sort=alt.EncodingSortField(field=params.metric, order="descending")),
                x=alt.X(f"{params.metric}:Q", title=params.metric.capitalize(), axis=alt.Axis(format="~s", gridDash=[4, 4])),
                color=alt.Color("cat:N", scale=color_scale, legend=None),
                opacity=alt.condition(hover, alt.value(1), alt.value(0.6)),
                tooltip=[
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("nominations:Q", title="Nominations", format=","),
                    alt.Tooltip("wins:Q", title="Wins", format=","),
                    alt.Tooltip("win_rate:Q", title="Win rate", format=".1%"),
                ],
            )
            .add_params(hover)
        )
        charts["totals"] = to_vega_spec(bar)

    if bubble:
        scatter = (
            alt.Chart(pd.DataFrame(bubble))
            .mark_circle(opacity=0.7, stroke="#ffffff", strokeWidth=1)
            .encode(
                x=alt.X("nominations:Q", title="Nominations"),
                y=alt.Y("wins:Q", title="Wins"),
                size=alt.Size("total:Q", legend=None, scale=alt.Scale(type="sqrt")),
                color=alt.Color("cat:N", scale=color_scale, legend=None),
                tooltip=[
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("nominations:Q", format=","),
                    alt.Tooltip("wins:Q", format=","),
                ],
            )
        )
        charts["bubble"] = to_vega_spec(scatter)

    if pie["parts"]:
        donut = (
            alt.Chart(pd.DataFrame(pie["parts"]))
            .mark_arc(innerRadius=60)
            .encode(
                theta=alt.Theta("count:Q"),
                color=alt.Color("cat:N", scale=color_scale, title="Category"),
                tooltip=[
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("count:Q", title="Count", format=","),
                    alt.Tooltip("pct:Q", title="Share", format=".1%"),
                ],
            )
            .properties(title=pie["label"])
        )
        charts["pie"] = to_vega_spec(donut)

    return {
        "filters": asdict(params),
        "metric": params.metric,
        "totals": totals,
        "bubble": bubble,
        "pie": pie,
        "charts": charts,
    }
