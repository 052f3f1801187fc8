from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt
import pandas as pd

from awards.charts import to_vega_spec
from awards.colors import category_colors, color_for
from awards.filters import ViewParams
from awards.summaries import yearly_trend


def compute_trend(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    categories = ctx.get("categories", [])
    category = params.category or (categories[0] if categories else None)
    yearly = yearly_trend(records, category)

    charts: Dict[str, Any] = {}
    if yearly:
        line_color = color_for(category_colors(categories), category)
        line = (
            alt.Chart(pd.DataFrame(yearly))
            .mark_line(point={"filled": True, "size": 40}, color=line_color)
            .encode(
                x=alt.X("year:Q", title="Year", axis=alt.Axis(format="d", grid=False)),
                y=alt.Y("count:Q", title="Nominations", axis=alt.Axis(tickMinStep=1, gridDash=[4, 4], domain=False, ticks=False)),
                tooltip=[alt.Tooltip("year:Q", title="Year", format="d"), alt.Tooltip("count:Q", title="Count")],
            )
            .properties(height=260, title=category or "")
        )
        charts["trend"] = to_vega_spec(line)

    return {
        "filters": asdict(params),
        "category": category,
        "options": categories,
        "yearly": yearly,
        "charts": charts,
    }
