from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt
import pandas as pd

from awards.charts import to_vega_spec
from awards.filters import ViewParams
from awards.summaries import films_per_decade, kpi_summary


def compute_overview(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    kpis = kpi_summary(records)
    per_decade = films_per_decade(records)

    charts: Dict[str, Any] = {}
    if per_decade:
        df = pd.DataFrame(per_decade)
        hover = alt.selection_point(fields=["decade"], on="mouseover", empty="all")
        bar = (
            alt.Chart(df)
            .mark_bar()
            .encode(
                x=alt.X("decade:O", title="Decade", axis=alt.Axis(labelExpr="datum.value + 's'", grid=False)),
                y=alt.Y("films:Q", title="Distinct films", axis=alt.Axis(format="~s", gridDash=[4, 4], domain=False, ticks=False)),
                opacity=alt.condition(hover, alt.value(1), alt.value(0.6)),
                tooltip=[alt.Tooltip("decade:O", title="Decade"), alt.Tooltip("films:Q", title="Films", format=",")],
            )
            .add_params(hover)
            .properties(height=300)
        )
        charts["films_per_decade"] = to_vega_spec(bar)

    return {
        "filters": asdict(params),
        "kpis": kpis,
        "films_per_decade": per_decade,
        "charts": charts,
    }
