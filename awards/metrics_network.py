from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt
import pandas as pd

from awards.charts import category_color_scale, to_vega_spec
from awards.filters import ViewParams
from awards.network import build_network


def compute_network(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    graph = build_network(records, params.network_top_n)
    payload = graph.to_dict()

    charts: Dict[str, Any] = {}
    if graph.edges:
        names = {n.id: n.name for n in graph.nodes}
        film_order = [n.name for n in graph.nodes if n.type == "film"]
        df = pd.DataFrame(
            [{"film": names[e.source], "cat": names[e.target], "value": e.value} for e in graph.edges]
        )
        # Vega-Lite has no force layout; edges render as a film x category matrix
        matrix = (
            alt.Chart(df)
            .mark_circle()
            .encode(
                y=alt.Y("film:N", title=None, sort=film_order),
                x=alt.X("cat:N", title=None, axis=alt.Axis(labelAngle=-40)),
                size=alt.Size("value:Q", title="Wins", scale=alt.Scale(type="sqrt")),
                color=alt.Color("cat:N", scale=category_color_scale(ctx.get("categories", [])), legend=None),
                tooltip=[
                    alt.Tooltip("film:N", title="Film"),
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("value:Q", title="Wins"),
                ],
            )
        )
        charts["network"] = to_vega_spec(matrix)

    return {
        "filters": asdict(params),
        "top_n_films": params.network_top_n,
        "graph": payload,
        "charts": charts,
    }
