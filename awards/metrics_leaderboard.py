from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import altair as alt
import pandas as pd

from awards.charts import to_vega_spec
from awards.filters import ViewParams
from awards.summaries import leaderboard


def compute_leaderboard(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    board = leaderboard(ctx.get("records", ()), top_n_items=params.leaderboard_top_n)
    items = board["items"]
    for rank, item in enumerate(items, start=1):
        item["rank"] = rank

    charts: Dict[str, Any] = {}
    if items:
        title = "Wins" if board["winners_only"] else "Nominations"
        bar = (
            alt.Chart(pd.DataFrame(items))
            .mark_bar()
            .encode(
                y=alt.Y("name:N", title=None, sort=alt.EncodingSortField(field="rank", order="ascending")),
                x=alt.X("count:Q", title=title, axis=alt.Axis(tickMinStep=1)),
                tooltip=[alt.Tooltip("rank:Q", title="Rank"), alt.Tooltip("name:N", title="Name"), alt.Tooltip("count:Q", title=title)],
            )
        )
        charts["leaderboard"] = to_vega_spec(bar)

    return {
        "filters": asdict(params),
        "winners_only": board["winners_only"],
        "top": items,
        "charts": charts,
    }
