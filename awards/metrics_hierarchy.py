from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

import altair as alt
import pandas as pd

from awards.aggregate import top_n
from awards.charts import category_color_scale, to_vega_spec
from awards.filters import ViewParams
from awards.hierarchy import HierarchyNode
from awards.summaries import sunburst, treemap

# (ring, inner radius, outer radius) per depth: class, category, film
RINGS = ((0, 30, 80), (1, 84, 130), (2, 134, 180))


def _ring_rows(root: HierarchyNode) -> List[Dict[str, Any]]:
    """Flatten the tree depth-first into arc segments, one ring per level.

    Segments are ordered by visit, so every child arc sits under its parent.
    """
    rows: List[Dict[str, Any]] = []

    def walk(node: HierarchyNode, depth: int, top: str, path: str) -> None:
        for child in node.children:
            label = child.name if depth == 0 else top
            full = f"{path} → {child.name}" if path else child.name
            rows.append({"ring": depth, "name": child.name, "class": label, "path": full, "value": child.value, "order": len(rows)})
            walk(child, depth + 1, label, full)

    walk(root, 0, "", "")
    return rows


def _tile_rows(root: HierarchyNode, limit: int) -> List[Dict[str, Any]]:
    """Film tiles of the `limit` largest categories, in category then film order."""
    cats = top_n(root.children, limit, key=lambda c: c.value)
    return [
        {"cat": cat.name, "film": film.name, "value": film.value, "order": i}
        for cat in cats
        for i, film in enumerate(cat.children)
    ]


def compute_hierarchy(params: ViewParams, ctx: Dict[str, Any]) -> Dict[str, Any]:
    records = ctx.get("records", ())
    tree = treemap(records)
    burst = sunburst(records)

    charts: Dict[str, Any] = {}
    rows = _ring_rows(burst)
    if rows:
        base = alt.Chart(pd.DataFrame(rows)).encode(
            theta=alt.Theta("value:Q", stack=True),
            order=alt.Order("order:Q"),
            color=alt.Color("class:N", title="Class"),
            tooltip=[
                alt.Tooltip("path:N", title="Path"),
                alt.Tooltip("value:Q", title="Nominations", format=","),
            ],
        )
        rings = [
            base.transform_filter(alt.datum.ring == ring).mark_arc(
                innerRadius=inner, outerRadius=outer, opacity=1 - 0.2 * ring, stroke="#ffffff", strokeWidth=0.5
            )
            for ring, inner, outer in RINGS
        ]
        charts["sunburst"] = to_vega_spec(alt.layer(*rings).properties(height=380))

    tiles = _tile_rows(tree, params.top_n)
    if tiles:
        hover = alt.selection_point(fields=["film"], on="mouseover", empty="all")
        bars = (
            alt.Chart(pd.DataFrame(tiles))
            .mark_bar(stroke="#ffffff", strokeWidth=0.5)
            .encode(
                y=alt.Y("cat:N", title=None, sort=None),
                x=alt.X("value:Q", stack="zero", title="Nominations"),
                order=alt.Order("order:Q"),
                color=alt.Color("cat:N", scale=category_color_scale(ctx.get("categories", [])), legend=None),
                opacity=alt.condition(hover, alt.value(1), alt.value(0.6)),
                tooltip=[
                    alt.Tooltip("cat:N", title="Category"),
                    alt.Tooltip("film:N", title="Film"),
                    alt.Tooltip("value:Q", title="Nominations", format=","),
                ],
            )
            .add_params(hover)
            .properties(height=max(240, 24 * len({t["cat"] for t in tiles})))
        )
        charts["treemap"] = to_vega_spec(bars)

    return {
        "filters": asdict(params),
        "treemap": tree.to_dict(),
        "sunburst": burst.to_dict(),
        "charts": charts,
    }
