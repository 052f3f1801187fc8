"""Per-view summaries.

Each function is a thin adapter over the aggregation, hierarchy and network
builders: `(records, view parameters) -> aggregate`. They recompute from
scratch on every call and never mutate the record collection.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from awards.aggregate import (
    count,
    distinct,
    group_by,
    group_by2,
    nominations_and_wins,
    ranked_items,
    share,
    shares,
    sorted_domain,
    top_n,
)
from awards.filters import Metric
from awards.hierarchy import HierarchyNode, build_hierarchy
from awards.records import CanonicalRecord

Records = Sequence[CanonicalRecord]

NO_SPAN = "—"


def _cat(r: CanonicalRecord) -> Optional[str]:
    return r.cat


def _decade(r: CanonicalRecord) -> Optional[int]:
    return r.decade


def available_categories(records: Records) -> List[str]:
    return sorted_domain(records, _cat)


def available_decades(records: Records) -> List[int]:
    return sorted_domain(records, _decade)


def available_classes(records: Records) -> List[str]:
    return sorted_domain(records, lambda r: r.award_class)


def kpi_summary(records: Records) -> Dict[str, Any]:
    years = sorted_domain(records, lambda r: r.year_parsed)
    return {
        "total": len(records),
        "span": f"{years[0]}–{years[-1]}" if years else NO_SPAN,
        "years": len(years),
        "cats": distinct("cat")(list(records)),
        "films": distinct("film")(list(records)),
        "people": distinct("name")(list(records)),
    }


def category_totals(records: Records, *, metric: Metric = "nominations", top_n_items: int = 15) -> List[Dict[str, Any]]:
    grouped = group_by(records, _cat, nominations_and_wins)
    items = [
        {"cat": cat, **vals, "win_rate": share(vals["wins"], vals["nominations"])}
        for cat, vals in grouped.items()
    ]
    return top_n(items, top_n_items, key=lambda d: d[metric])


def category_bubble(records: Records, *, top_n_items: int = 20) -> List[Dict[str, Any]]:
    """Category totals ranked by volume, sized for a nominations-vs-wins scatter."""
    grouped = group_by(records, _cat, nominations_and_wins)
    items = [{"cat": cat, **vals, "total": vals["nominations"]} for cat, vals in grouped.items()]
    return top_n(items, top_n_items, key=lambda d: d["total"])


def stacked_by_decade(records: Records, *, decade_range: Optional[Tuple[int, int]] = None) -> List[Dict[str, Any]]:
    """Decade rows of per-category counts and within-decade shares.

    The category domain comes from the whole collection, so a category absent
    from a decade (or from the selected range) still reports 0.
    """
    cats = available_categories(records)
    in_range = [
        r
        for r in records
        if r.decade is not None and (decade_range is None or decade_range[0] <= r.decade <= decade_range[1])
    ]
    grid = group_by2(in_range, _decade, _cat, count, inner_domain=cats)
    rows = []
    for decade in sorted(grid):
        counts = grid[decade]
        total = sum(counts.values())
        rows.append({"decade": decade, "counts": counts, "pct": shares(counts), "total": total})
    return rows


def yearly_trend(records: Records, category: Optional[str]) -> List[Dict[str, int]]:
    matching = [r for r in records if r.cat == category]
    grouped = group_by(matching, lambda r: r.year_parsed, count)
    return [{"year": year, "count": grouped[year]} for year in sorted(grouped)]


def stream_series(records: Records, *, top_n_items: int = 8) -> Dict[str, Any]:
    decades = available_decades(records)
    totals = group_by(records, _cat, count)
    # ties in volume fall back to alphabetical order
    ranked = top_n(sorted(totals.items()), top_n_items, key=lambda kv: kv[1])
    grid = group_by2(records, _decade, _cat, count)
    series = [
        {
            "name": cat,
            "total": total,
            "values": [{"decade": d, "value": grid.get(d, {}).get(cat, 0)} for d in decades],
        }
        for cat, total in ranked
    ]
    return {"decades": decades, "series": series}


def heatmap_grid(records: Records) -> Dict[str, Any]:
    cats = available_categories(records)
    grid = group_by2(records, _decade, _cat, count, inner_domain=cats)
    decades = sorted(grid)
    rows = [{"decade": d, "counts": grid[d]} for d in decades]
    cells = [{"decade": d, "cat": c, "value": grid[d][c]} for d in decades for c in cats]
    return {
        "decades": decades,
        "categories": cats,
        "rows": rows,
        "cells": cells,
        "max": max((c["value"] for c in cells), default=0),
    }


def films_per_decade(records: Records) -> List[Dict[str, int]]:
    grouped = group_by(records, _decade, distinct("film"))
    return [{"decade": d, "films": grouped[d]} for d in sorted(grouped)]


def _winners_or_all(records: Records) -> Tuple[List[CanonicalRecord], bool]:
    winners = [r for r in records if r.is_winner]
    return (winners, True) if winners else (list(records), False)


def leaderboard(records: Records, *, top_n_items: int = 10) -> Dict[str, Any]:
    named = [r for r in records if r.name]
    base, winners_only = _winners_or_all(named)
    grouped = group_by(base, lambda r: r.name, count)
    items = top_n(ranked_items(grouped, "name", "count"), top_n_items, key=lambda d: d["count"])
    return {"winners_only": winners_only, "items": items}


def pie_share(records: Records, *, top_n_items: int = 10) -> Dict[str, Any]:
    base, winners_only = _winners_or_all(records)
    grouped = group_by(base, _cat, count)
    top = top_n(grouped.items(), top_n_items, key=lambda kv: kv[1])
    total = sum(n for _, n in top)
    return {
        "winners_only": winners_only,
        "label": "Share of wins by category" if winners_only else "Share of nominations by category",
        "total": total,
        "parts": [{"cat": cat, "count": n, "pct": share(n, total)} for cat, n in top],
    }


def treemap(records: Records) -> HierarchyNode:
    return build_hierarchy(records, [_cat, lambda r: r.film])


def sunburst(records: Records) -> HierarchyNode:
    return build_hierarchy(records, [lambda r: r.award_class, _cat, lambda r: r.film])
