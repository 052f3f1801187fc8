from __future__ import annotations

import pytest

from awards.data import build_context
from awards.filters import normalize_params
from awards.metrics_categories import compute_categories
from awards.metrics_decades import compute_decades
from awards.metrics_hierarchy import _ring_rows, _tile_rows, compute_hierarchy
from awards.metrics_leaderboard import compute_leaderboard
from awards.metrics_network import compute_network
from awards.metrics_overview import compute_overview
from awards.metrics_trend import compute_trend
from awards.summaries import sunburst, treemap

PAGES = [
    (compute_overview, "films_per_decade"),
    (compute_categories, "totals"),
    (compute_decades, "stacked"),
    (compute_trend, "trend"),
    (compute_hierarchy, "sunburst"),
    (compute_network, "network"),
    (compute_leaderboard, "leaderboard"),
]


@pytest.fixture
def params(ctx):
    return normalize_params({}, available_decades=ctx["decades"], categories=ctx["categories"])


@pytest.mark.parametrize("compute,chart", PAGES)
def test_page_builds_vega_lite_chart(compute, chart, params, ctx):
    payload = compute(params, ctx)
    assert payload["filters"]["top_n"] == params.top_n
    spec = payload["charts"][chart]
    assert spec["$schema"].startswith("https://vega.github.io/schema/vega-lite/")


@pytest.mark.parametrize("compute,chart", PAGES)
def test_page_on_empty_dataset(compute, chart):
    empty_ctx = build_context(())
    payload = compute(normalize_params({}), empty_ctx)
    assert payload["charts"] == {}


class TestOverview:
    def test_kpis(self, params, ctx):
        payload = compute_overview(params, ctx)
        assert payload["kpis"]["total"] == 9
        assert payload["films_per_decade"][0] == {"decade": 1930, "films": 3}


class TestCategories:
    def test_metric_switch(self, ctx):
        params = normalize_params({"metric": "wins", "top_n": 1}, categories=ctx["categories"])
        payload = compute_categories(params, ctx)
        assert payload["metric"] == "wins"
        assert [d["cat"] for d in payload["totals"]] == ["Best Picture"]
        assert payload["pie"]["winners_only"] is True
        assert "pie" in payload["charts"]
        assert "bubble" in payload["charts"]


class TestDecades:
    def test_range_and_percent_mode(self, ctx):
        params = normalize_params({"decade_range": [1940, 1950], "stack_mode": "percent"}, available_decades=ctx["decades"])
        payload = compute_decades(params, ctx)
        assert payload["decade_range"] == [1940, 1950]
        assert [r["decade"] for r in payload["stacked"]] == [1940, 1950]
        assert payload["heatmap"]["max"] == 3
        assert {"stacked", "heatmap", "stream"} <= set(payload["charts"])


class TestTrend:
    def test_selected_category(self, ctx):
        params = normalize_params({"category": "Directing"}, categories=ctx["categories"])
        payload = compute_trend(params, ctx)
        assert payload["category"] == "Directing"
        assert payload["yearly"] == [{"year": 1939, "count": 1}, {"year": 1950, "count": 1}]


class TestHierarchy:
    def test_trees(self, params, ctx):
        payload = compute_hierarchy(params, ctx)
        assert payload["treemap"]["value"] == 9
        assert payload["sunburst"]["children"][0]["name"] == "Title"
        assert {"sunburst", "treemap"} <= set(payload["charts"])

    def test_sunburst_rings_reach_films(self, records):
        rows = _ring_rows(sunburst(records))
        totals = {ring: sum(r["value"] for r in rows if r["ring"] == ring) for ring in (0, 1, 2)}
        assert totals == {0: 9, 1: 9, 2: 9}
        films = [r for r in rows if r["ring"] == 2]
        assert films[0]["path"] == "Title → Best Picture → Gone with the Wind"
        assert [r["order"] for r in films] == sorted(r["order"] for r in films)

    def test_treemap_tiles_limited_to_largest_categories(self, records):
        tiles = _tile_rows(treemap(records), 1)
        assert {t["cat"] for t in tiles} == {"Best Picture"}
        assert sum(t["value"] for t in tiles) == 6


class TestNetwork:
    def test_graph_payload(self, ctx):
        params = normalize_params({"network_top_n": 2})
        payload = compute_network(params, ctx)
        assert payload["top_n_films"] == 2
        assert len(payload["graph"]["nodes"]) == 4
        assert payload["graph"]["edges"][0] == {"source": "film-0", "target": "cat-0", "value": 1}


class TestLeaderboard:
    def test_ranks(self, params, ctx):
        payload = compute_leaderboard(params, ctx)
        assert payload["winners_only"] is True
        assert payload["top"][0] == {"name": "Selznick", "count": 2, "rank": 1}
        assert [d["rank"] for d in payload["top"]] == list(range(1, len(payload["top"]) + 1))
