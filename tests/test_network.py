from __future__ import annotations

from awards.network import build_network
from awards.records import normalize_rows


class TestBuildNetwork:
    def test_empty_input(self):
        assert build_network([], 15).to_dict() == {"nodes": [], "edges": []}

    def test_no_winners(self, two_rows):
        losers = [r for r in two_rows if not r.is_winner]
        assert build_network(losers, 5).to_dict() == {"nodes": [], "edges": []}

    def test_top_films_ties_keep_encounter_order(self, records):
        graph = build_network(records, 2)
        films = [(n.id, n.name, n.value) for n in graph.nodes if n.type == "film"]
        assert films == [("film-0", "Gone with the Wind", 2), ("film-1", "All About Eve", 2)]

    def test_category_nodes_and_edges(self, records):
        graph = build_network(records, 2)
        cats = [(n.id, n.name, n.value) for n in graph.nodes if n.type == "category"]
        assert cats == [("cat-0", "Best Picture", 2), ("cat-1", "Directing", 2)]
        edges = [(e.source, e.target, e.value) for e in graph.edges]
        assert edges == [
            ("film-0", "cat-0", 1),
            ("film-0", "cat-1", 1),
            ("film-1", "cat-1", 1),
            ("film-1", "cat-0", 1),
        ]

    def test_category_value_sums_over_selected_films(self, records):
        graph = build_network(records, 10)
        values = {n.name: n.value for n in graph.nodes if n.type == "category"}
        assert values == {"Best Picture": 4, "Directing": 2}
        assert sum(e.value for e in graph.edges) == 6

    def test_bipartite(self, records):
        graph = build_network(records, 10)
        types = {n.id: n.type for n in graph.nodes}
        assert len(types) == len(graph.nodes)
        for e in graph.edges:
            assert types[e.source] == "film"
            assert types[e.target] == "category"

    def test_rebuild_is_deterministic(self, records):
        assert build_network(records, 3).to_dict() == build_network(records, 3).to_dict()

    def test_skips_winners_without_film(self):
        recs = normalize_rows([{"Category": "Honorary", "Winner": "1"}, {"Category": "Sound", "Film": "Z", "Winner": "1"}])
        graph = build_network(recs, 5)
        assert [n.name for n in graph.nodes] == ["Z", "Sound"]
