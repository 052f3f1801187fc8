"""Bipartite film <-> category network of winning records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Literal

from awards.aggregate import count, group_by, top_n
from awards.records import CanonicalRecord

NodeType = Literal["film", "category"]


@dataclass(frozen=True)
class NetworkNode:
    id: str
    name: str
    type: NodeType
    value: int


@dataclass(frozen=True)
class NetworkEdge:
    source: str
    target: str
    value: int


@dataclass
class NetworkGraph:
    nodes: List[NetworkNode] = field(default_factory=list)
    edges: List[NetworkEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": [asdict(n) for n in self.nodes], "edges": [asdict(e) for e in self.edges]}


def build_network(records: Iterable[CanonicalRecord], top_n_films: int) -> NetworkGraph:
    """Build the film/category graph for the `top_n_films` most-winning films.

    Ids are `film-<rank>` and `cat-<first-seen index>`; they are only stable
    within one build. A category's value is its win count summed over every
    selected film it is linked to.
    """
    winners = [r for r in records if r.is_winner and r.film and r.cat]
    film_wins = group_by(winners, lambda r: r.film, count)
    top_films = top_n(film_wins.items(), top_n_films, key=lambda kv: kv[1])
    if not top_films:
        return NetworkGraph()

    selected = {film for film, _ in top_films}
    by_film = group_by((r for r in winners if r.film in selected), lambda r: r.film, list)

    graph = NetworkGraph()
    film_ids: Dict[str, str] = {}
    for i, (film, wins) in enumerate(top_films):
        film_ids[film] = f"film-{i}"
        graph.nodes.append(NetworkNode(id=film_ids[film], name=film, type="film", value=wins))

    cat_ids: Dict[str, str] = {}
    cat_values: Dict[str, int] = {}
    for film, _ in top_films:
        for cat, n in group_by(by_film[film], lambda r: r.cat, count).items():
            if cat not in cat_ids:
                cat_ids[cat] = f"cat-{len(cat_ids)}"
                cat_values[cat] = 0
            cat_values[cat] += n
            graph.edges.append(NetworkEdge(source=film_ids[film], target=cat_ids[cat], value=n))

    for cat, cat_id in cat_ids.items():
        graph.nodes.append(NetworkNode(id=cat_id, name=cat, type="category", value=cat_values[cat]))
    return graph
