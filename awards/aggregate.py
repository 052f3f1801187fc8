"""Rollup primitives shared by every per-view summary.

Records are partitioned and ranked with pandas; key and reduce callables keep
the per-view code independent of column names. All functions are pure: they
never mutate their input and always return freshly allocated structures.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import pandas as pd

from awards.records import CanonicalRecord

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

KeyFn = Callable[[CanonicalRecord], Optional[Hashable]]
ReduceFn = Callable[[List[CanonicalRecord]], Any]


def _key_series(values: Iterable[Any]) -> pd.Series:
    # object dtype keeps keys as plain Python values (no numpy ints in payloads)
    return pd.Series(list(values), dtype=object)


def _partition(
    records: Iterable[CanonicalRecord], key_fn: KeyFn, unknown: Optional[Hashable]
) -> Iterator[Tuple[Hashable, List[CanonicalRecord]]]:
    recs = list(records)
    keys = [key_fn(r) for r in recs]
    if unknown is not None:
        keys = [unknown if k is None else k for k in keys]
    frame = pd.DataFrame({"key": _key_series(keys), "pos": range(len(recs))})
    for _, positions in frame.groupby("key", sort=False, dropna=True)["pos"]:
        yield keys[positions.iloc[0]], [recs[i] for i in positions]


def group_by(
    records: Iterable[CanonicalRecord],
    key_fn: KeyFn,
    reduce_fn: ReduceFn,
    *,
    unknown: Optional[Hashable] = None,
) -> Dict[Hashable, Any]:
    """Group records by `key_fn` and reduce each partition.

    Records whose key is None are skipped unless `unknown` names a bucket for
    them. Keys keep first-encounter order.
    """
    return {key: reduce_fn(part) for key, part in _partition(records, key_fn, unknown)}


def group_by2(
    records: Iterable[CanonicalRecord],
    outer_key_fn: KeyFn,
    inner_key_fn: KeyFn,
    reduce_fn: ReduceFn,
    *,
    inner_domain: Optional[Sequence[Hashable]] = None,
    empty: Any = 0,
) -> Dict[Hashable, Dict[Hashable, Any]]:
    """Two-level group-by (e.g. decade x category).

    With `inner_domain`, every outer group reports every inner key of the
    domain, domain keys first in domain order, missing ones set to `empty`.
    """
    domain = list(inner_domain) if inner_domain is not None else None
    out: Dict[Hashable, Dict[Hashable, Any]] = {}
    for outer, part in _partition(records, outer_key_fn, None):
        inner = pd.Series(group_by(part, inner_key_fn, reduce_fn), dtype=object)
        if domain is not None:
            extras = [k for k in inner.index if k not in domain]
            inner = inner.reindex(domain + extras, fill_value=empty)
        out[outer] = inner.to_dict()
    return out


def top_n(entries: Iterable[T], n: int, key: Callable[[T], float]) -> List[T]:
    """Descending rank by `key`, ties in first-encountered order, at most n items."""
    items = list(entries)
    if n <= 0 or not items:
        return []
    ranks = pd.Series([key(e) for e in items])
    order = ranks.sort_values(ascending=False, kind="stable").head(n).index
    return [items[i] for i in order]


def share(count: float, total: float) -> float:
    return count / total if total > 0 else 0.0


def shares(counts: Dict[K, float]) -> Dict[K, float]:
    total = sum(counts.values())
    return {k: share(v, total) for k, v in counts.items()}


def sorted_domain(records: Iterable[CanonicalRecord], key_fn: KeyFn) -> List[Any]:
    return sorted(_key_series(key_fn(r) for r in records).dropna().unique())


# ---------------- Reducers ----------------
def count(part: List[CanonicalRecord]) -> int:
    return len(part)


def count_wins(part: List[CanonicalRecord]) -> int:
    return sum(r.is_winner for r in part)


def nominations_and_wins(part: List[CanonicalRecord]) -> Dict[str, int]:
    return {"nominations": len(part), "wins": count_wins(part)}


def distinct(field: str) -> ReduceFn:
    """Reducer counting distinct non-missing values of `field`."""

    def _reduce(part: List[CanonicalRecord]) -> int:
        return int(_key_series(getattr(r, field) for r in part).nunique(dropna=True))

    return _reduce


def ranked_items(groups: Dict[Hashable, Any], key_name: str, value_name: str) -> List[Dict[str, Any]]:
    """Flatten `{key: value}` into `[{key_name: key, value_name: value}, ...]`."""
    return [{key_name: k, value_name: v} for k, v in groups.items()]
