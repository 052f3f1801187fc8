from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal, Optional, Tuple

Metric = Literal["nominations", "wins"]
StackMode = Literal["counts", "percent"]

METRICS = ("nominations", "wins")
STACK_MODES = ("counts", "percent")
DEFAULT_DECADE_RANGE = (1900, 2020)


@dataclass(frozen=True)
class ViewParams:
    top_n: int = 15
    metric: Metric = "nominations"
    category: Optional[str] = None
    decade_range: Optional[Tuple[int, int]] = None
    stack_mode: StackMode = "counts"
    stream_top_n: int = 8
    network_top_n: int = 15
    leaderboard_top_n: int = 10
    bubble_top_n: int = 20


def _clamp_int(value: object, default: int, lo: int = 1, hi: int = 200) -> int:
    try:
        out = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        out = default
    return max(lo, min(hi, out))


def _full_range(available_decades: List[int]) -> Tuple[int, int]:
    if available_decades:
        return available_decades[0], available_decades[-1]
    return DEFAULT_DECADE_RANGE


def _as_decade_range(value: object, available_decades: List[int]) -> Tuple[int, int]:
    if value is None:
        return _full_range(available_decades)
    try:
        start, end = (int(v) for v in value)  # type: ignore[union-attr]
    except (TypeError, ValueError):
        return _full_range(available_decades)
    if start > end:
        start, end = end, start
    return start, end


def normalize_params(
    raw: dict,
    *,
    available_decades: Optional[Iterable[int]] = None,
    categories: Optional[Iterable[str]] = None,
) -> ViewParams:
    """Clamp and default raw UI/API input into a ViewParams."""
    decades = sorted(available_decades or [])
    cats = sorted(categories or [])

    metric = raw.get("metric") or "nominations"
    if metric not in METRICS:
        metric = "nominations"
    stack_mode = raw.get("stack_mode") or "counts"
    if stack_mode not in STACK_MODES:
        stack_mode = "counts"

    category = (raw.get("category") or "").strip() or None
    if category is None or (cats and category not in cats):
        category = cats[0] if cats else category

    return ViewParams(
        top_n=_clamp_int(raw.get("top_n", 15), 15),
        metric=metric,
        category=category,
        decade_range=_as_decade_range(raw.get("decade_range"), decades),
        stack_mode=stack_mode,
        stream_top_n=_clamp_int(raw.get("stream_top_n", 8), 8, hi=50),
        network_top_n=_clamp_int(raw.get("network_top_n", 15), 15, hi=100),
        leaderboard_top_n=_clamp_int(raw.get("leaderboard_top_n", 10), 10),
        bubble_top_n=_clamp_int(raw.get("bubble_top_n", 20), 20),
    )
