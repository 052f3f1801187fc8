from __future__ import annotations

from typing import Dict, Iterable, List

# Tableau 10
PALETTE: List[str] = [
    "#4e79a7",
    "#f28e2c",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc949",
    "#af7aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ab",
]
FALLBACK_COLOR = "#999999"


def category_colors(domain: Iterable[str], palette: List[str] = PALETTE) -> Dict[str, str]:
    """Assign palette colours cyclically over the sorted, de-duplicated domain."""
    keys = sorted({str(d) for d in domain if d is not None})
    return {k: palette[i % len(palette)] for i, k in enumerate(keys)}


def color_for(colors: Dict[str, str], key: object) -> str:
    return colors.get(str(key), FALLBACK_COLOR) if key is not None else FALLBACK_COLOR
