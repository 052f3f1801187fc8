from __future__ import annotations

from typing import Any, Dict, Iterable

import altair as alt

from awards.colors import category_colors

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.TopLevelMixin) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def category_color_scale(domain: Iterable[str]) -> alt.Scale:
    """Fixed category -> colour scale so every page colours a category the same."""
    colors = category_colors(domain)
    return alt.Scale(domain=list(colors.keys()), range=list(colors.values()))
