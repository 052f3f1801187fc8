from __future__ import annotations

from awards.colors import FALLBACK_COLOR, PALETTE, category_colors, color_for


class TestCategoryColors:
    def test_sorted_domain_assignment(self):
        colors = category_colors(["b", "a", "c", "a"])
        assert list(colors) == ["a", "b", "c"]
        assert colors["a"] == PALETTE[0]
        assert colors["c"] == PALETTE[2]

    def test_independent_of_input_order(self):
        assert category_colors(["x", "y", "z"]) == category_colors(["z", "x", "y"])

    def test_palette_cycles(self):
        domain = [f"c{i:02d}" for i in range(len(PALETTE) + 1)]
        colors = category_colors(domain)
        assert colors[domain[-1]] == PALETTE[0]

    def test_fallback(self):
        colors = category_colors(["a"])
        assert color_for(colors, "missing") == FALLBACK_COLOR
        assert color_for(colors, None) == FALLBACK_COLOR
        assert color_for(colors, "a") == PALETTE[0]
