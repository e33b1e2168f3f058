"""Tests for style validation, palettes and colour assignment."""

import pytest

from morphax.data import Point
from morphax.style import (
    DEFAULT_PALETTE,
    PALETTES,
    ColorMode,
    PointShape,
    StyleParameters,
    assign_colors,
    get_palette,
    legend_entries,
    point_colors,
)


class TestAssignColors:
    def test_order_independent(self):
        palette = ("red", "green", "blue")
        assert assign_colors(["b", "a", "c"], palette) == assign_colors(["c", "c", "a", "b"], palette)
        assert assign_colors(["b", "a"], palette) == {"a": "red", "b": "green"}

    def test_palette_wraps(self):
        colors = assign_colors(["a", "b", "c"], ("red", "blue"))
        assert colors == {"a": "red", "b": "blue", "c": "red"}

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError, match="empty palette"):
            assign_colors(["a"], ())

    def test_point_colors_by_category(self, three_points, style):
        colors = point_colors(three_points, style)
        assert colors["p0"] == colors["p2"] == DEFAULT_PALETTE[0]
        assert colors["p1"] == DEFAULT_PALETTE[1]

    def test_single_colour_mode(self, three_points):
        style = StyleParameters(color_mode="SINGLE", base_color="#123456")
        assert set(point_colors(three_points, style).values()) == {"#123456"}
        assert legend_entries(three_points, style) == []

    def test_legend_is_sorted(self, style):
        points = [Point("1", "zeta"), Point("2", "alpha")]
        assert [c for c, _ in legend_entries(points, style)] == ["alpha", "zeta"]


class TestPalettes:
    def test_presets(self):
        assert set(PALETTES) == {"PASTEL", "VIBRANT", "OCEAN", "SUNSET", "NEON", "ELEGANT"}
        assert get_palette("neon") == PALETTES["NEON"]

    def test_matplotlib_qualitative_map(self):
        palette = get_palette("tab10")
        assert len(palette) == 10
        assert all(c.startswith("#") for c in palette)

    @pytest.mark.parametrize("name", ["viridis", "no-such-palette"])
    def test_rejected(self, name):
        with pytest.raises(ValueError, match="Unknown palette"):
            get_palette(name)


class TestStyleParameters:
    def test_defaults(self):
        style = StyleParameters()
        assert style.point_radius == 8.0
        assert style.opacity == 0.8
        assert style.color_mode is ColorMode.CATEGORY
        assert style.geometry_key() == (8.0,)

    @pytest.mark.parametrize("radius", [0, -1, float("nan"), float("inf")])
    def test_invalid_radius(self, radius):
        with pytest.raises(ValueError, match="point_radius"):
            StyleParameters(point_radius=radius)

    def test_invalid_palette(self):
        with pytest.raises(ValueError, match="at least one colour"):
            StyleParameters(palette=())
        with pytest.raises(ValueError, match="Invalid palette colours"):
            StyleParameters(palette=("#fff", "not-a-colour"))

    @pytest.mark.parametrize("opacity", [0.0, 1.5])
    def test_invalid_opacity(self, opacity):
        with pytest.raises(ValueError, match="opacity"):
            StyleParameters(opacity=opacity)

    def test_replace_revalidates(self, style):
        with pytest.raises(ValueError):
            style.replace(point_radius=0)

    def test_shape_is_presentation_only(self, style):
        star = style.replace(shape="STAR")
        assert star.shape is PointShape.STAR
        assert StyleParameters().shape is PointShape.CIRCLE
        assert star.geometry_key() == style.geometry_key()

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            StyleParameters(shape="HEXAGON")
