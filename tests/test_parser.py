"""Tests for paint style collection."""

import pytest

from ds_colors.parser import (
    NamedColor,
    collect_colors,
    escape_enum_name,
    escape_string_name,
    exclude_prefixes,
    is_avatar_color,
    local_paint_styles,
    paint_style_ids,
)


def solid(r, g, b, opacity=None):
    paint = {"type": "SOLID", "color": {"r": r, "g": g, "b": b}}
    if opacity is not None:
        paint["opacity"] = opacity
    return paint


GRADIENT = {"type": "GRADIENT_LINEAR", "gradientStops": []}


class TestEscaping:
    """Tests for name escaping."""

    def test_enum_name_strips_accents_and_symbols(self):
        assert escape_enum_name("Café/Red-1") == "CafeRed1"

    def test_enum_name_keeps_underscore(self):
        assert escape_enum_name("Grey_Scale/Black 50%") == "Grey_ScaleBlack50"

    def test_enum_name_drops_non_latin(self):
        assert escape_enum_name("Ñandú/Ω") == "Nandu"

    def test_string_name_escapes_every_quote(self):
        assert escape_string_name('Say "hi" "there"') == 'Say \\"hi\\" \\"there\\"'


class TestExclusion:
    """Tests for the style name exclusion predicates."""

    def test_avatar_prefix(self):
        assert is_avatar_color("Avatar user square/Blue")
        assert not is_avatar_color("Avatar user circle/Blue")
        assert not is_avatar_color("Primary/Avatar user square/")

    def test_custom_prefixes(self):
        exclude = exclude_prefixes(["Deprecated/", "Tmp "])
        assert exclude("Deprecated/Red")
        assert exclude("Tmp color")
        assert not exclude("Primary/Red")

    def test_empty_prefixes_exclude_nothing(self):
        exclude = exclude_prefixes(["", ""])
        assert not exclude("Anything")


class TestCollectColors:
    """Tests for collect_colors."""

    def test_keeps_order_and_fields(self):
        styles = [
            {"name": "A/B", "paints": [solid(1, 0, 0, 1)]},
            {"name": "C", "paints": [solid(0, 0, 1, 0.5)]},
        ]
        colors = collect_colors(styles)

        assert colors == [
            NamedColor("A/B", "A/B", "AB", {"r": 1, "g": 0, "b": 0}, 1),
            NamedColor("C", "C", "C", {"r": 0, "g": 0, "b": 1}, 0.5),
        ]

    def test_avatar_style_is_skipped(self):
        styles = [
            {"name": "Avatar user square/Blue", "paints": [solid(0, 0, 1)]},
            {"name": "Blue", "paints": [solid(0, 0, 1)]},
        ]
        assert [c.name for c in collect_colors(styles)] == ["Blue"]

    def test_gradient_only_style_contributes_nothing(self):
        styles = [{"name": "Fancy", "paints": [GRADIENT]}]
        assert collect_colors(styles) == []

    def test_every_solid_layer_is_an_entry(self):
        styles = [{"name": "Layered", "paints": [solid(1, 1, 1), GRADIENT, solid(0, 0, 0)]}]
        colors = collect_colors(styles)

        assert len(colors) == 2
        assert colors[0].color == {"r": 1, "g": 1, "b": 1}
        assert colors[1].color == {"r": 0, "g": 0, "b": 0}

    def test_missing_opacity_is_none(self):
        colors = collect_colors([{"name": "X", "paints": [solid(0.2, 0.4, 0.6)]}])
        assert colors[0].alpha is None

    def test_duplicates_are_kept(self):
        styles = [
            {"name": "Red-1", "paints": [solid(1, 0, 0)]},
            {"name": "Red 1", "paints": [solid(1, 0, 0)]},
        ]
        assert [c.enum_name for c in collect_colors(styles)] == ["Red1", "Red1"]

    def test_custom_exclude(self):
        styles = [
            {"name": "Avatar user square/Blue", "paints": [solid(0, 0, 1)]},
            {"name": "Old/Red", "paints": [solid(1, 0, 0)]},
        ]
        colors = collect_colors(styles, exclude=exclude_prefixes(["Old/"]))
        assert [c.name for c in colors] == ["Avatar user square/Blue"]

    def test_named_color_is_immutable(self):
        color = collect_colors([{"name": "X", "paints": [solid(0, 0, 0)]}])[0]
        with pytest.raises(AttributeError):
            color.name = "Y"


FILE_DATA = {
    "document": {"id": "0:0", "children": []},
    "styles": {
        "1:2": {"key": "a", "name": "Primary/Red", "styleType": "FILL", "remote": False},
        "1:3": {"key": "b", "name": "Heading", "styleType": "TEXT", "remote": False},
        "1:4": {"key": "c", "name": "Library/Blue", "styleType": "FILL", "remote": True},
        "1:5": {"key": "d", "name": "Primary/Green", "styleType": "FILL", "remote": False},
    },
}


class TestRestPayload:
    """Tests for building paint styles from Figma API responses."""

    def test_paint_style_ids(self):
        assert paint_style_ids(FILE_DATA) == ["1:2", "1:5"]

    def test_paint_style_ids_without_styles(self):
        assert paint_style_ids({"document": {}}) == []

    def test_local_paint_styles(self):
        nodes_data = {
            "nodes": {
                "1:2": {"document": {"id": "1:2", "fills": [solid(1, 0, 0)]}},
                "1:5": {"document": {"id": "1:5", "fills": [solid(0, 1, 0, 0.5)]}},
            }
        }
        styles = local_paint_styles(FILE_DATA, nodes_data)

        assert styles == [
            {"name": "Primary/Red", "paints": [solid(1, 0, 0)]},
            {"name": "Primary/Green", "paints": [solid(0, 1, 0, 0.5)]},
        ]

    def test_missing_node_has_no_paints(self):
        nodes_data = {"nodes": {"1:2": None}}
        styles = local_paint_styles(FILE_DATA, nodes_data)

        assert styles == [
            {"name": "Primary/Red", "paints": []},
            {"name": "Primary/Green", "paints": []},
        ]
