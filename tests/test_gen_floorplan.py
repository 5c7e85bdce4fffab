"""Tests for floorplan/gen_floorplan.py and the assembled diagram."""
import json
import logging

import pytest
from conftest import SVG_NS, parse_svg, find_groups, children, store_record
from floorplan.analysis import AnalysisError, parse_analysis_response
from floorplan.assembler import FEATURE_GROUPS, dim_line_h, dim_line_v, render_walls
from floorplan.gen_floorplan import (
    build_floorplan_data, generate_diagram, normalize_analysis, main,
)


# ============================================================
# Assembler helpers
# ============================================================

class TestDimLines:
    def test_horizontal_has_ticks_and_label(self):
        out = []
        dim_line_h(out, 40, 280, 334, "12' 0\"")
        # main line + 2 tick marks + text = 4 elements
        assert len(out) == 4
        assert ">12' 0\"</text>" in out[3]

    def test_vertical_label_is_rotated(self):
        out = []
        dim_line_v(out, 294, 40, 320, "14' 0\"")
        assert len(out) == 4
        assert "rotate(90, 307, 180)" in out[3]


class TestWalls:
    def test_four_exterior_segments(self):
        frag = render_walls(240, 280)
        for name in ("north", "east", "south", "west"):
            assert f'class="wall wall-{name}"' in frag
        assert frag.count('data-wall-type="exterior"') == 4


# ============================================================
# Full document
# ============================================================

class TestDocument:
    def test_svg_envelope(self, sample_svg):
        assert sample_svg.startswith("<svg")
        assert sample_svg.endswith("</svg>")

    def test_root_metadata(self, sample_root):
        assert sample_root.get("data-room-id") == "room_a"
        assert sample_root.get("data-room-label") == "Bedroom#1"
        assert sample_root.get("data-scale") == "20"
        assert sample_root.get("viewBox") == "0 0 320 360"

    def test_group_order(self, sample_root):
        room = find_groups(sample_root, "room")[0]
        classes = [g.get("class") for g in children(room, "g")]
        assert classes == ["walls", "doors", "windows", "closets", "dimensions"]

    def test_feature_counts(self, sample_root):
        assert len(find_groups(sample_root, "door")) == 1
        assert len(find_groups(sample_root, "window")) == 2
        assert len(find_groups(sample_root, "closet")) == 1

    def test_centered_label(self, sample_root):
        label = [t for t in sample_root.iter(f"{SVG_NS}text") if t.get("class") == "room-label"][0]
        assert label.text == "Bedroom#1"
        assert (label.get("x"), label.get("y")) == ("160", "180")

    def test_dimension_labels(self, sample_root):
        texts = {t.get("class"): t for t in sample_root.iter(f"{SVG_NS}text")}
        assert texts["dim-width"].text == "12' 0\""
        assert texts["dim-height"].text == "14' 0\""
        assert texts["dim-height"].get("transform").startswith("rotate(90")
        # width below the south wall, height right of the east wall
        assert float(texts["dim-width"].get("y")) > 320
        assert float(texts["dim-height"].get("x")) > 280

    def test_label_is_escaped(self, sample_analysis):
        root = parse_svg(generate_diagram(sample_analysis, 'Kids "R" <Us>', "r&1"))
        assert root.get("data-room-label") == 'Kids "R" <Us>'
        assert root.get("data-room-id") == "r&1"

    def test_empty_groups_still_present(self):
        root = parse_svg(generate_diagram(store_record(), "Hall#1", "h1"))
        for name in FEATURE_GROUPS:
            g = find_groups(root, name)
            assert len(g) == 1 and len(g[0]) == 0


# ============================================================
# Scenarios
# ============================================================

class TestScenarios:
    def test_south_door_hinge(self, sample_root):
        """12x14 room, south door at 8', 2.67' wide, swinging right."""
        door = find_groups(sample_root, "door")[0]
        assert door.get("data-wall") == "south"
        gap = children(door, "line")[0]
        assert gap.get("class") == "wall-gap"
        assert (gap.get("x1"), gap.get("x2"), gap.get("y1")) == ("66.6", "120", "320")
        # mirrored wall: "right" hinges on the span's west end
        assert door.get("data-hinge") == "66.6,320"
        d = children(door, "path")[0].get("d").split()
        assert d == ["M", "120", "320", "A", "53.4", "53.4", "0", "0", "1", "66.6", "266.6"]

    def test_east_sliding_closet(self, sample_root):
        closet = find_groups(sample_root, "closet")[0]
        assert closet.get("data-wall") == "east"
        rect = children(closet, "rect")[0]
        assert rect.get("stroke-dasharray") == "4,2"
        # 6' x 2' at 20 px/ft, flush to the east wall at x = 280
        assert (rect.get("width"), rect.get("height")) == ("40", "120")
        assert float(rect.get("x")) + float(rect.get("width")) == 280
        assert rect.get("y") == "100"
        glyph = find_groups(closet, "sliding-door")[0]
        panels = [l for l in children(glyph, "line") if l.get("class") != "wall-gap"]
        assert len(panels) == 2
        assert list(closet.iter(f"{SVG_NS}path")) == []

    def test_unknown_feature_is_skipped(self, caplog):
        record = store_record(
            north=[{"type": "skylight", "position": 2, "width": 3}],
            east=[{"type": "window", "position": 2, "width": 3}],
        )
        caplog.set_level(logging.INFO, logger="floorplan.gen_floorplan")
        data = build_floorplan_data(record)
        assert data.skipped == [("north", "skylight")]
        assert "skylight" in caplog.text

        root = parse_svg(generate_diagram(record, "Bedroom#1", "r1"))
        assert [g.get("data-wall") for g in root.iter(f"{SVG_NS}g") if g.get("data-wall")] == ["east"]


# ============================================================
# Pipeline properties
# ============================================================

class TestPipeline:
    def test_deterministic(self, sample_analysis):
        a = generate_diagram(sample_analysis, "Bedroom#1", "room_a")
        b = generate_diagram(sample_analysis, "Bedroom#1", "room_a")
        assert a == b

    def test_regeneration_differs_only_in_identity(self, sample_analysis):
        first = generate_diagram(sample_analysis, "Bedroom#1", "room_a")
        again = generate_diagram(sample_analysis, "Bedroom#2", "room_b")
        assert again.replace("Bedroom#2", "Bedroom#1").replace("room_b", "room_a") == first

    def test_store_schema_matches_model_response(self, raw_response):
        model = parse_analysis_response(raw_response)
        store = store_record(
            north=[{"type": "window", "position": 4, "width": 4}],
            east=[{"type": "closet", "position": 3, "width": 6, "depth": 2, "doorType": "sliding"}],
            south=[{"type": "door", "position": 8, "width": 2.67, "swingDirection": "right"}],
            west=[{"type": "window", "position": 4, "width": 3.5}],
        )
        assert generate_diagram(store, "B", "r") == generate_diagram(model, "B", "r")

    def test_input_is_not_mutated(self):
        record = store_record(south=[{"type": "door", "position": 1, "width": 3}])
        before = json.dumps(record, sort_keys=True)
        generate_diagram(record, "B", "r")
        assert json.dumps(record, sort_keys=True) == before

    def test_invalid_input_raises_without_output(self):
        record = store_record(south=[{"type": "door", "position": 10, "width": 3}])
        with pytest.raises(AnalysisError, match="exceeds wall length"):
            generate_diagram(record, "B", "r")

    def test_rejects_non_analysis(self):
        with pytest.raises(AnalysisError, match="expected a room analysis"):
            normalize_analysis([1, 2, 3])

    def test_floorplan_data(self, sample_analysis):
        data = build_floorplan_data(sample_analysis)
        assert (data.room_width_px, data.room_height_px) == (240, 280)
        assert {k: len(v) for k, v in data.groups.items()} == {"doors": 1, "windows": 2, "closets": 1}
        assert data.skipped == []


# ============================================================
# Command line
# ============================================================

class TestMain:
    def test_sample_without_input(self, tmp_path, capsys):
        out = tmp_path / "sample.svg"
        assert main(["-o", str(out)]) == 0
        assert out.read_text().startswith("<svg")
        assert "1 doors, 2 windows, 1 closets, 0 skipped" in capsys.readouterr().out

    def test_model_response_file(self, tmp_path, raw_response):
        src = tmp_path / "analysis.json"
        src.write_text(json.dumps(raw_response))
        out = tmp_path / "room.svg"
        assert main([str(src), "-o", str(out), "--label", "Den#1", "--room-id", "den"]) == 0
        root = parse_svg(out.read_text())
        assert root.get("data-room-id") == "den"

    def test_store_schema_file(self, tmp_path):
        src = tmp_path / "analysis.json"
        src.write_text(json.dumps(store_record()))
        out = tmp_path / "room.svg"
        assert main([str(src), "--camel", "-o", str(out)]) == 0
        assert out.exists()

    def test_invalid_analysis_exits_nonzero(self, tmp_path):
        src = tmp_path / "bad.json"
        src.write_text("{oops")
        out = tmp_path / "room.svg"
        assert main([str(src), "-o", str(out)]) == 1
        assert not out.exists()

    def test_non_utf8_file_exits_nonzero(self, tmp_path):
        src = tmp_path / "bad.json"
        src.write_bytes(b'{"notes": "\xff"}')
        out = tmp_path / "room.svg"
        assert main([str(src), "-o", str(out)]) == 1
        assert not out.exists()

    def test_unwritable_output_exits_nonzero(self, tmp_path, caplog):
        out = tmp_path / "missing" / "room.svg"
        assert main(["-o", str(out)]) == 1
        assert "cannot generate diagram" in caplog.text
