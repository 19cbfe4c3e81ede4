"""Tests for foundation/plan_view.py SVG generation."""
import re
import pytest
from foundation.config import update_config
from foundation.plan_view import build_plan_data, render_plan_svg, PlanData


@pytest.fixture(scope="module")
def rendered(plan_data):
    return render_plan_svg(plan_data)


class TestBuildPlanData:
    def test_fields(self, plan_data):
        expected = {"config", "to_svg", "scale", "grid", "nodes", "specs", "svg_w", "svg_h"}
        assert expected.issubset(set(plan_data._fields))
        assert isinstance(plan_data, PlanData)

    def test_canvas_size(self, plan_data):
        assert plan_data.svg_w == pytest.approx(8000 * 0.05 + 300)
        assert plan_data.svg_h == pytest.approx(6000 * 0.05 + 100)

    def test_grid_and_nodes(self, plan_data):
        assert len(plan_data.grid) == 70
        assert len(plan_data.nodes) == 30 * 40

    def test_origin_offset(self, plan_data):
        assert plan_data.to_svg(0, 0) == (50.0, 50.0)


class TestRenderPlanSvg:
    def test_svg_envelope(self, rendered):
        assert rendered.strip().startswith("<svg")
        assert rendered.strip().endswith("</svg>")

    def test_one_line_per_bar(self, rendered):
        assert rendered.count('stroke="#d00" stroke-width="0.24"') == 70

    def test_one_dot_per_crossing(self, rendered):
        assert rendered.count('fill="#b00"') == 1200

    def test_dimension_labels(self, rendered):
        assert "8000 mm" in rendered
        assert "6000 mm" in rendered

    def test_legend(self, rendered):
        for label in ["PLAN VIEW", "Rebar Ø16mm", "Concrete"]:
            assert label in rendered

    def test_wall_line_dashed(self, rendered):
        assert 'stroke-dasharray="5,5"' in rendered

    def test_wall_line_omitted_when_walls_meet(self, config):
        cfg = update_config(update_config(config, "width", "1000"), "wall_thickness", "600")
        svg = render_plan_svg(build_plan_data(cfg))
        assert 'stroke-dasharray="5,5"' not in svg

    def test_no_title_block_without_stamp(self, rendered):
        assert "Generated" not in rendered

    def test_title_block_with_stamp(self, plan_data, stamp):
        svg = render_plan_svg(plan_data, stamp)
        assert "57.60 m³" in svg
        assert "473.0 m (per layer)" in svg
        assert f"from {stamp[1]}" in svg

    def test_stamp_grows_canvas_for_small_plans(self, config, stamp):
        cfg = update_config(update_config(config, "length", "1000"), "width", "1000")
        data = build_plan_data(cfg)
        svg = render_plan_svg(data, stamp)
        height = float(re.search(r'height="([\d.]+)"', svg).group(1))
        assert height > data.svg_h
