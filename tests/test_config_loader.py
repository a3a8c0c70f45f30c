import pytest

from cairo_viewport import BoundingBox, SideLength, Viewport
from cairo_viewport.config.loader import (
    build_viewport,
    load_viewport_preset,
    load_viewport_presets,
)

PRESETS = """
viewports:
  thumbnail:
    bounds: [6.0, 8.0, 12.0, 20.0]
    side_length: {long: 500}
  poster:
    bounds: [0, 1, 0, 2]
    side_length: {Width: 500}
  fixed:
    origin: [1.5, -2]
    scale: 4
    width: 30
    height: 40
"""


@pytest.fixture
def preset_file(tmp_path):
    path = tmp_path / "viewports.yaml"
    path.write_text(PRESETS)
    return path


def test_load_all_presets(preset_file):
    presets = load_viewport_presets(preset_file)

    assert sorted(presets) == ["fixed", "poster", "thumbnail"]
    assert presets["thumbnail"] == Viewport(origin=(-6.0, -12.0), scale=62.5, width=125, height=500)
    assert (presets["poster"].width, presets["poster"].height) == (500, 1000)
    assert presets["fixed"] == Viewport(origin=(1.5, -2.0), scale=4.0, width=30, height=40)


def test_load_single_preset(preset_file):
    assert load_viewport_preset(preset_file, "fixed").scale == 4.0


def test_unknown_preset_lists_available(preset_file):
    with pytest.raises(KeyError, match="Available"):
        load_viewport_preset(preset_file, "banner")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_viewport_presets(tmp_path / "absent.yaml")


def test_file_without_viewports_key(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("other: 1\n")
    with pytest.raises(ValueError, match="no 'viewports' mapping"):
        load_viewport_presets(path)


def test_invalid_preset_is_named(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("viewports:\n  broken:\n    bounds: [0, 1, 0, 1]\n    side_length: {diagonal: 5}\n")
    with pytest.raises(ValueError, match="'broken'.*Unknown side"):
        load_viewport_presets(path)


class TestBuildViewport:
    def test_from_bounds(self):
        vp = build_viewport({"bounds": [0, 1, 0, 1], "side_length": {"short": 10}})
        assert (vp.width, vp.height) == (10, 10)
        assert vp.scale == 10.0

    def test_bad_bounds(self):
        with pytest.raises(ValueError, match="xmin, xmax, ymin, ymax"):
            build_viewport({"bounds": [0, 1], "side_length": {"long": 10}})

    def test_side_length_needs_single_entry(self):
        with pytest.raises(ValueError, match="single-entry"):
            build_viewport({"bounds": [0, 1, 0, 1], "side_length": {"long": 10, "short": 5}})

    def test_zero_side_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            build_viewport({"bounds": [0, 1, 0, 1], "side_length": {"long": 0}})

    def test_missing_explicit_fields(self):
        with pytest.raises(ValueError, match="missing"):
            build_viewport({"origin": [0, 0], "scale": 1})

    def test_not_a_mapping(self):
        with pytest.raises(TypeError):
            build_viewport(["bounds"])

    def test_matches_direct_derivation(self):
        expected = Viewport.from_bounding_box(BoundingBox(-1.5, 6.5, -3.5, 3.5), SideLength.long(500))
        assert build_viewport({"bounds": [-1.5, 6.5, -3.5, 3.5], "side_length": {"long": 500}}) == expected
