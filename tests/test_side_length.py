import pytest

from cairo_viewport import BoundingBox, Side, SideLength


class TestToWidthAndHeight:
    def test_tall_box(self):
        bb = BoundingBox(0.0, 1.0, 0.0, 2.0)  # width 1, height 2
        assert SideLength.long(500).to_width_and_height(bb) == (250, 500)
        assert SideLength.short(500).to_width_and_height(bb) == (500, 1000)
        assert SideLength.width(500).to_width_and_height(bb) == (500, 1000)
        assert SideLength.height(500).to_width_and_height(bb) == (250, 500)

    def test_wide_box(self):
        bb = BoundingBox(0.0, 2.0, 0.0, 1.0)  # width 2, height 1
        assert SideLength.long(500).to_width_and_height(bb) == (500, 250)
        assert SideLength.short(500).to_width_and_height(bb) == (1000, 500)
        assert SideLength.width(500).to_width_and_height(bb) == (500, 250)
        assert SideLength.height(500).to_width_and_height(bb) == (1000, 500)

    def test_square_box_uses_height_branch(self):
        bb = BoundingBox(0.0, 3.0, 0.0, 3.0)
        assert SideLength.long(90).to_width_and_height(bb) == (90, 90)
        assert SideLength.short(90).to_width_and_height(bb) == (90, 90)

    def test_derived_side_rounds_up(self):
        bb = BoundingBox(0.0, 1.0, 0.0, 3.0)
        # 100 / 3 = 33.33...
        assert SideLength.long(100).to_width_and_height(bb) == (34, 100)

    def test_zero_width_is_clamped_to_one(self):
        bb = BoundingBox(5.0, 5.0, 0.0, 4.0)
        assert SideLength.long(200).to_width_and_height(bb) == (1, 200)
        assert SideLength.height(200).to_width_and_height(bb) == (1, 200)

    def test_zero_height_is_clamped_to_one(self):
        bb = BoundingBox(0.0, 4.0, 2.0, 2.0)
        assert SideLength.long(200).to_width_and_height(bb) == (200, 1)
        assert SideLength.width(200).to_width_and_height(bb) == (200, 1)

    def test_infinite_derived_side_raises(self):
        flat = BoundingBox(0.0, 4.0, 2.0, 2.0)
        with pytest.raises(ValueError, match="infinite"):
            SideLength.short(200).to_width_and_height(flat)
        with pytest.raises(ValueError, match="infinite"):
            SideLength.height(200).to_width_and_height(flat)

    def test_point_box_raises(self):
        with pytest.raises(ValueError, match="neither width nor height"):
            SideLength.long(10).to_width_and_height(BoundingBox(1.0, 1.0, 1.0, 1.0))


class TestSideLength:
    def test_int_conversion(self):
        assert int(SideLength.long(7)) == 7
        assert int(SideLength.height(12)) == 12

    def test_constructors_set_side(self):
        assert SideLength.long(1).side is Side.LONG
        assert SideLength.short(1).side is Side.SHORT
        assert SideLength.width(1).side is Side.WIDTH
        assert SideLength.height(1).side is Side.HEIGHT

    @pytest.mark.parametrize("length", [0, -5])
    def test_non_positive_length_rejected(self, length):
        with pytest.raises(ValueError, match="at least 1"):
            SideLength.long(length)

    def test_float_length_rejected(self):
        with pytest.raises(ValueError, match="must be an int"):
            SideLength.width(10.5)
