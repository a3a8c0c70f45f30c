from __future__ import annotations

import pytest

from cairo_viewport import BoundingBox, SideLength, Viewport

BLACK = (0.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


def draw_cross(cr, color=BLACK, line_width=0.4):
    """White background with a cross through the origin of a [-1, 1] box."""
    cr.set_source_rgb(1.0, 1.0, 1.0)
    cr.paint()

    cr.set_source_rgba(*color)
    cr.set_line_width(line_width)
    cr.move_to(-1.0, 0.0)
    cr.line_to(1.0, 0.0)
    cr.stroke()

    cr.move_to(0.0, -1.0)
    cr.line_to(0.0, 1.0)
    cr.stroke()


@pytest.fixture
def cross_viewport() -> Viewport:
    return Viewport.from_bounding_box(BoundingBox(-1.0, 1.0, -1.0, 1.0), SideLength.long(100))
