"""
Off-screen rendering tests: sample pixels where each part of the clock must be.
"""

import pytest

from hand_geometry import DegenerateGeometry
from hand_angles import ClockTime
from clock_style import ClockStyle
from clock_pil import render_clock

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture
def thick_style():
    return ClockStyle().updated(minute_thickness=6, second_thickness=6)


class TestRenderClock:

    def test_image_size_and_mode(self):
        image = render_clock((200, 120), (10, 10, 10))
        assert image.size == (200, 120)
        assert image.mode == 'RGBA'

    def test_parts_in_place(self, thick_style):
        image = render_clock((200, 200), ClockTime(0, 0, 15), thick_style)
        assert image.getpixel((100, 100)) == RED     # center disc
        assert image.getpixel((170, 100)) == RED     # second hand at 3 o'clock
        assert image.getpixel((100, 40)) == BLACK    # minute hand at 12 o'clock
        assert image.getpixel((100, 150)) == WHITE   # empty face
        assert image.getpixel((30, 100)) == WHITE
        assert image.getpixel((2, 2))[3] == 0        # outside the face

    def test_hour_hand_follows_time(self, thick_style):
        image = render_clock((200, 200), (3, 0, 0), thick_style)
        assert image.getpixel((140, 100)) == BLACK
        image = render_clock((200, 200), (9, 0, 0), thick_style)
        assert image.getpixel((60, 100)) == BLACK
        assert image.getpixel((140, 100)) == WHITE

    def test_face_centered_in_wide_image(self):
        image = render_clock((300, 200), (0, 0, 0))
        assert image.getpixel((10, 100))[3] == 0
        assert image.getpixel((150, 100)) == RED

    def test_twenty_four_hour_times_render_identically(self):
        assert render_clock((80, 80), (15, 20, 5)).tobytes() == render_clock((80, 80), (3, 20, 5)).tobytes()

    def test_supersampled_size(self):
        assert render_clock((90, 90), (1, 2, 3), supersample=3).size == (90, 90)

    def test_hand_too_short_for_face(self):
        style = ClockStyle().updated(hour_offset=20)
        with pytest.raises(DegenerateGeometry):
            render_clock((40, 40), (1, 2, 3), style)

    def test_empty_image(self):
        image = render_clock((0, 50), (1, 2, 3))
        assert image.size == (0, 50)

    def test_supersample_below_one(self):
        with pytest.raises(ValueError):
            render_clock((50, 50), (1, 2, 3), supersample=0)
