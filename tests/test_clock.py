"""
Qt host shell tests, run on the offscreen platform.
"""

import datetime

import pytest

pytest.importorskip('qt')

from qt import QtCore, qt_enum
from hand_geometry import DegenerateGeometry, Rect
from hand_angles import compute_angles
from clock import ClockView


@pytest.fixture
def clock(qapp):
    view = ClockView()
    view.resize(200, 200)
    view.relayout()
    return view


class TestLayout:

    def test_initialize_runs_once(self, clock):
        scene = clock.scene()
        items = len(scene.items())
        clock.initialize()
        assert clock.scene() is scene
        assert len(scene.items()) == items == 5

    def test_hour_hand_placement(self, clock):
        hand = clock.hands['hour']
        assert clock.geometries['hour'].frame == Rect(98, 52, 4, 50)
        assert (hand.item.pos().x(), hand.item.pos().y()) == (98, 52)
        origin = hand.item.transformOriginPoint()
        assert (origin.x(), origin.y()) == pytest.approx((2, 48))

    def test_face_follows_bounds(self, clock):
        clock.resize(300, 200)
        clock.relayout()
        rect = clock.face_item.rect()
        assert (rect.x(), rect.y(), rect.width(), rect.height()) == (50, 0, 200, 200)
        center = clock.center_item.rect().center()
        assert (center.x(), center.y()) == (150, 100)

    def test_every_pivot_on_center(self, clock):
        for geometry in clock.geometries.values():
            assert tuple(geometry.pivot) == pytest.approx((100, 100))

    def test_tiny_clock_hides_degenerate_hands(self, clock):
        clock.resize(6, 6)
        clock.relayout()
        assert not clock.hands['hour'].item.isVisible()
        assert 'hour' not in clock.geometries
        clock.resize(200, 200)
        clock.relayout()
        assert clock.hands['hour'].item.isVisible()


class TestConfigure:

    def test_batch_change_applied(self, clock):
        clock.configure(minute_length=1.0, minute_thickness=6, minute_color='#00ff00')
        assert clock.geometries['minute'].frame == Rect(97, 2, 6, 100)
        assert clock.hands['minute'].item.brush().color().name() == '#00ff00'

    def test_invalid_batch_not_applied(self, clock):
        before = clock.clock_style
        with pytest.raises(DegenerateGeometry):
            clock.configure(hour_thickness=8, hour_length=0)
        assert clock.clock_style is before
        assert clock.geometries['hour'].frame.width == 4

    def test_offset_longer_than_hand(self, clock):
        with pytest.raises(DegenerateGeometry):
            clock.configure(second_offset=80)

    def test_nan_offset_not_applied(self, clock):
        before = clock.geometries['hour']
        with pytest.raises(DegenerateGeometry):
            clock.configure(hour_offset=float('nan'))
        assert clock.clock_style.hour.offset == 2.0
        assert clock.geometries['hour'] == before

    def test_unknown_option(self, clock):
        with pytest.raises(TypeError):
            clock.configure(hour_colour='#000000')


class TestTime:

    def test_set_time_rotates_hands(self, clock):
        clock.set_time(15, 30, 0)
        assert clock.hands['hour'].item.rotation() == pytest.approx(105)
        assert clock.hands['minute'].item.rotation() == pytest.approx(180)
        assert clock.hands['second'].item.rotation() == pytest.approx(0)
        assert clock.angles == compute_angles(3, 30, 0)

    def test_set_datetime(self, clock):
        clock.set_datetime(datetime.datetime(2020, 5, 17, 6, 0, 45))
        assert tuple(clock.time) == (6, 0, 45)
        assert clock.hands['hour'].item.rotation() == pytest.approx(180 + 45 / 120.0)
        assert clock.hands['second'].item.rotation() == pytest.approx(270)

    def test_angles_survive_relayout(self, clock):
        clock.set_time(3, 0, 0)
        clock.resize(120, 120)
        clock.relayout()
        assert clock.hands['hour'].item.rotation() == pytest.approx(90)

    def test_animated_change_takes_short_way(self, clock):
        clock.set_time(0, 0, 59)
        clock.set_time(0, 1, 0, animated=True)
        hand = clock.hands['second']
        assert hand.animation.state() == qt_enum(QtCore.QAbstractAnimation, 'State', 'Running')
        assert hand.animation.startValue() == pytest.approx(354)
        assert hand.animation.endValue() == pytest.approx(360)
        assert hand.animation.duration() == 300

        hand.animation.setCurrentTime(hand.animation.duration())
        assert hand.angle == pytest.approx(0)
        assert hand.item.rotation() == pytest.approx(0)

    def test_immediate_set_stops_animation(self, clock):
        clock.set_time(6, 0, 0, animated=True)
        clock.set_time(9, 0, 0)
        hand = clock.hands['hour']
        assert hand.animation.state() == qt_enum(QtCore.QAbstractAnimation, 'State', 'Stopped')
        assert hand.item.rotation() == pytest.approx(270)
