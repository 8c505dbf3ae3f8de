import logging

from qt import QtWidgets, QtCore, QtGui, qt_enum
from hand_geometry import (
    DegenerateGeometry, face_diameter, bounds_center, compute_face_frame,
    compute_center_frame, hand_geometry_for_style,
)
from hand_angles import ClockTime, angles_for_time, shortest_turn
from clock_style import ClockStyle, HAND_NAMES, validate_style

log = logging.getLogger(__name__)

DEFAULT_ANIMATION_DURATION = 0.3  # seconds


class Hand:
    """One clock hand: a rectangle item rotated about its pivot."""

    def __init__(self, rect_item):
        """
        Args:
            rect_item: QGraphicsRectItem drawn for this hand
        """
        self.item = rect_item
        self.angle = 0.0  # degrees, 0 = 12 o'clock, clockwise
        self.geometry = None

        self.animation = QtCore.QVariantAnimation()
        self.animation.setEasingCurve(QtCore.QEasingCurve(qt_enum(QtCore.QEasingCurve, 'Type', 'OutCubic')))
        self.animation.valueChanged.connect(self._animation_step)
        self.animation.finished.connect(self._animation_finished)

    def apply_geometry(self, geometry):
        """Resize and place the item; rotation is kept."""
        x, y, w, h = geometry.frame
        self.geometry = geometry
        self.item.setRect(QtCore.QRectF(0, 0, w, h))
        self.item.setPos(x, y)
        pivot = geometry.local_pivot
        self.item.setTransformOriginPoint(pivot.x, pivot.y)
        self.item.setVisible(True)
        self._update_rotation()

    def set_angle(self, angle):
        """Set the angle immediately without animation.

        Args:
            angle: Angle in degrees (0 = 12 o'clock, clockwise)
        """
        self.animation.stop()
        self.angle = angle % 360.0
        self._update_rotation()

    def set_target(self, angle, duration=DEFAULT_ANIMATION_DURATION):
        """Animate to an angle, turning whichever way is shorter.

        Args:
            angle: Target angle in degrees
            duration: Transition time in seconds
        """
        self.animation.stop()
        self.animation.setStartValue(float(self.angle))
        self.animation.setEndValue(float(shortest_turn(self.angle, angle)))
        self.animation.setDuration(int(duration * 1000))
        self.animation.start()

    def _animation_step(self, value):
        self.angle = float(value)
        self._update_rotation()

    def _animation_finished(self):
        self.angle = float(self.animation.endValue()) % 360.0
        self._update_rotation()

    def _update_rotation(self):
        self.item.setRotation(self.angle)


class ClockView(QtWidgets.QGraphicsView):
    """Analog clock widget.

    Style changes are batched through configure(); each batch is validated
    before anything is applied, then the face is laid out once.
    """

    def __init__(self, parent=None, clock_style=None, animation_duration=DEFAULT_ANIMATION_DURATION):
        super().__init__(parent)
        self.clock_style = clock_style or ClockStyle()
        validate_style(self.clock_style)
        self.animation_duration = animation_duration
        self.time = ClockTime(0, 0, 0)
        self.geometries = {}

        self.face_item = None
        self.initialize()
        self.relayout()

    def initialize(self):
        """Create the scene items. Safe to call more than once."""
        if self.face_item is not None:
            return

        scene = QtWidgets.QGraphicsScene(self)
        self.setScene(scene)
        self.setRenderHint(qt_enum(QtGui.QPainter, 'RenderHint', 'Antialiasing'))
        self.setFrameShape(qt_enum(QtWidgets.QFrame, 'Shape', 'NoFrame'))
        self.setStyleSheet('background: transparent')
        scroll_off = qt_enum(QtCore.Qt, 'ScrollBarPolicy', 'ScrollBarAlwaysOff')
        self.setHorizontalScrollBarPolicy(scroll_off)
        self.setVerticalScrollBarPolicy(scroll_off)

        # Stacking order follows insertion: face, hands, then center disc on top
        self.face_item = scene.addEllipse(QtCore.QRectF())
        self.hands = {}
        for name in HAND_NAMES:
            self.hands[name] = Hand(scene.addRect(QtCore.QRectF()))
        self.center_item = scene.addEllipse(QtCore.QRectF())
        log.debug("Clock scene initialized")

    @property
    def angles(self):
        """Hand positions for the current time, as fractions of a turn."""
        return angles_for_time(self.time)

    def configure(self, **changes):
        """Apply a batch of style changes, e.g. ``configure(hour_length=0.6, hour_color='#333')``.

        Raises:
            DegenerateGeometry: if the resulting style is invalid; nothing is applied
            TypeError: for an unknown option
        """
        new_style = self.clock_style.updated(**changes)
        diameter = face_diameter(self.width(), self.height())
        validate_style(new_style, diameter if diameter > 0 else None)
        self.clock_style = new_style
        self.relayout()

    def relayout(self):
        """Recompute face, hands and center disc from the current bounds."""
        width, height = self.width(), self.height()
        diameter = face_diameter(width, height)
        if diameter <= 0:
            log.debug("Skipping layout of empty clock (%dx%d)", width, height)
            return

        style = self.clock_style
        self.setSceneRect(0, 0, width, height)
        center = bounds_center(width, height)

        self.face_item.setRect(QtCore.QRectF(*compute_face_frame(width, height)))
        self.face_item.setBrush(QtGui.QBrush(QtGui.QColor(style.face_color)))
        self.face_item.setPen(self._pen(style.face_border_color, style.face_border_width))

        no_pen = QtGui.QPen(qt_enum(QtCore.Qt, 'PenStyle', 'NoPen'))
        self.geometries = {}
        for name, hand in self.hands.items():
            try:
                geometry = hand_geometry_for_style(style.hand_style(name), diameter, center)
            except DegenerateGeometry as exc:
                log.warning("Hiding %s hand, clock is too small (%dx%d): %s", name, width, height, exc)
                hand.item.setVisible(False)
                continue
            self.geometries[name] = geometry
            hand.apply_geometry(geometry)
            hand.item.setBrush(QtGui.QBrush(QtGui.QColor(style.hand_color(name))))
            hand.item.setPen(no_pen)

        self.center_item.setRect(QtCore.QRectF(*compute_center_frame(style.center_radius, center)))
        self.center_item.setBrush(QtGui.QBrush(QtGui.QColor(style.center_color)))
        self.center_item.setPen(self._pen(style.center_border_color, style.center_border_width))

        log.debug("Clock laid out at %dx%d", width, height)
        self._apply_angles(animated=False)

    def set_time(self, hours, minutes, seconds, animated=False):
        """Set the time the clock displays.

        Args:
            hours: Hour (24-hour values are folded onto the dial)
            minutes: Minute
            seconds: Second
            animated: Whether to move the hands with a short transition
        """
        self.time = ClockTime(hours, minutes, seconds)
        self._apply_angles(animated)

    def set_datetime(self, dt, animated=False):
        """Set the time from a datetime; only hour, minute and second are used."""
        self.time = ClockTime.from_datetime(dt)
        self._apply_angles(animated)

    def _apply_angles(self, animated):
        degrees = self.angles.degrees()
        for name in HAND_NAMES:
            angle = getattr(degrees, name)
            if animated:
                self.hands[name].set_target(angle, self.animation_duration)
            else:
                self.hands[name].set_angle(angle)

    def _pen(self, color, width):
        if width <= 0:
            return QtGui.QPen(qt_enum(QtCore.Qt, 'PenStyle', 'NoPen'))
        pen = QtGui.QPen(QtGui.QColor(color))
        pen.setWidthF(width)
        return pen

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.relayout()


if __name__ == '__main__':
    from qt import mkapp, run_app

    logging.basicConfig(level=logging.DEBUG)
    app = mkapp()
    clock = ClockView()
    clock.setWindowTitle("Clock")
    clock.resize(300, 300)
    clock.set_time(10, 8, 42)
    clock.show()

    QtCore.QTimer.singleShot(1000, lambda: clock.set_time(3, 0, 0, animated=True))
    QtCore.QTimer.singleShot(2000, lambda: clock.configure(minute_length=0.9, second_color='#0080ff'))

    run_app()
