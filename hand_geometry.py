import math
from collections import namedtuple
from dataclasses import dataclass

import numpy as np


Point = namedtuple('Point', ['x', 'y'])
Rect = namedtuple('Rect', ['x', 'y', 'width', 'height'])


class DegenerateGeometry(ValueError):
    """Raised when a hand style cannot produce a finite pivot point."""


@dataclass(frozen=True)
class HandStyle:
    """Shape of one clock hand.

    Attributes:
        length_ratio: Hand length as a fraction of the face radius, in (0, 1]
        thickness: Width of the hand in pixels
        offset: Distance the hand extends past the pivot, toward the tail
    """
    length_ratio: float = 0.5
    thickness: float = 4.0
    offset: float = 2.0


class HandGeometry(namedtuple('HandGeometry', ['anchor', 'frame'])):
    """Placement of a hand inside the clock's coordinate space.

    Attributes:
        anchor: Point, rotation pivot normalized to the hand's own rectangle
        frame: Rect, position and size of the unrotated hand in parent coordinates
    """

    @property
    def pivot(self):
        """Pivot point in parent coordinates."""
        return Point(self.frame.x + self.anchor.x * self.frame.width,
                     self.frame.y + self.anchor.y * self.frame.height)

    @property
    def local_pivot(self):
        """Pivot point relative to the hand's top-left corner."""
        return Point(self.anchor.x * self.frame.width, self.anchor.y * self.frame.height)

    def corners(self, angle):
        """Return the four corners of the hand rotated about its pivot.

        Args:
            angle: Rotation in radians, clockwise on screen (y axis points down)

        Returns:
            (4, 2) array of x, y corners: top-left, top-right, bottom-right, bottom-left
        """
        x, y, w, h = self.frame
        pts = np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=float)
        pivot = np.array(self.pivot, dtype=float)
        c, s = math.cos(angle), math.sin(angle)
        # y grows downward, so this matrix turns clockwise on screen
        rot = np.array([[c, -s], [s, c]])
        return (pts - pivot) @ rot.T + pivot

    def __repr__(self):
        return f"HandGeometry(anchor={tuple(self.anchor)}, frame={tuple(self.frame)})"


def face_diameter(width, height):
    """The face is the largest circle that fits the bounds."""
    return min(width, height)


def bounds_center(width, height):
    return Point(width / 2.0, height / 2.0)


def compute_face_frame(width, height):
    """Square holding the face disc, centered in the widget bounds."""
    d = face_diameter(width, height)
    center = bounds_center(width, height)
    return Rect(center.x - d / 2.0, center.y - d / 2.0, d, d)


def compute_center_frame(radius, center):
    """Square holding the center disc drawn over the hands' pivot."""
    return Rect(center.x - radius, center.y - radius, radius * 2, radius * 2)


def compute_hand_geometry(face_diameter, thickness, length_ratio, offset, center):
    """Compute the rectangle and pivot of a hand pointing at 12 o'clock.

    The hand is a vertical rectangle whose pivot sits `offset` pixels above its
    bottom edge, so that after placement the pivot lands exactly on `center`
    and the tail overlaps the middle of the face by `offset`.

    Args:
        face_diameter: Diameter of the clock face
        thickness: Width of the hand
        length_ratio: Hand length as a fraction of the face radius
        offset: Overlap of the hand past the pivot
        center: Point, center of the face in parent coordinates

    Returns:
        HandGeometry

    Raises:
        DegenerateGeometry: if any input is NaN or infinite, or the hand has no
            length, no thickness, a negative offset, or an offset that reaches
            the tip of the hand
    """
    values = (face_diameter, thickness, length_ratio, offset, center[0], center[1])
    if not all(math.isfinite(v) for v in values):
        raise DegenerateGeometry(
            f"hand geometry needs finite values (diameter={face_diameter}, thickness={thickness}, "
            f"length_ratio={length_ratio}, offset={offset}, center={tuple(center)})")

    hand_length = (face_diameter / 2.0) * length_ratio
    if not hand_length > 0:
        raise DegenerateGeometry(
            f"hand length must be positive (diameter={face_diameter}, length_ratio={length_ratio})")
    if not thickness > 0:
        raise DegenerateGeometry(f"hand thickness must be positive, got {thickness}")
    if offset < 0:
        raise DegenerateGeometry(f"hand offset must not be negative, got {offset}")
    if offset >= hand_length:
        raise DegenerateGeometry(
            f"hand offset {offset} must be shorter than the hand length {hand_length}")

    anchor = Point(0.5, 1.0 - (offset / hand_length))
    frame = Rect(center[0] - thickness / 2.0, center[1] - hand_length + offset, thickness, hand_length)
    return HandGeometry(anchor, frame)


def hand_geometry_for_style(style, face_diameter, center):
    """Same as compute_hand_geometry, taking a HandStyle."""
    return compute_hand_geometry(face_diameter, style.thickness, style.length_ratio, style.offset, center)
