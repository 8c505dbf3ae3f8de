import logging
import math
from dataclasses import dataclass, field, fields, replace

from hand_geometry import HandStyle, DegenerateGeometry, compute_hand_geometry, Point

log = logging.getLogger(__name__)

HAND_NAMES = ('hour', 'minute', 'second')

# Per-hand keyword suffix -> HandStyle attribute
_HAND_FIELDS = {
    'length': 'length_ratio',
    'thickness': 'thickness',
    'offset': 'offset',
}


@dataclass(frozen=True)
class ClockStyle:
    """Everything about how the clock looks, apart from the time it shows.

    Colors are CSS-style strings understood by both Qt and Pillow.
    """
    face_color: str = '#ffffff'
    face_border_color: str = '#000000'
    face_border_width: float = 2.0

    center_color: str = '#ff0000'
    center_radius: float = 3.0
    center_border_color: str = '#ff0000'
    center_border_width: float = 1.0

    hour_color: str = '#000000'
    minute_color: str = '#000000'
    second_color: str = '#ff0000'

    hour: HandStyle = field(default_factory=lambda: HandStyle(0.5, 4.0, 2.0))
    minute: HandStyle = field(default_factory=lambda: HandStyle(0.7, 2.0, 2.0))
    second: HandStyle = field(default_factory=lambda: HandStyle(0.8, 1.0, 2.0))

    def hand_style(self, name):
        if name not in HAND_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def hand_color(self, name):
        if name not in HAND_NAMES:
            raise KeyError(name)
        return getattr(self, name + '_color')

    def updated(self, **changes):
        """Return a copy with a batch of changes applied.

        Besides the plain fields, each hand accepts `<hand>_length`,
        `<hand>_thickness` and `<hand>_offset`, e.g. ``minute_length=0.9``.

        Raises:
            TypeError: for an unknown keyword
        """
        plain = {f.name for f in fields(self)}
        top = {}
        hands = {}
        for key, value in changes.items():
            if key in plain:
                top[key] = value
                continue
            hand, _, attr = key.partition('_')
            if hand in HAND_NAMES and attr in _HAND_FIELDS:
                hands.setdefault(hand, {})[_HAND_FIELDS[attr]] = value
            else:
                raise TypeError(f"unknown clock style option {key!r}")

        for hand, attrs in hands.items():
            base = top.get(hand, getattr(self, hand))
            top[hand] = replace(base, **attrs)
        return replace(self, **top)


def validate_style(style, face_diameter=None):
    """Check a style before it is applied.

    Args:
        style: ClockStyle
        face_diameter: Current face diameter, or None if the clock has not been
            laid out yet. When given, each hand must also fit inside the face.

    Raises:
        DegenerateGeometry: naming the first offending value
    """
    for name in HAND_NAMES:
        hand = style.hand_style(name)
        for attr in ('length_ratio', 'thickness', 'offset'):
            if not math.isfinite(getattr(hand, attr)):
                raise DegenerateGeometry(f"{name} hand {attr} must be finite, got {getattr(hand, attr)}")
        if not 0 < hand.length_ratio <= 1:
            raise DegenerateGeometry(f"{name} hand length ratio must be in (0, 1], got {hand.length_ratio}")
        if not hand.thickness > 0:
            raise DegenerateGeometry(f"{name} hand thickness must be positive, got {hand.thickness}")
        if hand.offset < 0:
            raise DegenerateGeometry(f"{name} hand offset must not be negative, got {hand.offset}")
        if face_diameter:
            try:
                compute_hand_geometry(face_diameter, hand.thickness, hand.length_ratio, hand.offset,
                                      Point(0.0, 0.0))
            except DegenerateGeometry as exc:
                raise DegenerateGeometry(f"{name} hand: {exc}") from exc

    for attr in ('center_radius', 'center_border_width', 'face_border_width'):
        if not math.isfinite(getattr(style, attr)) or getattr(style, attr) < 0:
            raise DegenerateGeometry(f"{attr} must be finite and not negative, got {getattr(style, attr)}")

    log.debug("Style validated for diameter %s", face_diameter)
    return style
