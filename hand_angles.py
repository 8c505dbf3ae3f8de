import math
import datetime
from collections import namedtuple


SECONDS_PER_HALF_DAY = 12 * 3600
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


class ClockTime(namedtuple('ClockTime', ['hours', 'minutes', 'seconds'])):
    """Time shown by the clock. Fields may be out of range; they are normalized when converted."""

    @classmethod
    def from_datetime(cls, dt):
        """Take the hour, minute and second of a datetime or time."""
        return cls(dt.hour, dt.minute, dt.second)

    @classmethod
    def now(cls):
        return cls.from_datetime(datetime.datetime.now())


class AngleSet(namedtuple('AngleSet', ['hour', 'minute', 'second'])):
    """Position of each hand as a fraction of a full turn, in [0, 1)."""

    def degrees(self):
        return AngleSet(self.hour * 360.0, self.minute * 360.0, self.second * 360.0)

    def radians(self):
        return AngleSet(self.hour * 2 * math.pi, self.minute * 2 * math.pi, self.second * 2 * math.pi)


def compute_angles(hours, minutes, seconds):
    """Convert a time of day to hand positions.

    The hour hand creeps with minutes and seconds, and the minute hand creeps
    with seconds, so hands never snap between whole-unit positions.

    Args:
        hours: Hour of day (any integer; 24-hour values fold onto 12)
        minutes: Minute (any integer, taken modulo 60)
        seconds: Second (any integer, taken modulo 60)

    Returns:
        AngleSet of fractions of a full turn, 0 = 12 o'clock, clockwise
    """
    h = (hours % 12) * SECONDS_PER_HOUR
    m = (minutes % 60) * SECONDS_PER_MINUTE
    s = seconds % 60

    return AngleSet(
        (h + m + s) / float(SECONDS_PER_HALF_DAY),
        (m + s) / float(SECONDS_PER_HOUR),
        s / float(SECONDS_PER_MINUTE),
    )


def angles_for_time(clock_time):
    return compute_angles(*clock_time)


def shortest_turn(current, target):
    """Return the angle equivalent to `target` (mod 360) closest to `current`.

    Both angles are in degrees; the result is unwrapped so that animating from
    `current` to it takes the short way around the dial.
    """
    delta = (target - current + 180.0) % 360.0 - 180.0
    return current + delta
