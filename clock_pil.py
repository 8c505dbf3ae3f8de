import logging
from dataclasses import replace

from PIL import Image, ImageDraw

from hand_geometry import (
    face_diameter, bounds_center, compute_face_frame, compute_center_frame, hand_geometry_for_style,
)
from hand_angles import angles_for_time, ClockTime
from clock_style import ClockStyle, HAND_NAMES, validate_style

log = logging.getLogger(__name__)


def _box(rect):
    """Rect -> PIL bounding box [x0, y0, x1, y1]."""
    x, y, w, h = rect
    return [x, y, x + w, y + h]


def _scaled_style(style, factor):
    """Scale every pixel length in a style; ratios and colors are kept."""
    if factor == 1:
        return style
    changes = {
        'face_border_width': style.face_border_width * factor,
        'center_radius': style.center_radius * factor,
        'center_border_width': style.center_border_width * factor,
    }
    for name in HAND_NAMES:
        hand = style.hand_style(name)
        changes[name] = replace(hand, thickness=hand.thickness * factor, offset=hand.offset * factor)
    return replace(style, **changes)


def render_clock(size, clock_time, style=None, supersample=1):
    """Draw the clock into a new RGBA image.

    Args:
        size: (width, height) of the image
        clock_time: ClockTime or (hours, minutes, seconds)
        style: ClockStyle (default look if omitted)
        supersample: Draw at this multiple of the size and downscale, for smoother edges

    Returns:
        PIL.Image.Image, transparent outside the face

    Raises:
        DegenerateGeometry: if a hand does not fit the face at this size
        ValueError: if supersample is below 1
    """
    style = style or ClockStyle()
    width, height = size
    validate_style(style, face_diameter(width, height) or None)

    k = int(supersample)
    if k < 1:
        raise ValueError(f"supersample must be at least 1, got {supersample}")
    w, h = width * k, height * k
    style = _scaled_style(style, k)
    image = Image.new('RGBA', (w, h), (0, 0, 0, 0))
    diameter = face_diameter(w, h)
    if diameter <= 0:
        return image

    draw = ImageDraw.Draw(image)
    center = bounds_center(w, h)

    draw.ellipse(_box(compute_face_frame(w, h)), fill=style.face_color,
                 outline=style.face_border_color, width=int(round(style.face_border_width)))

    radians = angles_for_time(ClockTime(*clock_time)).radians()
    for name in HAND_NAMES:
        geometry = hand_geometry_for_style(style.hand_style(name), diameter, center)
        corners = geometry.corners(getattr(radians, name))
        draw.polygon([tuple(p) for p in corners.tolist()], fill=style.hand_color(name))

    draw.ellipse(_box(compute_center_frame(style.center_radius, center)), fill=style.center_color,
                 outline=style.center_border_color, width=int(round(style.center_border_width)))

    if k != 1:
        image = image.resize((width, height), Image.LANCZOS)
    log.debug("Rendered clock %s at %dx%d", tuple(clock_time), width, height)
    return image


class ClockGUI:
    """Tk window showing a rendered clock, refreshed every second."""

    def __init__(self, root, size=(300, 300), style=None):
        import tkinter as tk

        self.root = root
        self.root.title("Clock")
        self.size = size
        self.style = style
        self.canvas = tk.Canvas(root, width=size[0], height=size[1], highlightthickness=0)
        self.canvas.pack()
        self.photo = None

    def draw_clock(self, clock_time):
        import tkinter as tk
        from PIL import ImageTk

        image = render_clock(self.size, clock_time, self.style, supersample=3)
        self.photo = ImageTk.PhotoImage(image)
        self.canvas.delete('all')
        self.canvas.create_image(0, 0, image=self.photo, anchor=tk.NW)

    def tick(self):
        self.draw_clock(ClockTime.now())
        self.root.after(1000, self.tick)


if __name__ == '__main__':
    import tkinter as tk

    logging.basicConfig(level=logging.INFO)
    root = tk.Tk()
    clock = ClockGUI(root)
    clock.tick()
    root.mainloop()
