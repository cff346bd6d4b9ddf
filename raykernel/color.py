#
# PROJECT: raykernel
# MODULE: raykernel/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from numbers import Real

from .fuzzy import FuzzyEq

MAX_COLOR_VALUE = 255


class Color(FuzzyEq):
    """
    RGB color with float channels.

    Channels are not clamped: out-of-gamut values are valid intermediate
    results and only get clamped when the canvas is encoded.
    """
    __slots__ = ('r', 'g', 'b')

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def gray(cls, value: float) -> 'Color':
        """Same value on all three channels."""
        return cls(value, value, value)

    @classmethod
    def from_hex(cls, hex_str):
        """
        Parse a hex color string into a Color with channels in [0, 1].
        Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
        Returns: Color, or None on failure.
        """
        if hex_str is None:
            return None
        val = str(hex_str).strip().lstrip('#')
        if len(val) != 6:
            return None
        try:
            r = int(val[0:2], 16)
            g = int(val[2:4], 16)
            b = int(val[4:6], 16)
        except ValueError:
            return None
        return cls(r / MAX_COLOR_VALUE, g / MAX_COLOR_VALUE, b / MAX_COLOR_VALUE)

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if isinstance(other, Color):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return Color(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, Real):
            return Color(self.r * scalar, self.g * scalar, self.b * scalar)
        return NotImplemented

    __rmul__ = __mul__


BLACK = Color(0.0, 0.0, 0.0)


def to_channel_byte(value: float) -> int:
    """Map a float channel to 0-255: clamp, scale, round half up, clamp."""
    clamped = max(0.0, min(1.0, value))
    scaled = int(clamped * MAX_COLOR_VALUE + 0.5)
    return max(0, min(MAX_COLOR_VALUE, scaled))
