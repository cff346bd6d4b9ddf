#
# PROJECT: raykernel
# MODULE: raykernel/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .color import BLACK, MAX_COLOR_VALUE, Color, to_channel_byte

logger = logging.getLogger(__name__)

# Plain PPM readers reject lines longer than this
MAX_PPM_LINE = 70


class Canvas:
    """
    Width x height grid of colors, origin at the top-left.

    Pixels are stored row-major as pixels[y][x] and start out black.
    Reads and writes outside the grid raise IndexError.
    """
    __slots__ = ['width', 'height', 'pixels']

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int):
            raise ValueError(f"Canvas dimensions must be integers, got {width!r}x{height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width, self.height = width, height
        self.pixels = [[BLACK] * width for _ in range(height)]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x, y):
        if not self.contains(x, y):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y][x] = color

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return self.pixels[y][x]

    def _row_lines(self, row):
        """Yield the PPM text lines for one row, wrapped at MAX_PPM_LINE."""
        line = ''
        for color in row:
            for channel in color:
                token = str(to_channel_byte(channel))
                if not line:
                    line = token
                elif len(line) + 1 + len(token) > MAX_PPM_LINE:
                    yield line
                    line = token
                else:
                    line += ' ' + token
        if line:
            yield line

    def to_ppm(self) -> str:
        """
        Encode as plain-text PPM (P3).

        Header is 'P3', 'width height', '255'. Each row starts on a new
        line and is wrapped at a value boundary so no line exceeds
        MAX_PPM_LINE characters. The output ends with a newline.
        """
        lines = ['P3', f'{self.width} {self.height}', str(MAX_COLOR_VALUE)]
        for row in self.pixels:
            lines.extend(self._row_lines(row))
        return '\n'.join(lines) + '\n'

    def to_ppm_bytes(self) -> bytes:
        return self.to_ppm().encode('ascii')

    def save_ppm(self, path):
        """Write the PPM encoding to path. OSError propagates to the caller."""
        data = self.to_ppm_bytes()
        with open(path, 'wb') as f:
            f.write(data)
        logger.info("Wrote %dx%d canvas to %s (%d bytes)",
                    self.width, self.height, path, len(data))
