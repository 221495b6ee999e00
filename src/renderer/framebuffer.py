# renderer/framebuffer.py
import numpy as np
from PIL import Image
from core.vector import Vector3


class Framebuffer:
    """
    width x height grid of 8-bit RGB pixels.

    Row 0 is the bottom of the image (t = 0 on the image plane), the way
    the buffer is handed to a bottom-up display. to_image() flips it.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self):
        self.pixels.fill(0)

    def set_pixel(self, x: int, y: int, color: Vector3):
        assert 0 <= x < self.width and 0 <= y < self.height
        self.pixels[y, x] = [to_byte(c) for c in color]

    def get_pixel(self, x: int, y: int):
        return tuple(int(c) for c in self.pixels[y, x])

    def write_rows(self, y_start: int, rows: np.ndarray):
        self.pixels[y_start:y_start + len(rows)] = rows

    def data(self) -> bytes:
        return self.pixels.tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(np.flipud(self.pixels)))

    def save(self, filename: str):
        self.to_image().save(filename)


def to_byte(channel: float) -> int:
    # clamp to [0, 1], then truncate like an integer cast
    return int(min(1.0, max(0.0, channel)) * 255)
