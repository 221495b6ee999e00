# renderer/raytracer.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from core.config import RENDER_WORKERS
from renderer.framebuffer import Framebuffer
from renderer.integrator import cast_ray

logger = logging.getLogger(__name__)


def image_coordinate(index: int, size: int) -> float:
    """Pixel index to [0, 1]; a single-pixel axis samples its middle."""
    if size <= 1:
        return 0.5
    return index / (size - 1)


def render_rows(camera, scene, depth: int, width: int, height: int,
                y_start: int, y_stop: int) -> np.ndarray:
    """
    Shade rows [y_start, y_stop) of a width x height image.

    Returns the band as a (rows, width, 3) uint8 array.
    """
    band = Framebuffer(width, y_stop - y_start)
    for y in range(y_start, y_stop):
        t = image_coordinate(y, height)
        for x in range(width):
            s = image_coordinate(x, width)
            ray = camera.generate_ray(s, t)
            band.set_pixel(x, y - y_start, cast_ray(ray, scene, depth))
    return band.pixels


def split_rows(height: int, parts: int) -> List[Tuple[int, int]]:
    parts = max(1, min(parts, height))
    bounds = np.linspace(0, height, parts + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(bounds[:-1], bounds[1:]) if b > a]


def render(framebuffer: Framebuffer, camera, scene, depth: int,
           workers: Optional[int] = None) -> None:
    """
    Render the scene into the framebuffer.

    Every pixel is independent, so the image is cut into horizontal bands
    that worker processes shade in parallel; each band is copied into its
    own rows of the framebuffer. The camera and scene are sent to the
    workers as they are when the call starts and must not change until it
    returns. With ``workers`` <= 1 everything runs in this process.
    """
    if workers is None:
        workers = RENDER_WORKERS
    width, height = framebuffer.width, framebuffer.height

    start = time.perf_counter()
    if workers <= 1 or height <= 1:
        used = 1
        framebuffer.write_rows(0, render_rows(camera, scene, depth, width, height, 0, height))
    else:
        bands = split_rows(height, workers)
        used = len(bands)
        with ProcessPoolExecutor(max_workers=used) as executor:
            futures = {
                executor.submit(render_rows, camera, scene, depth,
                                width, height, y0, y1): y0
                for y0, y1 in bands
            }
            for future, y0 in futures.items():
                framebuffer.write_rows(y0, future.result())

    logger.info("Rendered %dx%d at depth %d with %d worker(s) in %.3fs",
                width, height, depth, used, time.perf_counter() - start)
