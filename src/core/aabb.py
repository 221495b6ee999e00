# src/core/aabb.py
import math
from typing import Iterable
from core.vector import Vector3

AXES = ('x', 'y', 'z')


def slab(origin: float, direction: float, low: float, high: float):
    """
    Entry/exit parameters of a ray along one axis of a box.

    A ray parallel to the axis never enters or leaves the slab: it is
    either inside for every t (-inf, inf) or outside for every t (None).
    """
    if direction == 0:
        if origin < low or origin > high:
            return None
        return -math.inf, math.inf
    invD = 1.0 / direction
    t0 = (low - origin) * invD
    t1 = (high - origin) * invD
    if invD < 0:
        t0, t1 = t1, t0
    return t0, t1


class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def from_vertices(cls, vertices: Iterable) -> "AABB":
        """
        Componentwise extrema of a vertex set. Accepts Vector3 instances or
        (x, y, z) rows; an empty set gives an inverted box that is never hit.
        """
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for vertex in vertices:
            for axis, value in enumerate(vertex):
                value = float(value)
                lo[axis] = min(lo[axis], value)
                hi[axis] = max(hi[axis], value)
        return cls(Vector3(*lo), Vector3(*hi))

    @property
    def center(self) -> Vector3:
        return (self.minimum + self.maximum) / 2.0

    def hit(self, ray, t_min: float = 0.0, t_max: float = math.inf) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in AXES:
            interval = slab(getattr(ray.origin, a), getattr(ray.direction, a),
                            getattr(self.minimum, a), getattr(self.maximum, a))
            if interval is None:
                return False
            t0, t1 = interval
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
