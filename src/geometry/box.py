# geometry/box.py
import math
from typing import Optional
from core.aabb import AXES, slab
from core.ray import Ray
from core.utils import sign
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord, T_EPSILON
from materials.material import Material


class Box(Hittable):
    """
    Axis-aligned box.

    The pose is kept as a center plus the half-extents given at
    construction, multiplied by a uniform ``scale``. The box stays
    axis-aligned, so ``rotation`` is recorded but not applied.
    """
    def __init__(self, minimum: Optional[Vector3] = None, maximum: Optional[Vector3] = None,
                 material: Optional[Material] = None):
        super().__init__(material)
        if minimum is None:
            minimum = Vector3(-3.0, -3.0, -3.0)
        if maximum is None:
            maximum = Vector3(3.0, 3.0, 3.0)
        self.minimum = minimum
        self.maximum = maximum
        self.center = (minimum + maximum) / 2.0
        self._half_extent = (maximum - minimum) / 2.0
        self._scale = 1.0

    @property
    def position(self) -> Vector3:
        return self.center

    @position.setter
    def position(self, value: Vector3):
        self.center = value

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float):
        self._scale = value

    def update(self):
        half = self._half_extent * abs(self._scale)
        self.minimum = self.center - half
        self.maximum = self.center + half

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        normal_axis = 0
        t_near = -math.inf
        t_far = math.inf
        for axis, a in enumerate(AXES):
            interval = slab(getattr(ray.origin, a), getattr(ray.direction, a),
                            getattr(self.minimum, a), getattr(self.maximum, a))
            if interval is None:
                return None
            t0, t1 = interval
            if t0 > t_near:
                t_near = t0
                normal_axis = axis
            t_far = min(t_far, t1)

        if t_near >= t_far or t_near <= T_EPSILON:
            return None

        p = ray.at(t_near)
        components = [0.0, 0.0, 0.0]
        components[normal_axis] = sign((p - self.center)[normal_axis])
        return HitRecord(p, Vector3(*components), t_near, self.material.copy())

    def __repr__(self) -> str:
        return f"Box({self.minimum!r}, {self.maximum!r})"
