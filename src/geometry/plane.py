# geometry/plane.py
from typing import Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord, T_EPSILON
from materials.presets import MaterialPresets

PLANE_HEIGHT = -3.0
# Rays flatter than this never reach the plane.
PARALLEL_EPSILON = 1e-3


class GroundPlane:
    """
    The infinite horizontal floor at y = PLANE_HEIGHT.

    It belongs to the scene rather than the object list: it has a fixed
    material and can only be shown or hidden.
    """
    def __init__(self):
        self.material = MaterialPresets.ground()
        self.normal = Vector3(0.0, 1.0, 0.0)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        dy = ray.direction.y
        if abs(dy) <= PARALLEL_EPSILON:
            return None
        t = -(ray.origin.y - PLANE_HEIGHT) / dy
        if t <= T_EPSILON:
            return None
        return HitRecord(ray.at(t), self.normal, t, self.material.copy())
