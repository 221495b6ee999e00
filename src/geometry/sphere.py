# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord, T_EPSILON
from materials.material import Material


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.

    ``position`` is the center and ``scale`` is the radius. A negative
    radius is accepted and turns the normals inward.
    """
    def __init__(self, center: Optional[Vector3] = None, radius: float = 1.0,
                 material: Optional[Material] = None):
        super().__init__(material)
        self.center = center if center is not None else Vector3(0.0, 0.0, 0.0)
        self.radius = radius

    @property
    def position(self) -> Vector3:
        return self.center

    @position.setter
    def position(self, value: Vector3):
        self.center = value

    @property
    def scale(self) -> float:
        return self.radius

    @scale.setter
    def scale(self, value: float):
        self.radius = value

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        # Only the near root counts; a ray starting inside the sphere misses it.
        root = (-half_b - math.sqrt(discriminant)) / a
        if root <= T_EPSILON:
            return None

        p = ray.at(root)
        normal = (p - self.center) / self.radius
        return HitRecord(p, normal, root, self.material.copy())

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
