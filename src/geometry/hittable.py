# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from materials.material import Material

# Hits closer than this along the ray are discarded so that rays leaving a
# surface do not immediately hit it again.
T_EPSILON = 1e-3


class HitRecord:
    """
    Records details of a ray-object intersection.
    The material is a copy; editing it never touches the primitive.
    """
    def __init__(self, position: Vector3, normal: Vector3, t: float,
                 material: Material):
        self.position = position  # Intersection point
        self.normal = normal      # Unit surface normal
        self.t = t                # Ray parameter at intersection
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, position={self.position!r}, normal={self.normal!r})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Besides hit(), every primitive exposes the pose the editing layer
    manipulates: material, position, rotation (Euler angles in degrees) and
    a uniform scale. After changing the pose call update() so derived state
    is rebuilt before the next render.
    """
    def __init__(self, material: Optional[Material] = None):
        self.material = material if material is not None else Material()
        self.rotation = Vector3(0.0, 0.0, 0.0)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    @property
    def position(self) -> Vector3:
        raise NotImplementedError

    @position.setter
    def position(self, value: Vector3):
        raise NotImplementedError

    @property
    def scale(self) -> float:
        raise NotImplementedError

    @scale.setter
    def scale(self, value: float):
        raise NotImplementedError

    def update(self):
        pass
