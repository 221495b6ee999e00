# src/geometry/world.py
import random
from typing import List, Optional
from core.ray import Ray
from core.vector import Vector3
from geometry.box import Box
from geometry.hittable import Hittable, HitRecord
from geometry.plane import GroundPlane
from geometry.sphere import Sphere
from materials.presets import MaterialPresets


class Scene:
    """
    Objects, point lights, ambient level and the optional ground plane.

    The editing layer holds references to the same primitives and changes
    them between render passes; a render pass only reads the scene.
    """
    def __init__(self, ambient: float = 0.0):
        self.objects: List[Hittable] = []
        self.lights: List[Vector3] = []
        self.ambient = ambient
        self.plane = GroundPlane()
        self.plane_visible = False

    def add_object(self, obj: Hittable) -> int:
        self.objects.append(obj)
        return len(self.objects) - 1

    def object_at(self, index: int) -> Hittable:
        return self.objects[index]

    def remove_object(self, index: int) -> Hittable:
        return self.objects.pop(index)

    def add_light(self, position: Vector3) -> int:
        self.lights.append(position)
        return len(self.lights) - 1

    def light_at(self, index: int) -> Vector3:
        return self.lights[index]

    def set_light(self, index: int, position: Vector3):
        self.lights[index] = position

    def remove_light(self, index: int) -> Vector3:
        return self.lights.pop(index)

    def show_plane(self, show: bool):
        self.plane_visible = show

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Nearest intersection along the ray.

        The plane is tested first, then the objects in insertion order; a
        later hit replaces the current one only if it is strictly closer.
        """
        hit_record = None
        closest_so_far = float('inf')

        if self.plane_visible:
            rec = self.plane.hit(ray)
            if rec is not None and rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec

        for obj in self.objects:
            rec = obj.hit(ray)
            if rec is not None and rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record


def build_demo_scene(seed: Optional[int] = None) -> Scene:
    """
    The start-up scene: a large box, one light above it and five small
    bubbles at random integer positions inside.
    """
    rng = random.Random(seed)
    scene = Scene()
    scene.add_object(Box())
    scene.add_light(Vector3(0.0, 5.0, 0.0))

    for i in range(5):
        center = Vector3(float(rng.randint(-2, 2)),
                         float(rng.randint(-2, 2)),
                         float(rng.randint(-2, 2)))
        bubble = Sphere(center, 0.3, MaterialPresets.bubble())
        bubble.scale *= -0.3
        bubble.scale -= -0.1 * i
        bubble.update()
        scene.add_object(bubble)
    return scene
