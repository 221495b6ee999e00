# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

WORLD_UP = Vector3(0.0, 1.0, 0.0)


class Camera:
    """
    Pinhole camera looking from ``eye`` toward ``look_at``.

    ``fov`` is the vertical field of view in degrees. The basis and image
    plane are cached; call update() after changing eye, look_at, fov or
    aspect_ratio.
    """
    def __init__(self, eye: Vector3, look_at: Vector3, fov: float, aspect_ratio: float):
        self.eye = eye
        self.look_at = look_at
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.update()

    def update(self):
        """Updates the camera's basis vectors and viewport."""
        # n points backward, from the target to the eye
        self.n = (self.eye - self.look_at).normalize()
        self.u = WORLD_UP.cross(self.n).normalize()
        self.v = self.n.cross(self.u)

        h = math.tan(self.fov * math.pi / 360.0)
        viewport_height = 2.0 * h
        viewport_width = viewport_height * self.aspect_ratio

        self.horizontal = self.u * viewport_width
        self.vertical = self.v * viewport_height
        # Image plane sits one unit in front of the eye
        self.corner = self.eye - self.horizontal / 2.0 - self.vertical / 2.0 - self.n

    def generate_ray(self, s: float, t: float) -> Ray:
        """Ray through the image plane point (s, t), both in [0, 1]."""
        point = self.corner + self.horizontal * s + self.vertical * t
        return Ray(self.eye, point - self.eye)
