# renderer/integrator.py
from core.ray import Ray
from core.utils import reflect, refract
from core.vector import Vector3

WHITE = Vector3(1.0, 1.0, 1.0)
SKY = Vector3(0.5, 0.7, 1.0)


def background(ray: Ray) -> Vector3:
    """Vertical gradient from white at the horizon to pale blue overhead."""
    direction = ray.direction.normalize()
    t = 0.5 * (direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY * t


def ambient_background(ray: Ray, scene) -> Vector3:
    return background(ray) * min(1.0, 2 * scene.ambient)


def cast_ray(ray: Ray, scene, depth: int) -> Vector3:
    """
    Whitted-style shading of a single ray.

    Once depth reaches 0 the scene is no longer queried and the ray sees
    only the ambient-scaled background. Otherwise the hit point combines
    local diffuse/specular lighting with the reflected and refracted rays,
    each traced with depth - 1 and weighted by the material albedos. The
    result is not clamped; that happens when the pixel is written.
    """
    if depth <= 0:
        return ambient_background(ray, scene)

    rec = scene.hit(ray)
    if rec is None:
        return ambient_background(ray, scene)

    material = rec.material
    reflect_dir = reflect(ray.direction, rec.normal)
    refract_dir = refract(ray.direction, rec.normal, material.refractive)
    reflected = cast_ray(Ray(rec.position, reflect_dir), scene, depth - 1)
    refracted = cast_ray(Ray(rec.position, refract_dir), scene, depth - 1)

    view = ray.direction.normalize()
    diffuse = scene.ambient
    specular = 0.0
    for light in scene.lights:
        source = (light - rec.position).normalize()
        diffuse += max(0.0, source.dot(rec.normal))
        r = -reflect(-source, rec.normal)
        specular += max(0.0, r.dot(view)) ** material.shininess

    return (material.diffuse * (material.diffuse_albedo * min(1.0, diffuse)) +
            material.specular * (material.specular_albedo * min(1.0, specular)) +
            reflected * material.reflect_albedo +
            refracted * material.refract_albedo)
