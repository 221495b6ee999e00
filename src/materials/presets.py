# materials/presets.py
from core.vector import Vector3
from materials.material import Material


class MaterialPresets:
    """Predefined albedo mixes for common looks."""

    @staticmethod
    def default() -> Material:
        return Material()

    @staticmethod
    def ground() -> Material:
        # Ground plane: the default mix with a full grey diffuse term.
        return Material(diffuse=Vector3(0.8, 0.8, 0.8), diffuse_albedo=1.0)

    @staticmethod
    def bubble() -> Material:
        return Material(diffuse=Vector3(1.0, 1.0, 1.0), diffuse_albedo=0.4,
                        refract_albedo=1.0, refractive=1.01)

    @staticmethod
    def matte(color: Vector3) -> Material:
        return Material(diffuse=color, diffuse_albedo=1.0, specular_albedo=0.0,
                        refract_albedo=0.0)

    @staticmethod
    def plastic(color: Vector3) -> Material:
        return Material(diffuse=color, specular=Vector3(1.0, 1.0, 1.0),
                        diffuse_albedo=0.6, specular_albedo=0.3,
                        reflect_albedo=0.1, refract_albedo=0.0, shininess=50.0)

    @staticmethod
    def mirror() -> Material:
        return Material(specular=Vector3(1.0, 1.0, 1.0), diffuse_albedo=0.0,
                        specular_albedo=10.0, reflect_albedo=0.8,
                        refract_albedo=0.0, shininess=1425.0)

    @staticmethod
    def glass() -> Material:
        return Material(diffuse=Vector3(0.6, 0.7, 0.8), specular=Vector3(1.0, 1.0, 1.0),
                        diffuse_albedo=0.0, specular_albedo=0.5,
                        reflect_albedo=0.1, refract_albedo=0.8,
                        shininess=125.0, refractive=1.5)
