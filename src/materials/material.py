# materials/material.py
from typing import Optional
from core.vector import Vector3


class Material:
    """
    Surface description for the Whitted shading model.

    The four albedo weights scale the diffuse, specular, reflected and
    refracted terms independently. They are not required to sum to 1, so a
    surface may return more light than it receives.
    """
    def __init__(self,
                 diffuse: Optional[Vector3] = None,
                 specular: Optional[Vector3] = None,
                 diffuse_albedo: float = 0.145,
                 specular_albedo: float = 0.125,
                 reflect_albedo: float = 0.0,
                 refract_albedo: float = 0.655,
                 shininess: float = 1000.0,
                 refractive: float = 4.0):
        self.diffuse = diffuse if diffuse is not None else Vector3(0.0, 0.0, 0.0)
        self.specular = specular if specular is not None else Vector3(0.0, 0.0, 0.0)
        self.diffuse_albedo = diffuse_albedo
        self.specular_albedo = specular_albedo
        self.reflect_albedo = reflect_albedo
        self.refract_albedo = refract_albedo
        self.shininess = shininess
        self.refractive = refractive

    def copy(self) -> "Material":
        # Colors are never mutated in place, so sharing them is safe.
        return Material(self.diffuse, self.specular,
                        self.diffuse_albedo, self.specular_albedo,
                        self.reflect_albedo, self.refract_albedo,
                        self.shininess, self.refractive)

    def __repr__(self) -> str:
        return (f"Material(diffuse={self.diffuse!r}, specular={self.specular!r}, "
                f"albedo=({self.diffuse_albedo}, {self.specular_albedo}, "
                f"{self.reflect_albedo}, {self.refract_albedo}), "
                f"shininess={self.shininess}, refractive={self.refractive})")
