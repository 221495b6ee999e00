"""Shared fixtures for the ray tracer tests."""

import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.mesh import parse_obj
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material


def assert_vec_close(actual, expected, tol=1e-9):
    """Compare two vectors component by component."""
    assert actual.x == pytest.approx(expected[0], abs=tol)
    assert actual.y == pytest.approx(expected[1], abs=tol)
    assert actual.z == pytest.approx(expected[2], abs=tol)


TRIANGLE_OBJ = """\
# one triangle in the z = 0 plane
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
f 1 2 3
"""


@pytest.fixture
def triangle_mesh():
    """Single triangle (0,0,0), (1,0,0), (0,1,0) facing +z."""
    return parse_obj(TRIANGLE_OBJ.splitlines())


@pytest.fixture
def red_matte():
    """Pure diffuse red; no specular, reflection or refraction."""
    return Material(diffuse=Vector3(1.0, 0.0, 0.0), diffuse_albedo=1.0,
                    specular_albedo=0.0, reflect_albedo=0.0, refract_albedo=0.0)


@pytest.fixture
def unit_sphere():
    return Sphere(Vector3(0.0, 0.0, 0.0), 1.0)


@pytest.fixture
def empty_scene():
    return Scene()


@pytest.fixture
def front_camera():
    """Camera at (0, 0, 5) looking at the origin, 90 degree fov, square image."""
    return Camera(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), 90.0, 1.0)
