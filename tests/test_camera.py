"""Tests for the pinhole camera."""

import pytest

from camera.camera import Camera
from conftest import assert_vec_close
from core.vector import Vector3


class TestCameraBasis:

    def test_basis_looking_down_negative_z(self, front_camera):
        assert_vec_close(front_camera.n, (0.0, 0.0, 1.0))
        assert_vec_close(front_camera.u, (1.0, 0.0, 0.0))
        assert_vec_close(front_camera.v, (0.0, 1.0, 0.0))

    def test_image_plane(self, front_camera):
        # fov 90 -> half height tan(45) = 1
        assert_vec_close(front_camera.horizontal, (2.0, 0.0, 0.0))
        assert_vec_close(front_camera.vertical, (0.0, 2.0, 0.0))
        assert_vec_close(front_camera.corner, (-1.0, -1.0, 4.0))

    def test_aspect_ratio_widens_viewport(self):
        camera = Camera(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, 0.0), 90.0, 2.0)
        assert camera.horizontal.length() == pytest.approx(4.0)
        assert camera.vertical.length() == pytest.approx(2.0)

    def test_basis_is_orthonormal(self):
        camera = Camera(Vector3(3.0, 4.0, -7.0), Vector3(0.5, 0.0, 1.0), 45.0, 1.5)
        for axis in (camera.u, camera.v, camera.n):
            assert axis.length() == pytest.approx(1.0)
        assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
        assert camera.u.dot(camera.n) == pytest.approx(0.0, abs=1e-12)
        assert camera.v.dot(camera.n) == pytest.approx(0.0, abs=1e-12)


class TestGenerateRay:

    def test_center_ray_points_at_target(self, front_camera):
        ray = front_camera.generate_ray(0.5, 0.5)
        assert ray.origin == Vector3(0.0, 0.0, 5.0)
        assert_vec_close(ray.direction, (0.0, 0.0, -1.0))

    def test_corner_rays(self, front_camera):
        assert_vec_close(front_camera.generate_ray(0.0, 0.0).direction, (-1.0, -1.0, -1.0))
        assert_vec_close(front_camera.generate_ray(1.0, 1.0).direction, (1.0, 1.0, -1.0))

    def test_update_after_moving_eye(self, front_camera):
        front_camera.eye = Vector3(5.0, 0.0, 0.0)
        stale = front_camera.generate_ray(0.5, 0.5)
        assert_vec_close(stale.direction, (-5.0, 0.0, 4.0))

        front_camera.update()
        ray = front_camera.generate_ray(0.5, 0.5)
        assert_vec_close(ray.direction, (-1.0, 0.0, 0.0))

    def test_update_after_changing_fov(self, front_camera):
        front_camera.fov = 60.0
        front_camera.update()
        corner = front_camera.generate_ray(0.0, 0.5).direction
        assert corner.x == pytest.approx(-0.5773502691896257)
