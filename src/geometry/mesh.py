# geometry/mesh.py
import logging
from typing import Iterable, List, Optional

import numpy as np
from numba import njit

from core.aabb import AABB
from core.ray import Ray
from core.transform import Transform
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord, T_EPSILON
from materials.material import Material

logger = logging.getLogger(__name__)

# Determinant threshold of the Möller–Trumbore test. Faces seen edge-on or
# from behind fall below it and are skipped.
DET_EPSILON = 1e-6


class MeshLoadError(Exception):
    """Raised when a mesh file cannot be read or is not a triangle mesh."""


@njit(cache=True)
def closest_triangle(ox, oy, oz, dx, dy, dz, vertices, faces, det_eps, t_eps):
    """
    Möller–Trumbore over every face of a mesh.

    Returns (t, face) for the nearest intersection with t > t_eps, or
    (inf, -1) when the ray hits no face. Barycentric coordinates are kept
    unscaled (compared against det) to avoid a division per face.
    """
    best_t = np.inf
    best_face = -1
    for f in range(faces.shape[0]):
        i0 = faces[f, 0]
        i1 = faces[f, 1]
        i2 = faces[f, 2]
        ax = vertices[i0, 0]
        ay = vertices[i0, 1]
        az = vertices[i0, 2]
        e1x = vertices[i1, 0] - ax
        e1y = vertices[i1, 1] - ay
        e1z = vertices[i1, 2] - az
        e2x = vertices[i2, 0] - ax
        e2y = vertices[i2, 1] - ay
        e2z = vertices[i2, 2] - az

        # pvec = direction x edge2
        px = dy * e2z - dz * e2y
        py = dz * e2x - dx * e2z
        pz = dx * e2y - dy * e2x
        det = e1x * px + e1y * py + e1z * pz
        if det < det_eps:
            continue

        tx = ox - ax
        ty = oy - ay
        tz = oz - az
        u = tx * px + ty * py + tz * pz
        if u < 0.0 or u > det:
            continue

        # qvec = tvec x edge1
        qx = ty * e1z - tz * e1y
        qy = tz * e1x - tx * e1z
        qz = tx * e1y - ty * e1x
        v = dx * qx + dy * qy + dz * qz
        if v < 0.0 or u + v > det:
            continue

        t = (e2x * qx + e2y * qy + e2z * qz) / det
        if t <= t_eps or t >= best_t:
            continue
        best_t = t
        best_face = f
    return best_t, best_face


class TriangleMesh(Hittable):
    """
    Represents a 3D mesh composed of triangles sharing one material.

    ``vertices`` is an (N, 3) float array and ``faces`` an (M, 3) array of
    0-based vertex indices. The bounding box and centroid are computed once
    here; ``position`` starts at the centroid.

    update() re-poses the mesh from the vertices it was built with: scale
    about the centroid, rotate about X, Y then Z around it, and move it to
    ``position``.
    """
    def __init__(self, vertices, faces, material: Optional[Material] = None):
        super().__init__(material)
        self._base_vertices = np.array(vertices, dtype=np.float64).reshape(-1, 3)
        self.faces = np.ascontiguousarray(np.asarray(faces, dtype=np.int64).reshape(-1, 3))
        if self.faces.size and (self.faces.min() < 0 or self.faces.max() >= len(self._base_vertices)):
            raise ValueError("face index out of range")

        self.vertices = self._base_vertices.copy()
        self.aabb = AABB.from_vertices(self.vertices)
        self.centroid = self.aabb.center
        self._position = self.centroid
        self._scale = 1.0

    @property
    def position(self) -> Vector3:
        return self._position

    @position.setter
    def position(self, value: Vector3):
        self._position = value

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float):
        self._scale = value

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def pose(self) -> Transform:
        c = self.centroid
        offset = self._position - c
        return (Transform.translate(offset.x, offset.y, offset.z)
                @ Transform.rotate_z(self.rotation.z, c)
                @ Transform.rotate_y(self.rotation.y, c)
                @ Transform.rotate_x(self.rotation.x, c)
                @ Transform.scale(c, self._scale, self._scale, self._scale))

    def update(self):
        self.vertices = np.ascontiguousarray(self.pose().apply_points(self._base_vertices))
        self.aabb = AABB.from_vertices(self.vertices)

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        if not self.aabb.hit(ray):
            return None

        o, d = ray.origin, ray.direction
        t, face = closest_triangle(float(o.x), float(o.y), float(o.z),
                                   float(d.x), float(d.y), float(d.z),
                                   self.vertices, self.faces, DET_EPSILON, T_EPSILON)
        if face < 0:
            return None

        a, b, c = self.vertices[self.faces[face]]
        n = np.cross(b - a, c - a)
        normal = Vector3(float(n[0]), float(n[1]), float(n[2])).normalize()
        t = float(t)
        return HitRecord(ray.at(t), normal, t, self.material.copy())

    def __repr__(self) -> str:
        return f"TriangleMesh({len(self.vertices)} vertices, {len(self.faces)} faces)"


def parse_obj(lines: Iterable[str], material: Optional[Material] = None,
              source: str = "<mesh>") -> TriangleMesh:
    """
    Build a mesh from OBJ-style text.

    Only ``v x y z`` and ``f i j k`` records are used; face indices are
    1-based and may carry ``/vt/vn`` suffixes, which are ignored. Comments
    and any other record types are skipped.

    Raises:
        MeshLoadError: a face does not have exactly three vertices, a
            record is malformed, or a face references a missing vertex.
    """
    vertices: List[List[float]] = []
    faces: List[List[int]] = []

    for line_num, line in enumerate(lines, 1):
        values = line.split()
        if not values or values[0].startswith('#'):
            continue

        try:
            if values[0] == 'v':
                if len(values) < 4:
                    raise ValueError("vertex needs three coordinates")
                vertices.append([float(values[1]), float(values[2]), float(values[3])])
            elif values[0] == 'f':
                if len(values) != 4:
                    raise MeshLoadError(
                        f"{source}:{line_num}: face has {len(values) - 1} vertices, "
                        "model is not triangulated")
                faces.append([int(v.split('/')[0]) - 1 for v in values[1:]])
        except ValueError as exc:
            raise MeshLoadError(f"{source}:{line_num}: {line.strip()!r}: {exc}") from exc

    for face in faces:
        for index in face:
            if index < 0 or index >= len(vertices):
                raise MeshLoadError(f"{source}: face index {index + 1} out of range "
                                    f"({len(vertices)} vertices)")

    return TriangleMesh(np.array(vertices, dtype=np.float64).reshape(-1, 3),
                        np.array(faces, dtype=np.int64).reshape(-1, 3),
                        material)


def load_obj(filename: str, material: Optional[Material] = None) -> TriangleMesh:
    """Load a triangulated mesh from an OBJ file."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            mesh = parse_obj(f, material, source=str(filename))
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot open model %s: %s", filename, exc)
        raise MeshLoadError(f"cannot open model {filename}") from exc
    except MeshLoadError as exc:
        logger.error("Cannot load model %s: %s", filename, exc)
        raise

    logger.info("Loaded %s: %d vertices, %d triangles",
                filename, len(mesh.vertices), mesh.face_count)
    return mesh
