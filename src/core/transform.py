# core/transform.py
import math
import numpy as np
from core.vector import Vector3


class Transform:
    """
    4x4 affine transform.

    Build instances with the named constructors (identity, translate,
    rotate_x/y/z, scale) and combine them with ``@``; ``a @ b`` applies
    ``b`` first. The constructor itself only wraps an already valid matrix.
    """
    def __init__(self, matrix: np.ndarray):
        self.matrix = np.asarray(matrix, dtype=np.float64).reshape(4, 4)

    @classmethod
    def identity(cls) -> "Transform":
        return cls(np.eye(4))

    @classmethod
    def translate(cls, tx: float, ty: float, tz: float) -> "Transform":
        m = np.eye(4)
        m[:3, 3] = (tx, ty, tz)
        return cls(m)

    @classmethod
    def rotate_x(cls, angle: float, center: Vector3) -> "Transform":
        s, c = _sin_cos(angle)
        return cls._about(np.array([[1.0, 0.0, 0.0],
                                    [0.0, c, -s],
                                    [0.0, s, c]]), center)

    @classmethod
    def rotate_y(cls, angle: float, center: Vector3) -> "Transform":
        s, c = _sin_cos(angle)
        return cls._about(np.array([[c, 0.0, s],
                                    [0.0, 1.0, 0.0],
                                    [-s, 0.0, c]]), center)

    @classmethod
    def rotate_z(cls, angle: float, center: Vector3) -> "Transform":
        s, c = _sin_cos(angle)
        return cls._about(np.array([[c, -s, 0.0],
                                    [s, c, 0.0],
                                    [0.0, 0.0, 1.0]]), center)

    @classmethod
    def scale(cls, center: Vector3, sx: float, sy: float, sz: float) -> "Transform":
        return cls._about(np.diag([sx, sy, sz]), center)

    @classmethod
    def _about(cls, linear: np.ndarray, center: Vector3) -> "Transform":
        # p' = L (p - c) + c
        c = np.array(center.to_tuple(), dtype=np.float64)
        m = np.eye(4)
        m[:3, :3] = linear
        m[:3, 3] = c - linear @ c
        return cls(m)

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform(self.matrix @ other.matrix)

    def apply(self, vector: Vector3) -> Vector3:
        x, y, z, w = self.matrix @ np.array([vector.x, vector.y, vector.z, 1.0])
        assert w != 0, "transform maps point to infinity"
        return Vector3(float(x / w), float(y / w), float(z / w))

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """
        Transforms an (N, 3) array of points, dividing by w.
        """
        points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        homogeneous = np.hstack([points, np.ones((len(points), 1))])
        out = homogeneous @ self.matrix.T
        return out[:, :3] / out[:, 3:4]

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"


def _sin_cos(angle: float):
    rad = math.radians(angle)
    return math.sin(rad), math.cos(rad)
