# core/utils.py
import math
from core.vector import Vector3

# Returned by refract() under total internal reflection.
NO_REFRACTION = Vector3(1.0, 0.0, 0.0)


def sign(value: float) -> float:
    if value < 0.0:
        return -1.0
    if value > 0.0:
        return 1.0
    return 0.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, eta_t: float, eta_i: float = 1.0) -> Vector3:
    """
    Bends v through a surface with normal n going from a medium of index
    eta_i into one of index eta_t (Snell's law).

    A ray arriving from the back face is handled by flipping the normal and
    swapping the indices. Under total internal reflection the fixed
    NO_REFRACTION direction is returned; callers trace it like any other ray.
    """
    cosi = -clamp(v.dot(n), -1.0, 1.0)
    if cosi < 0:
        return refract(v, -n, eta_i, eta_t)
    eta = eta_i / eta_t
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return NO_REFRACTION
    return v * eta + n * (eta * cosi - math.sqrt(k))
