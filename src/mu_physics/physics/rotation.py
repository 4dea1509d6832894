"""
Planar rotation and polar-angle helpers evaluated in extended precision.
"""

from __future__ import annotations

import numpy as np

from mu_physics.data.config import PI_LONG


def rotate2d(x: float, y: float, theta: float) -> tuple[np.longdouble, np.longdouble]:
    """Rotate the pair ``(x, y)`` counter-clockwise by ``theta``.

    Args:
        x: First component.
        y: Second component.
        theta: Rotation angle in radians.

    Returns:
        Tuple of the rotated components as ``numpy.longdouble``.
    """
    x = np.longdouble(x)
    y = np.longdouble(y)
    theta = np.longdouble(theta)
    cosine = np.cos(theta)
    sine = np.sin(theta)
    return x * cosine - y * sine, x * sine + y * cosine


def eta_to_polar_angle(eta: float) -> np.longdouble:
    """Polar angle from the positive longitudinal axis for a pseudorapidity."""
    eta = np.longdouble(eta)
    subangle = np.longdouble(2.0) * np.arctan(np.exp(-np.abs(eta)))
    return PI_LONG - subangle if eta < 0 else subangle
