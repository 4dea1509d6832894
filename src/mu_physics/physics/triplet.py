"""
Conversion between Cartesian momentum and the pseudo-Lorentz triplet.

The longitudinal (beam) axis is the first Cartesian coordinate, so the
pseudorapidity is measured from ``x`` and the azimuth lives in the
``(-z, y)`` plane.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from mu_physics.data.schema import CORE_MOM_COLS, TRIPLET_COLS, PseudoLorentzTriplet

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Sequence


def _require_columns(frame: pd.DataFrame, cols: Sequence[str], context: str) -> None:
    missing = set(cols).difference(frame.columns)
    if missing:
        raise ValueError(f"Missing columns for {context}: {sorted(missing)}")


def as_vector(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a float ThreeVector."""
    vector = np.asarray(values, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"Expected three components, got shape {vector.shape}")
    return vector


def unit(vector: np.ndarray) -> np.ndarray:
    """Normalise ``vector``; the zero vector is returned unchanged."""
    magnitude = np.linalg.norm(vector)
    if magnitude > 0:
        return vector / magnitude
    return vector.copy()


def longitudinal_eta(px: float, magnitude: float) -> float:
    """Pseudorapidity of a momentum with longitudinal component ``px``.

    Purely longitudinal momentum gives a signed infinity.
    """
    ratio = px / magnitude
    if abs(ratio) >= 1.0:
        return math.copysign(math.inf, ratio)
    return math.atanh(ratio)


def azimuth(py: float, pz: float) -> float:
    """Azimuth in the ``(-z, y)`` plane, folded into ``(-pi, pi]``."""
    phi = math.atan2(py, -pz)
    return math.pi if phi == -math.pi else phi


def to_triplet(momentum: Sequence[float] | np.ndarray) -> PseudoLorentzTriplet:
    """Convert Cartesian momentum to ``(pT, eta, phi)``.

    The zero vector maps to the default triplet ``(0, 0, 0)``.
    """
    px, py, pz = as_vector(momentum)
    magnitude = math.sqrt(px * px + py * py + pz * pz)
    if magnitude == 0:
        return PseudoLorentzTriplet()
    eta = longitudinal_eta(px, magnitude)
    return PseudoLorentzTriplet(magnitude / math.cosh(eta), eta, azimuth(py, pz))


def to_vector(triplet: PseudoLorentzTriplet) -> np.ndarray:
    """Convert a pseudo-Lorentz triplet back to Cartesian momentum."""
    with np.errstate(invalid="ignore", over="ignore"):
        return np.array(
            [
                triplet.pT * np.sinh(triplet.eta),
                triplet.pT * np.sin(triplet.phi),
                -triplet.pT * np.cos(triplet.phi),
            ],
            dtype=float,
        )


def triplets_from_momenta(frame: pd.DataFrame) -> pd.DataFrame:
    """Vectorised :func:`to_triplet` over the ``px, py, pz`` columns of ``frame``.

    Returns:
        DataFrame indexed like ``frame`` with columns ``pT, eta, phi``.
    """
    _require_columns(frame, CORE_MOM_COLS, "triplet conversion")
    p = frame[list(CORE_MOM_COLS)].to_numpy(dtype=float)
    magnitude = np.sqrt(np.sum(p * p, axis=1))
    moving = magnitude > 0

    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.where(moving, p[:, 0] / magnitude, 0.0)
        eta = np.where(np.abs(ratio) >= 1.0, np.copysign(np.inf, ratio), np.arctanh(ratio))
        pt = np.where(moving, magnitude / np.cosh(eta), 0.0)
    phi = np.arctan2(p[:, 1], -p[:, 2])
    phi = np.where(moving, np.where(phi == -np.pi, np.pi, phi), 0.0)

    return pd.DataFrame(dict(zip(TRIPLET_COLS, (pt, eta, phi))), index=frame.index)


def momenta_from_triplets(frame: pd.DataFrame) -> pd.DataFrame:
    """Vectorised :func:`to_vector` over the ``pT, eta, phi`` columns of ``frame``."""
    _require_columns(frame, TRIPLET_COLS, "momentum conversion")
    pt = frame["pT"].to_numpy(dtype=float)
    eta = frame["eta"].to_numpy(dtype=float)
    phi = frame["phi"].to_numpy(dtype=float)

    with np.errstate(invalid="ignore", over="ignore"):
        px = pt * np.sinh(eta)
    py = pt * np.sin(phi)
    pz = -pt * np.cos(phi)

    return pd.DataFrame(dict(zip(CORE_MOM_COLS, (px, py, pz))), index=frame.index)
