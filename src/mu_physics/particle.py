"""
Kinematic particle records.

``BasicParticle`` holds a particle id and a Cartesian momentum and exposes
derived quantities plus setters that change one observable at a time.
``Particle`` adds a spacetime vertex.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from mu_physics.data.schema import PseudoLorentzTriplet
from mu_physics.event import emit
from mu_physics.physics.properties import particle_charge, particle_mass, particle_name
from mu_physics.physics.rotation import eta_to_polar_angle, rotate2d
from mu_physics.physics.triplet import (
    as_vector,
    azimuth,
    longitudinal_eta,
    to_triplet,
    to_vector,
    unit,
)

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from mu_physics.event import EventSink, PrimaryVertex
    from mu_physics.physics.properties import ParticleTable


def _vector_from_args(args: tuple, method: str) -> np.ndarray:
    if len(args) == 1:
        return as_vector(args[0])
    if len(args) == 3:
        return as_vector(args)
    raise TypeError(f"{method}() takes a vector or three components, got {len(args)} arguments")


@dataclass
class BasicParticle:
    """Particle id with Cartesian momentum.

    The longitudinal axis is ``px``. ``table`` overrides the process-wide
    particle table for mass, charge and name lookups.
    """

    id: int = 0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    table: ParticleTable | None = field(default=None, kw_only=True, repr=False, compare=False)

    def pT(self) -> float:
        magnitude = self.p_mag()
        if magnitude == 0:
            return 0.0
        return magnitude / math.cosh(longitudinal_eta(self.px, magnitude))

    def eta(self) -> float:
        magnitude = self.p_mag()
        if magnitude == 0:
            return 0.0
        return longitudinal_eta(self.px, magnitude)

    def phi(self) -> float:
        if self.p_mag() == 0:
            return 0.0
        return azimuth(self.py, self.pz)

    def pseudo_lorentz_triplet(self) -> PseudoLorentzTriplet:
        return to_triplet(self.p())

    def name(self) -> str:
        return particle_name(self.id, self.table)

    def charge(self) -> float:
        return particle_charge(self.id, self.table)

    def mass(self) -> float:
        return particle_mass(self.id, self.table)

    def kinetic_energy(self) -> float:
        return self.total_energy() - self.mass()

    def total_energy(self) -> float:
        return math.hypot(self.p_mag(), self.mass())

    def p_mag(self) -> float:
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    def p_unit(self) -> np.ndarray:
        """Unit momentum direction, the zero vector when at rest."""
        return unit(self.p())

    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    def set_pT(self, new_pT: float) -> None:
        self.set_pseudo_lorentz_triplet(new_pT, self.eta(), self.phi())

    def set_eta(self, new_eta: float) -> None:
        """Rotate the momentum in the ``(px, -pz)`` plane by the polar-angle change.

        ``py`` and the momentum magnitude are unchanged. The new pseudorapidity
        is exact only when ``py == 0`` and ``-pz >= 0``; elsewhere the polar-angle
        difference is not the angle swept in that plane.
        """
        theta = eta_to_polar_angle(new_eta) - eta_to_polar_angle(self.eta())
        first, second = rotate2d(self.px, -self.pz, theta)
        self.px = float(first)
        self.pz = float(-second)

    def set_phi(self, new_phi: float) -> None:
        """Rotate the momentum in the ``(-pz, py)`` plane; ``px`` is unchanged."""
        first, second = rotate2d(-self.pz, self.py, new_phi - self.phi())
        self.pz = float(-first)
        self.py = float(second)

    def set_pseudo_lorentz_triplet(self, *args) -> None:
        """Replace the momentum from ``(pT, eta, phi)`` or a ``PseudoLorentzTriplet``."""
        if len(args) == 1:
            triplet = args[0]
        elif len(args) == 3:
            triplet = PseudoLorentzTriplet(*args)
        else:
            raise TypeError(
                "set_pseudo_lorentz_triplet() takes a triplet or (pT, eta, phi), "
                f"got {len(args)} arguments"
            )
        self.set_p(to_vector(triplet))

    def set_kinetic_energy(self, new_ke: float) -> None:
        new_ke = np.longdouble(new_ke)
        with np.errstate(invalid="ignore"):
            magnitude = np.sqrt(new_ke * (new_ke + np.longdouble(2.0) * self.mass()))
        self.set_p(self.p_unit() * float(magnitude))

    def set_p_mag(self, magnitude: float) -> None:
        self.set_p(magnitude * self.p_unit())

    def set_p_unit(self, *args) -> None:
        """Point the momentum along a new direction, keeping its magnitude.

        A particle at rest gets unit magnitude.
        """
        direction = _vector_from_args(args, "set_p_unit")
        magnitude = self.p_mag()
        self.set_p((magnitude or 1.0) * unit(direction))

    def set_p(self, *args) -> None:
        """Assign all three momentum components from a vector or ``(px, py, pz)``."""
        new_px, new_py, new_pz = _vector_from_args(args, "set_p")
        self.px = float(new_px)
        self.py = float(new_py)
        self.pz = float(new_pz)


@dataclass
class Particle(BasicParticle):
    """``BasicParticle`` with a spacetime vertex ``(t, x, y, z)``."""

    t: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def vertex(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def set_vertex(self, *args) -> None:
        """Set the vertex.

        Accepted forms are ``(x, y, z)``, ``(t, x, y, z)``, ``(vector)`` and
        ``(t, vector)``. The time is left alone unless given.
        """
        if len(args) == 1:
            self.x, self.y, self.z = (float(v) for v in as_vector(args[0]))
        elif len(args) == 2:
            self.t = float(args[0])
            self.x, self.y, self.z = (float(v) for v in as_vector(args[1]))
        elif len(args) == 3:
            self.x, self.y, self.z = (float(v) for v in args)
        elif len(args) == 4:
            self.t, self.x, self.y, self.z = (float(v) for v in args)
        else:
            raise TypeError(
                "set_vertex() takes (x, y, z), (t, x, y, z), (vector) or (t, vector), "
                f"got {len(args)} arguments"
            )

    def emit(self, event: EventSink) -> PrimaryVertex:
        """Add this particle to ``event`` as a primary vertex."""
        return emit(self, event)
