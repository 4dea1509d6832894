"""Particle kinematics under a first-axis-longitudinal convention.

This package converts Cartesian momenta to and from the detector-style
pseudo-Lorentz triplet ``(pT, eta, phi)``, provides particle records with
single-observable setters, and hands particles to a simulation event.
"""

from __future__ import annotations

from .data.schema import PseudoLorentzTriplet
from .event import Event, PrimaryParticle, PrimaryVertex, emit
from .particle import BasicParticle, Particle
from .physics.properties import (
    ParticleDefinition,
    StaticParticleTable,
    get_particle_table,
    particle_charge,
    particle_mass,
    particle_name,
    set_particle_table,
)
from .physics.triplet import to_triplet, to_vector

__all__ = [
    "BasicParticle",
    "Event",
    "Particle",
    "ParticleDefinition",
    "PrimaryParticle",
    "PrimaryVertex",
    "PseudoLorentzTriplet",
    "StaticParticleTable",
    "emit",
    "get_particle_table",
    "particle_charge",
    "particle_mass",
    "particle_name",
    "set_particle_table",
    "to_triplet",
    "to_vector",
]
