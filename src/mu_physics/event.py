"""
Primary vertices and particles handed to a simulation event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from mu_physics.particle import Particle

LOGGER = logging.getLogger(__name__)


@dataclass
class PrimaryParticle:
    id: int
    px: float
    py: float
    pz: float


@dataclass
class PrimaryVertex:
    """Origin point ``(x, y, z, t)`` of one or more primary particles."""

    x: float
    y: float
    z: float
    t: float
    primaries: list[PrimaryParticle] = field(default_factory=list)

    def set_primary(self, primary: PrimaryParticle) -> None:
        self.primaries.append(primary)


class EventSink(Protocol):
    def add_primary_vertex(self, vertex: PrimaryVertex) -> None: ...


class Event:
    """In-memory event collecting primary vertices in insertion order."""

    def __init__(self) -> None:
        self.primary_vertices: list[PrimaryVertex] = []

    def add_primary_vertex(self, vertex: PrimaryVertex) -> None:
        self.primary_vertices.append(vertex)

    @property
    def number_of_primary_vertices(self) -> int:
        return len(self.primary_vertices)


def emit(particle: Particle, event: EventSink) -> PrimaryVertex:
    """Build a primary vertex carrying ``particle`` and register it with ``event``.

    Args:
        particle: Particle with vertex and momentum.
        event: Sink taking ownership of the vertex.

    Returns:
        The vertex added to ``event``.
    """
    vertex = PrimaryVertex(particle.x, particle.y, particle.z, particle.t)
    vertex.set_primary(PrimaryParticle(particle.id, particle.px, particle.py, particle.pz))
    event.add_primary_vertex(vertex)
    LOGGER.debug(
        "Emitted particle id=%d at (t=%g, x=%g, y=%g, z=%g)",
        particle.id,
        particle.t,
        particle.x,
        particle.y,
        particle.z,
    )
    return vertex
