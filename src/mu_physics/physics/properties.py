"""
Particle property lookup keyed by integer particle id.

Id ``0`` is reserved for "no particle" and never reaches the table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

from mu_physics.data.config import DEFAULT_PARTICLES, NULL_PARTICLE_ID

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Callable, Iterable

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ParticleDefinition:
    """Static properties of a particle species."""

    id: int
    name: str
    mass: float
    charge: float


class ParticleTable(Protocol):
    def find_particle(self, particle_id: int) -> ParticleDefinition: ...


class StaticParticleTable:
    """In-memory particle table."""

    def __init__(self, definitions: Iterable[ParticleDefinition] = ()) -> None:
        self._definitions: dict[int, ParticleDefinition] = {}
        for definition in definitions:
            self.register(definition)

    @classmethod
    def with_defaults(cls) -> StaticParticleTable:
        return cls(
            ParticleDefinition(particle_id, name, mass, charge)
            for particle_id, (name, mass, charge) in DEFAULT_PARTICLES.items()
        )

    def register(self, definition: ParticleDefinition) -> None:
        LOGGER.debug("Registering particle %s (id=%d)", definition.name, definition.id)
        self._definitions[definition.id] = definition

    def find_particle(self, particle_id: int) -> ParticleDefinition:
        try:
            return self._definitions[particle_id]
        except KeyError:
            raise KeyError(f"Unknown particle id: {particle_id}") from None

    def __contains__(self, particle_id: object) -> bool:
        return particle_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)


_PARTICLE_TABLE: ParticleTable = StaticParticleTable.with_defaults()


def get_particle_table() -> ParticleTable:
    return _PARTICLE_TABLE


def set_particle_table(table: ParticleTable) -> ParticleTable:
    """Replace the process-wide particle table.

    Returns:
        The previously installed table.
    """
    global _PARTICLE_TABLE
    previous = _PARTICLE_TABLE
    _PARTICLE_TABLE = table
    LOGGER.debug("Installed particle table %s", type(table).__name__)
    return previous


def _particle_property(
    particle_id: int,
    getter: Callable[[ParticleDefinition], T],
    default: T,
    table: ParticleTable | None,
) -> T:
    if particle_id == NULL_PARTICLE_ID:
        return default
    table = get_particle_table() if table is None else table
    return getter(table.find_particle(particle_id))


def particle_mass(particle_id: int, table: ParticleTable | None = None) -> float:
    return _particle_property(particle_id, lambda definition: definition.mass, 0.0, table)


def particle_charge(particle_id: int, table: ParticleTable | None = None) -> float:
    return _particle_property(particle_id, lambda definition: definition.charge, 0.0, table)


def particle_name(particle_id: int, table: ParticleTable | None = None) -> str:
    return _particle_property(particle_id, lambda definition: definition.name, "", table)
