"""
Common pytest fixtures for kinematics tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np
import pytest

from mu_physics.physics.properties import (
    ParticleDefinition,
    StaticParticleTable,
    get_particle_table,
    set_particle_table,
)

# Configure logging for tests
logging.getLogger("mu_physics").setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_particle_table() -> Iterator[None]:
    """Put the process-wide particle table back after each test."""
    table = get_particle_table()
    yield
    set_particle_table(table)


@pytest.fixture
def toy_table() -> StaticParticleTable:
    """A small table with made-up species, distinct from the defaults."""
    return StaticParticleTable(
        [
            ParticleDefinition(1, "heavy", 1000.0, 2.0),
            ParticleDefinition(2, "light", 1.5, -1.0),
        ]
    )


@pytest.fixture(scope="session")
def rng() -> np.random.Generator:
    return np.random.default_rng(20180601)
