"""
Tabular input and output of particle lists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pandas as pd
import tfs

from mu_physics.data.config import PARTICLE_COLUMNS
from mu_physics.data.schema import CORE_ID_COLS, CORE_MOM_COLS, CORE_VERTEX_COLS
from mu_physics.particle import Particle

if TYPE_CHECKING:  # pragma: no cover - typing helpers only
    from collections.abc import Iterable
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


def particles_to_frame(particles: Iterable[Particle]) -> pd.DataFrame:
    rows = [
        {
            "id": particle.id,
            "t": particle.t,
            "x": particle.x,
            "y": particle.y,
            "z": particle.z,
            "px": particle.px,
            "py": particle.py,
            "pz": particle.pz,
        }
        for particle in particles
    ]
    frame = pd.DataFrame(rows, columns=list(PARTICLE_COLUMNS))
    frame["id"] = frame["id"].astype(int)
    LOGGER.debug("Built particle frame with %d rows", len(frame))
    return frame


def particles_from_frame(frame: pd.DataFrame) -> list[Particle]:
    """Build particles from a frame with ``id, px, py, pz`` and optional vertex columns.

    Raises:
        ValueError: If the id or momentum columns are missing.
    """
    missing = set(CORE_ID_COLS + CORE_MOM_COLS).difference(frame.columns)
    if missing:
        raise ValueError(f"Missing required column(s): {sorted(missing)}")

    data = frame.copy()
    for col in CORE_VERTEX_COLS:
        if col not in data.columns:
            data[col] = 0.0

    particles = [
        Particle(
            int(row.id),
            float(row.px),
            float(row.py),
            float(row.pz),
            float(row.t),
            float(row.x),
            float(row.y),
            float(row.z),
        )
        for row in data.itertuples(index=False)
    ]
    LOGGER.debug("Read %d particles from frame", len(particles))
    return particles


def write_particles(file_path: Path | str, particles: Iterable[Particle]) -> None:
    frame = tfs.TfsDataFrame(particles_to_frame(particles))
    tfs.write(file_path, frame)
    LOGGER.info("Wrote %d particles to %s", len(frame), file_path)


def read_particles(file_path: Path | str) -> list[Particle]:
    frame = tfs.read(file_path)
    LOGGER.info("Loaded %d particle rows from %s", len(frame), file_path)
    return particles_from_frame(frame)
