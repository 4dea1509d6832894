"""Configuration constants for kinematic conversions and particle lookups."""

from __future__ import annotations

import numpy as np

# Pi carried at extended precision for polar-angle arithmetic.
PI_LONG = np.longdouble("3.1415926535897932384626")

# Sentinel particle id meaning "no particle / unknown".
NULL_PARTICLE_ID = 0

# Default particle definitions: id -> (name, mass [MeV], charge [e]).
DEFAULT_PARTICLES: dict[int, tuple[str, float, float]] = {
    11: ("e-", 0.51099895, -1.0),
    -11: ("e+", 0.51099895, 1.0),
    13: ("mu-", 105.6583755, -1.0),
    -13: ("mu+", 105.6583755, 1.0),
    22: ("gamma", 0.0, 0.0),
    211: ("pi+", 139.57039, 1.0),
    -211: ("pi-", 139.57039, -1.0),
    111: ("pi0", 134.9768, 0.0),
    321: ("kaon+", 493.677, 1.0),
    -321: ("kaon-", 493.677, -1.0),
    2112: ("neutron", 939.56542052, 0.0),
    2212: ("proton", 938.27208816, 1.0),
    -2212: ("anti_proton", 938.27208816, -1.0),
}

# Global schema constant for particle table files.
PARTICLE_COLUMNS: tuple[str, ...] = (
    "id",
    "t",
    "x",
    "y",
    "z",
    "px",
    "py",
    "pz",
)
