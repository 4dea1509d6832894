from dataclasses import dataclass

# Frame columns for particle ids, momenta, vertices and triplets
CORE_ID_COLS = ("id",)
CORE_MOM_COLS = ("px", "py", "pz")
CORE_VERTEX_COLS = ("t", "x", "y", "z")
TRIPLET_COLS = ("pT", "eta", "phi")


@dataclass(frozen=True)
class PseudoLorentzTriplet:
    """Transverse momentum, pseudorapidity and azimuth of a momentum.

    The longitudinal axis is the first Cartesian coordinate.
    """

    pT: float = 0.0
    eta: float = 0.0
    phi: float = 0.0
