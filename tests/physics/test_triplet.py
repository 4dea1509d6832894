"""
Tests for conversions between Cartesian momentum and (pT, eta, phi).
"""

from __future__ import annotations

import math
import warnings

import numpy as np
import pandas as pd
import pytest

from mu_physics.data.schema import PseudoLorentzTriplet
from mu_physics.physics.triplet import (
    as_vector,
    momenta_from_triplets,
    to_triplet,
    to_vector,
    triplets_from_momenta,
    unit,
)


def test_concrete_three_four_zero():
    triplet = to_triplet((3.0, 4.0, 0.0))

    assert triplet.eta == pytest.approx(math.atanh(0.6))
    assert triplet.eta == pytest.approx(math.log(2.0))
    assert triplet.pT == pytest.approx(4.0)
    assert triplet.phi == pytest.approx(math.pi / 2)
    assert np.allclose(to_vector(triplet), [3.0, 4.0, 0.0], atol=1e-12)


def test_zero_vector_is_fixed_point():
    assert to_triplet(np.zeros(3)) == PseudoLorentzTriplet(0.0, 0.0, 0.0)
    assert np.array_equal(to_vector(PseudoLorentzTriplet()), np.zeros(3))


def test_default_triplet_is_zero():
    assert PseudoLorentzTriplet() == PseudoLorentzTriplet(pT=0.0, eta=0.0, phi=0.0)


def test_round_trip_random_vectors(rng):
    vectors = rng.normal(scale=50.0, size=(200, 3))
    for vector in vectors:
        assert np.allclose(to_vector(to_triplet(vector)), vector, rtol=1e-9, atol=1e-9)


@pytest.mark.parametrize(
    "vector",
    [
        (0.0, 1.0, 0.0),
        (0.0, 0.0, -1.0),
        (0.0, 0.0, 1.0),
        (-5.0, 0.0, 2.0),
        (1e-8, 3.0, -4.0),
        (10.0, 1.0, 1.0),
    ],
)
def test_round_trip_edge_directions(vector):
    assert np.allclose(to_vector(to_triplet(vector)), vector, rtol=1e-9, atol=1e-12)


def test_triplet_ranges(rng):
    for vector in rng.uniform(-10.0, 10.0, size=(100, 3)):
        triplet = to_triplet(vector)
        assert triplet.pT >= 0.0
        assert -math.pi <= triplet.phi <= math.pi


def test_pt_is_transverse_magnitude():
    triplet = to_triplet((7.0, 3.0, -4.0))
    assert triplet.pT == pytest.approx(5.0)


@pytest.mark.parametrize("sign", [1.0, -1.0])
def test_pure_longitudinal_momentum_has_infinite_eta(sign):
    triplet = to_triplet((sign * 2.5, 0.0, 0.0))

    assert triplet.eta == sign * math.inf
    assert triplet.pT == 0.0


def test_pure_longitudinal_triplet_does_not_round_trip():
    assert math.isnan(to_vector(to_triplet((2.0, 0.0, 0.0)))[0])


@pytest.mark.parametrize("vector", [(1.0, -0.0, 1.0), (0.0, -0.0, 3.0), (-2.0, 0.0, 1.0)])
def test_phi_on_negative_axis_is_positive_pi(vector):
    assert to_triplet(vector).phi == math.pi


def test_to_vector_overflow_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        vector = to_vector(PseudoLorentzTriplet(1.0, 1000.0, 0.0))

    assert vector[0] == math.inf
    assert np.allclose(vector[1:], [0.0, -1.0])


def test_negative_pt_flips_transverse_components():
    positive = to_vector(PseudoLorentzTriplet(2.0, 0.5, 0.3))
    negative = to_vector(PseudoLorentzTriplet(-2.0, 0.5, 0.3))

    assert np.allclose(negative, -positive)


def test_to_vector_accepts_any_triplet():
    vector = to_vector(PseudoLorentzTriplet(1.0, 0.0, 10.0))
    assert np.allclose(vector, [0.0, math.sin(10.0), -math.cos(10.0)])


def test_as_vector_rejects_wrong_length():
    with pytest.raises(ValueError, match="three components"):
        as_vector((1.0, 2.0))


def test_unit_of_zero_is_zero():
    zero = np.zeros(3)
    result = unit(zero)

    assert np.array_equal(result, zero)
    assert result is not zero


def test_unit_normalises():
    assert np.allclose(unit(np.array([0.0, 3.0, 4.0])), [0.0, 0.6, 0.8])


class TestFrameConversions:
    @pytest.fixture
    def momenta(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "px": [3.0, 0.0, 2.0, -1.0, 0.5],
                "py": [4.0, 0.0, 0.0, 2.0, -0.5],
                "pz": [0.0, 0.0, 0.0, -3.0, 7.0],
            },
            index=["a", "b", "c", "d", "e"],
        )

    def test_matches_scalar_conversion(self, momenta):
        result = triplets_from_momenta(momenta)

        assert list(result.columns) == ["pT", "eta", "phi"]
        assert result.index.equals(momenta.index)
        for name, row in momenta.iterrows():
            expected = to_triplet(row[["px", "py", "pz"]].to_numpy())
            assert np.allclose(
                result.loc[name].to_numpy(), [expected.pT, expected.eta, expected.phi]
            )

    def test_zero_and_longitudinal_rows(self, momenta):
        result = triplets_from_momenta(momenta)

        assert result.loc["b"].tolist() == [0.0, 0.0, 0.0]
        assert result.loc["c", "eta"] == np.inf
        assert result.loc["c", "pT"] == 0.0

    def test_round_trip(self, momenta):
        moving = momenta.drop(index=["b", "c"])
        result = momenta_from_triplets(triplets_from_momenta(moving))

        assert list(result.columns) == ["px", "py", "pz"]
        assert np.allclose(result.to_numpy(), moving.to_numpy(), atol=1e-12)

    def test_phi_folding_and_overflow(self):
        momenta = pd.DataFrame({"px": [1.0], "py": [-0.0], "pz": [1.0]})
        assert triplets_from_momenta(momenta)["phi"].tolist() == [math.pi]

        triplets = pd.DataFrame({"pT": [1.0], "eta": [1000.0], "phi": [0.0]})
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = momenta_from_triplets(triplets)
        assert result.loc[0, "px"] == math.inf

    def test_missing_columns(self):
        with pytest.raises(ValueError, match="pz"):
            triplets_from_momenta(pd.DataFrame({"px": [1.0], "py": [1.0]}))
        with pytest.raises(ValueError, match="phi"):
            momenta_from_triplets(pd.DataFrame({"pT": [1.0], "eta": [1.0]}))
