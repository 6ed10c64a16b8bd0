"""Tests for entropy calculation functions."""

import numpy as np
import pytest
import scipy.stats
from infodisc.information.density import prob, prob2d, prob_joint
from infodisc.information.entropy import (
    _clip_rounding,
    resolve_log_base,
    validate_probability,
    entropy,
    joint_entropy,
    conditional_entropy,
)
from infodisc.information.errors import InvalidProbability


def test_entropy():
    """Test entropy against closed-form values."""
    # Entropy[{0, 0, 1, 1}]
    assert entropy(np.array([0.5, 0.5])) == pytest.approx(0.6931471805599453, abs=1e-15)

    # Entropy[{0, 0, 1, 1, 2, 2}]
    assert entropy(np.full(3, 1.0 / 3.0)) == pytest.approx(1.0986122886681096, abs=1e-14)

    # Entropy[{0, 0, 1, 1, 2, 2, 3, 3}]
    assert entropy(np.full(4, 0.25)) == pytest.approx(1.3862943611198906, abs=1e-14)


def test_entropy_uniform_four_categories():
    """100 samples of each of 4 categories give log(4) in every base."""
    x = np.repeat(np.arange(4), 100)
    p_x = prob(x, 4)
    assert abs(entropy(p_x) - np.log(4)) < 1e-12
    assert abs(entropy(p_x, base="base2") - 2.0) < 1e-12
    assert abs(entropy(p_x, base="base10") - np.log10(4)) < 1e-12


def test_entropy_point_mass():
    """Entropy is zero for a point mass and positive otherwise."""
    assert entropy([0.0, 1.0, 0.0]) == 0.0
    assert entropy([1.0]) == 0.0
    assert entropy([0.999, 0.001]) > 0


def test_entropy_zero_cells_ignored():
    """Zero cells contribute nothing and never produce NaN."""
    h = entropy([0.5, 0.5, 0.0, 0.0])
    assert np.isfinite(h)
    assert abs(h - np.log(2)) < 1e-15


def test_entropy_nonnegative():
    rng = np.random.RandomState(5)
    for _ in range(100):
        c = rng.uniform(0.0, 1.0, size=rng.randint(1, 20))
        p = c / c.sum()
        assert entropy(p) >= 0
        assert entropy(p, base="base2") >= 0


def test_entropy_matches_scipy():
    rng = np.random.RandomState(6)
    for _ in range(20):
        c = rng.uniform(0.0, 1.0, size=10)
        c[rng.randint(10)] = 0.0
        p = c / c.sum()
        assert abs(entropy(p) - scipy.stats.entropy(p)) < 1e-12
        assert abs(entropy(p, base=2) - scipy.stats.entropy(p, base=2)) < 1e-12
        assert abs(entropy(p, base=10) - scipy.stats.entropy(p, base=10)) < 1e-12


def test_entropy_invalid_sum():
    """[0.3, 0.3, 0.3] sums to 0.9 and is rejected."""
    with pytest.raises(InvalidProbability):
        entropy([0.3, 0.3, 0.3])


def test_entropy_rejects_joint_array():
    with pytest.raises(InvalidProbability):
        entropy(np.full((2, 2), 0.25))


class TestValidateProbability:
    """Test probability array validation."""

    def test_valid(self):
        arr = validate_probability([0.2, 0.8])
        assert arr.dtype == np.float64
        assert np.array_equal(arr, [0.2, 0.8])

    def test_integer_point_mass(self):
        assert np.array_equal(validate_probability([0, 1]), [0.0, 1.0])

    def test_negative_entry(self):
        with pytest.raises(InvalidProbability, match="negative"):
            validate_probability([1.2, -0.2])

    def test_bad_sum(self):
        with pytest.raises(InvalidProbability, match="sum to 1"):
            validate_probability([0.5, 0.6])
        with pytest.raises(InvalidProbability):
            validate_probability(np.zeros((2, 2)))

    def test_tolerance(self):
        validate_probability([0.5, 0.5 + 5e-7])
        with pytest.raises(InvalidProbability):
            validate_probability([0.5, 0.5 + 2e-6])
        validate_probability([0.5, 0.5 + 2e-6], atol=1e-5)

    def test_non_finite(self):
        with pytest.raises(InvalidProbability):
            validate_probability([np.nan, 1.0])
        with pytest.raises(InvalidProbability):
            validate_probability([np.inf, 0.0])

    def test_shape_checks(self):
        with pytest.raises(InvalidProbability):
            validate_probability(1.0)
        with pytest.raises(InvalidProbability):
            validate_probability([])
        with pytest.raises(InvalidProbability, match="2-D"):
            validate_probability([0.5, 0.5], ndim=2)

    def test_non_numeric(self):
        with pytest.raises(InvalidProbability):
            validate_probability(["a", "b"])

    def test_name_in_message(self):
        with pytest.raises(InvalidProbability, match="p_xy"):
            validate_probability([0.1], name="p_xy")


class TestLogBase:
    """Test log base option handling."""

    def test_recognized_options(self):
        for option in ("natural", "e", "nats", None, np.e):
            assert resolve_log_base(option) == np.e
        for option in ("base2", "bits", 2, 2.0, "BASE2"):
            assert resolve_log_base(option) == 2.0
        for option in ("base10", "bans", 10, np.int64(10)):
            assert resolve_log_base(option) == 10.0

    def test_unrecognized_options(self):
        for option in ("base3", 3, 1, 0, True, [2]):
            with pytest.raises(ValueError):
                resolve_log_base(option)

    def test_metrics_reject_bad_base(self):
        with pytest.raises(ValueError):
            entropy([0.5, 0.5], base="log7")

    def test_unit_conversion(self):
        p = [0.1, 0.2, 0.3, 0.4]
        h_nats = entropy(p)
        assert abs(entropy(p, base="base2") - h_nats / np.log(2)) < 1e-14
        assert abs(entropy(p, base="base10") - h_nats / np.log(10)) < 1e-14


class TestJointEntropy:
    """Test joint entropy over arbitrary dimensionality."""

    def test_known_value(self):
        p_xy = np.array([[0.5, 0.0], [0.25, 0.25]])
        assert abs(joint_entropy(p_xy) - 1.0397207708399179) < 1e-14

    def test_1d_matches_entropy(self):
        rng = np.random.RandomState(8)
        c = rng.uniform(0.1, 0.8, 100)
        p = c / c.sum()
        assert abs(joint_entropy(p) - entropy(p)) < 1e-12

    def test_nonnegative_any_dimension(self):
        rng = np.random.RandomState(9)
        for shape in [(2, 100), (2, 2, 100), (2, 2, 2, 10)]:
            c = rng.uniform(0.1, 0.8, size=shape)
            assert joint_entropy(c / c.sum()) >= 0

    def test_uniform_joint(self):
        p = np.full((2, 3, 4), 1.0 / 24)
        assert abs(joint_entropy(p, base="base2") - np.log2(24)) < 1e-12

    def test_bounds_by_marginals(self, label_pairs):
        """max(H(X), H(Y)) <= H(X,Y) <= H(X) + H(Y)."""
        for x, y in label_pairs:
            p_xy = prob2d(x, y, 4, 4)
            h_xy = joint_entropy(p_xy)
            h_x = entropy(prob(x, 4))
            h_y = entropy(prob(y, 4))
            assert h_xy >= h_x - 1e-12
            assert h_xy >= h_y - 1e-12
            assert h_xy <= h_x + h_y + 1e-12

    def test_invalid(self):
        with pytest.raises(InvalidProbability):
            joint_entropy(np.full((2, 2), 0.3))


class TestConditionalEntropy:
    """Test conditional entropy H(X|Y)."""

    def test_known_value(self):
        p_xy = np.array([[0.5, 0.0], [0.25, 0.25]])
        assert abs(conditional_entropy(p_xy) - 0.4773856262211097) < 1e-12

    def test_all_mass_one_cell(self):
        assert conditional_entropy([[0.0, 0.0], [0.0, 1.0]]) == 0.0

    def test_correlated(self, correlated_binary):
        """X fully determined by Y leaves no uncertainty."""
        x, y = correlated_binary
        p_xy = prob_joint([x, y], [2, 2])
        assert abs(conditional_entropy(p_xy)) < 1e-12

    def test_independent(self):
        p_x = np.array([0.2, 0.3, 0.5])
        p_y = np.array([0.6, 0.4])
        p_xy = np.outer(p_x, p_y)
        assert abs(conditional_entropy(p_xy) - entropy(p_x)) < 1e-12

    def test_chain_rule(self, label_pairs):
        """H(X,Y) = H(X|Y) + H(Y) and H(X,Y) = H(Y|X) + H(X)."""
        for x, y in label_pairs:
            p_xy = prob2d(x, y, 4, 4)
            p_yx = prob2d(y, x, 4, 4)
            h_xy = joint_entropy(p_xy)
            h_x = entropy(prob(x, 4))
            h_y = entropy(prob(y, 4))

            assert abs(h_xy - (conditional_entropy(p_xy) + h_y)) < 1e-12
            assert abs(h_xy - (conditional_entropy(p_yx) + h_x)) < 1e-12
            # Marginal taken from the joint array itself
            assert abs(h_xy - (conditional_entropy(p_xy) + entropy(p_xy.sum(axis=0)))) < 1e-12

    def test_bayes_rule(self, label_pairs):
        """H(Y|X) = H(X|Y) - H(X) + H(Y)."""
        for x, y in label_pairs:
            p_xy = prob2d(x, y, 4, 4)
            p_yx = prob2d(y, x, 4, 4)
            h_x = entropy(prob(x, 4))
            h_y = entropy(prob(y, 4))
            assert abs(conditional_entropy(p_yx) - (conditional_entropy(p_xy) - h_x + h_y)) < 1e-12

    def test_requires_2d(self):
        with pytest.raises(InvalidProbability):
            conditional_entropy([0.5, 0.5])
        with pytest.raises(InvalidProbability):
            conditional_entropy(np.full((2, 2, 2), 0.125))

    def test_base2(self):
        p_xy = np.array([[0.25, 0.25], [0.25, 0.25]])
        assert abs(conditional_entropy(p_xy, base="base2") - 1.0) < 1e-12


def test_clip_rounding():
    assert _clip_rounding(0.25, "H") == 0.25
    assert _clip_rounding(-1e-12, "H") == 0.0
    with pytest.raises(InvalidProbability):
        _clip_rounding(-1e-3, "H")


def test_entropy_cell_above_one_within_tolerance():
    """A cell slightly above 1, accepted by the sum check, yields 0 rather than a negative value."""
    h = entropy([1.0000009, 0.0])
    assert h >= 0.0
    assert h == 0.0
    h_joint = joint_entropy([[1.0000009, 0.0], [0.0, 0.0]])
    assert h_joint >= 0.0
    assert h_joint == 0.0


def test_validate_probability_rejects_complex():
    with pytest.raises(InvalidProbability, match="real-valued"):
        validate_probability(np.array([0.5 + 0.1j, 0.5 - 0.1j]))
    with pytest.raises(InvalidProbability):
        entropy(np.array([1.0 + 0j, 0.0 + 0j]))
