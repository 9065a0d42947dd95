"""Tests for continuous and classed domains."""

import dataclasses

import numpy as np
import pytest

from rgb_scale.core.domain import ClassedDomain, ContinuousDomain, make_domain


class TestMakeDomain:
    def test_two_breakpoints_continuous(self):
        domain = make_domain([0, 100])
        assert domain == ContinuousDomain(0.0, 100.0)

    def test_more_breakpoints_classed(self):
        domain = make_domain([0, 10, 20])
        assert domain == ClassedDomain((0.0, 10.0, 20.0))
        assert domain.num_classes == 2

    def test_numpy_breakpoints(self):
        domain = make_domain(np.array([0, 5, 10, 15]))
        assert isinstance(domain, ClassedDomain)
        assert domain.breakpoints == (0.0, 5.0, 10.0, 15.0)

    @pytest.mark.parametrize("bad", [None, 435, "ab", [], [1], [0, "a"], [0, True]])
    def test_invalid(self, bad):
        assert make_domain(bad) is None


class TestContinuousDomain:
    def test_fraction(self):
        domain = ContinuousDomain(0.0, 100.0)
        assert domain.fraction(25) == 0.25

    def test_fraction_clamped(self):
        domain = ContinuousDomain(0.0, 100.0)
        assert domain.fraction(-5) == 0.0
        assert domain.fraction(500) == 1.0

    def test_reversed_range(self):
        domain = ContinuousDomain(100.0, 0.0)
        assert domain.fraction(25) == 0.75

    def test_equal_min_max(self):
        assert ContinuousDomain(5.0, 5.0).fraction(5) == 0.0

    def test_no_classes(self):
        domain = ContinuousDomain(0.0, 1.0)
        assert domain.num_classes == 0
        assert domain.breakpoints == (0.0, 1.0)

    def test_frozen(self):
        domain = ContinuousDomain(0.0, 1.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            domain.min = 2.0


class TestClassedDomain:
    EDGES = (0.0, 10.0, 20.0, 30.0)

    def test_min_max(self):
        domain = ClassedDomain(self.EDGES)
        assert domain.min == 0.0
        assert domain.max == 30.0
        assert domain.num_classes == 3

    def test_edge_is_left_inclusive(self):
        domain = ClassedDomain(self.EDGES)
        assert domain.get_class(10) == 1
        assert domain.get_class(9.999) == 0

    def test_out_of_range_classes(self):
        domain = ClassedDomain(self.EDGES)
        assert domain.get_class(-1) == -1
        assert domain.get_class(30) == 3

    def test_fraction_unclamped(self):
        domain = ClassedDomain(self.EDGES)
        assert domain.fraction(-1) == -0.5
        assert domain.fraction(0) == 0.0
        assert domain.fraction(15) == 0.5
        assert domain.fraction(25) == 1.0
        assert domain.fraction(31) == 1.5
