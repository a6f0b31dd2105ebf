"""Pytest configuration and shared fixtures."""

import matplotlib
import pytest

from dbscan_generic.data_processing.points import make_points

matplotlib.use("Agg")

TIGHT_GROUP = [(0.0, 0.0), (1.0, 0.0), (0.0, -1.0)]
SECOND_GROUP = [(3.0, 5.0), (4.0, 5.0), (5.0, 5.0)]
ISOLATED = [(-1.0, 4.0)]


@pytest.fixture
def tight_group():
    """Three mutually close points."""
    return make_points(TIGHT_GROUP)


@pytest.fixture
def two_groups():
    """Two tight groups farther apart than eps=2."""
    return make_points(TIGHT_GROUP + SECOND_GROUP)


@pytest.fixture
def two_groups_and_outlier():
    """Two tight groups plus one isolated point."""
    return make_points(TIGHT_GROUP + SECOND_GROUP + ISOLATED)
