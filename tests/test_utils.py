"""Tests for neighbourhood queries and distance matrices."""

import numpy as np
import pytest

from dbscan_generic.clustering.utils import cluster_array, compute_distance_matrix, region_query
from dbscan_generic.data_processing.points import Point2D, make_points


class TestRegionQuery:
    """Brute-force neighbour scan."""

    def test_excludes_self_and_far_points(self, two_groups):
        neighbors = region_query(two_groups[0], two_groups, 2.0)

        assert neighbors == [two_groups[1], two_groups[2]]

    def test_excludes_entities_sharing_identity(self):
        points = [Point2D(0, 0.0, 0.0), Point2D(0, 0.5, 0.0), Point2D(1, 1.0, 0.0)]

        assert region_query(points[0], points, 2.0) == [points[2]]

    def test_key_extractor(self):
        values = [1.0, 1.5, 4.0]

        class Value:
            def __init__(self, v):
                self.v = v

            def distance(self, other):
                return abs(self.v - other.v)

        entities = [Value(v) for v in values]

        neighbors = region_query(entities[0], entities, 1.0, key=lambda e: e.v)

        assert neighbors == [entities[1]]


class TestDistanceMatrix:
    """Pairwise distance matrices."""

    def test_euclidean(self):
        matrix = compute_distance_matrix(np.array([[0.0, 0.0], [3.0, 4.0]]))

        np.testing.assert_allclose(matrix, [[0.0, 5.0], [5.0, 0.0]])

    def test_manhattan(self):
        matrix = compute_distance_matrix(np.array([[0, 0], [3, -4]]), metric='manhattan')

        np.testing.assert_allclose(matrix, [[0.0, 7.0], [7.0, 0.0]])

    def test_haversine(self):
        matrix = compute_distance_matrix(np.array([[0.0, 0.0], [1.0, 0.0]]), metric='haversine')

        assert matrix[0, 1] == pytest.approx(111195, rel=1e-4)
        assert matrix[1, 0] == matrix[0, 1]
        assert matrix[0, 0] == 0.0

    def test_unsupported_metric(self):
        with pytest.raises(ValueError, match="Unsupported metric"):
            compute_distance_matrix(np.zeros((2, 2)), metric='cosine')

    def test_rejects_1d_input(self):
        with pytest.raises(ValueError):
            compute_distance_matrix(np.zeros(3))

    def test_haversine_needs_two_columns(self):
        with pytest.raises(ValueError):
            compute_distance_matrix(np.zeros((2, 3)), metric='haversine')


class TestClusterArray:
    """Clustering array rows through the generic engine."""

    def test_matches_entity_clustering(self):
        coords = [(0, 0), (1, 0), (0, -1), (3, 5), (4, 5), (5, 5), (-1, 4)]

        dbscan = cluster_array(np.array(coords, dtype=float), eps=2.0, min_pts=1)
        reference = [0 if p.id < 3 else 1 if p.id < 6 else -1
                     for p in make_points(coords)]

        np.testing.assert_array_equal(dbscan.labels_, reference)

    def test_empty_array(self):
        dbscan = cluster_array(np.zeros((0, 2)), eps=1.0, min_pts=1)

        assert len(dbscan.labels_) == 0
        assert dbscan.get_cluster_stats()['n_clusters'] == 0
