"""Tests for the ClusterResults view."""

import pytest

from dbscan_generic.clustering.dbscan_sequential import cluster
from dbscan_generic.clustering.results import NOISE, ClusterResults
from dbscan_generic.data_processing.points import Point2D


@pytest.fixture
def results(two_groups_and_outlier):
    return cluster(two_groups_and_outlier, 2.0, 1)


class TestClusterResults:
    """Projections over a finished label assignment."""

    def test_clusters_and_noise_partition_input(self, results, two_groups_and_outlier):
        clustered = [entity for members in results.clusters() for entity in members]

        assert sorted(p.id for p in clustered + results.noise()) == \
            sorted(p.id for p in two_groups_and_outlier)

    def test_projections_are_repeatable(self, results):
        first = {frozenset(members) for members in results.clusters()}
        second = {frozenset(members) for members in results.clusters()}

        assert first == second
        assert results.noise() == results.noise()

    def test_grouped_uses_none_for_noise(self, results, two_groups_and_outlier):
        grouped = results.grouped()

        assert set(grouped) == {0, 1, None}
        assert grouped[None] == [two_groups_and_outlier[-1]]
        assert set(grouped[0]) == set(two_groups_and_outlier[:3])

    def test_label_of_unknown_entity(self, results):
        with pytest.raises(KeyError):
            results.label_of(Point2D(99, 0.0, 0.0))

    def test_labels_are_read_only(self, results):
        with pytest.raises(TypeError):
            results.labels[Point2D(0, 0.0, 0.0)] = 5

    def test_iteration_and_size(self, results, two_groups_and_outlier):
        pairs = dict(results)

        assert len(results) == 7
        assert pairs[two_groups_and_outlier[-1]] == NOISE
        assert pairs[two_groups_and_outlier[4]] == 1

    def test_counts(self, results):
        assert results.n_clusters == 2
        assert results.cluster_sizes() == {0: 3, 1: 3}
        assert len(results.core_points()) == 6
        assert "n_clusters=2" in repr(results)

    def test_key_extractor_lookup(self):
        labels = {'a': 0, 'b': NOISE}
        entities = {'a': {'name': 'a'}, 'b': {'name': 'b'}}

        view = ClusterResults(labels, entities, key=lambda entity: entity['name'])

        assert view.label_of({'name': 'b'}) == NOISE
        assert view.clusters() == [[{'name': 'a'}]]
        assert view.noise() == [{'name': 'b'}]
        assert view.core_points() == []
