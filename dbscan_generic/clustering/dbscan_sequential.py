"""
Sequential DBSCAN
Density-based clustering over any entity type that can measure distances
"""

import logging
import numbers
import time
import warnings
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Set

import numpy as np

from .results import NOISE, ClusterResults
from .utils import region_query

logger = logging.getLogger(__name__)


def cluster(entities: Iterable[Any], epsilon: Any, min_pts: int,
            key: Optional[Callable[[Any], Hashable]] = None) -> ClusterResults:
    """
    Run DBSCAN over a collection of entities

    A point is a core point when it has more than ``min_pts`` neighbours
    (the point itself is not counted). Points that are not core points and
    are not within ``epsilon`` of one end up as noise. A border point joins
    the first cluster that reaches it and is never moved afterwards.

    Args:
        entities: entities supporting ``distance`` (see proximity.Proximity)
        epsilon: neighbourhood radius (inclusive), not validated
        min_pts: neighbour count a point must exceed to seed a cluster
        key: identity extractor; entities are their own identity when None

    Returns:
        ClusterResults with a label for every entity
    """
    entities = list(entities)
    identity = (lambda entity: entity) if key is None else key

    # None means not visited yet
    labels: Dict[Hashable, Optional[int]] = {}
    members: Dict[Hashable, Any] = {}
    for entity in entities:
        entity_key = identity(entity)
        if entity_key in labels:
            warnings.warn(f"Duplicate entity identity {entity_key!r}; the last occurrence wins")
        labels[entity_key] = None
        members[entity_key] = entity

    core_keys: Set[Hashable] = set()
    cluster_id = 0

    for entity in entities:
        entity_key = identity(entity)
        if labels[entity_key] is not None:
            continue

        neighbors = region_query(entity, entities, epsilon, key)

        if len(neighbors) <= min_pts:
            labels[entity_key] = NOISE
            continue

        # Core point found, open a new cluster
        labels[entity_key] = cluster_id
        core_keys.add(entity_key)
        logger.debug("Cluster %d seeded by %r with %d neighbours",
                     cluster_id, entity_key, len(neighbors))

        _expand_cluster(entities, labels, core_keys, neighbors, cluster_id,
                        epsilon, min_pts, key, identity)

        cluster_id += 1

    return ClusterResults(labels, members, core_keys, key)


def _expand_cluster(entities: Sequence[Any], labels: Dict[Hashable, Optional[int]],
                    core_keys: Set[Hashable], seeds: List[Any], cluster_id: int,
                    epsilon: Any, min_pts: int,
                    key: Optional[Callable[[Any], Hashable]],
                    identity: Callable[[Any], Hashable]) -> None:
    """
    Grow a cluster from the neighbours of its seeding core point

    ``seeds`` is appended to while it is walked, so the walk uses an index
    cursor rather than an iterator.

    Args:
        entities: all entities being clustered
        labels: label assignment, updated in place
        core_keys: identities of core points, updated in place
        seeds: neighbours of the seeding core point
        cluster_id: id of the cluster being grown
        epsilon: neighbourhood radius
        min_pts: core point threshold
        key: identity extractor passed through to region_query
        identity: identity extractor, never None
    """
    queued = {identity(seed) for seed in seeds}

    i = 0
    while i < len(seeds):
        point = seeds[i]
        point_key = identity(point)
        i += 1

        label = labels[point_key]

        if label == NOISE:
            # Border point: joins the cluster but does not extend it
            labels[point_key] = cluster_id
            continue

        if label is not None:
            continue

        labels[point_key] = cluster_id

        neighbors = region_query(point, entities, epsilon, key)
        if len(neighbors) <= min_pts:
            continue

        core_keys.add(point_key)
        for neighbor in neighbors:
            neighbor_key = identity(neighbor)
            if neighbor_key in queued:
                continue
            neighbor_label = labels[neighbor_key]
            if neighbor_label is None or neighbor_label == NOISE:
                seeds.append(neighbor)
                queued.add(neighbor_key)


class DBSCANSequential:
    """Sequential DBSCAN estimator over generic entities"""

    def __init__(self, eps: Any, min_pts: int = 1,
                 key: Optional[Callable[[Any], Hashable]] = None):
        """
        Set up the DBSCAN parameters

        Args:
            eps: neighbourhood radius, same domain as the entities' distance
            min_pts: core points have strictly more than ``min_pts`` neighbours
            key: identity extractor, entities are their own identity when None
        """
        if isinstance(min_pts, bool) or not isinstance(min_pts, numbers.Integral):
            raise ValueError(f"min_pts must be an integer, got {min_pts!r}")
        if min_pts < 0:
            raise ValueError(f"min_pts must be non-negative, got {min_pts}")

        self.eps = eps
        self.min_pts = int(min_pts)
        self.key = key

        self.results_: Optional[ClusterResults] = None
        self.labels_ = None
        self.core_sample_indices_ = None
        self.execution_time = 0

    def cluster(self, entities: Sequence[Any]) -> ClusterResults:
        """
        Cluster the entities and return the result view

        Args:
            entities: entities to cluster

        Returns:
            ClusterResults for this run
        """
        return self.fit(entities).results_

    def fit(self, entities: Sequence[Any]) -> 'DBSCANSequential':
        """
        Run DBSCAN and keep the fitted attributes

        Args:
            entities: entities to cluster

        Returns:
            self
        """
        start_time = time.time()

        entities = list(entities)
        results = cluster(entities, self.eps, self.min_pts, self.key)

        identity = (lambda entity: entity) if self.key is None else self.key
        labels = results.labels
        core_keys = {identity(entity) for entity in results.core_points()}

        self.results_ = results
        self.labels_ = np.array([labels[identity(entity)] for entity in entities], dtype=np.int32)
        self.core_sample_indices_ = np.array(
            [i for i, entity in enumerate(entities) if identity(entity) in core_keys],
            dtype=np.int32
        )
        self.execution_time = time.time() - start_time

        logger.info("DBSCAN over %d entities: %d clusters, %d noise (%.4fs)",
                    len(entities), results.n_clusters, len(results.noise()),
                    self.execution_time)

        return self

    def clusters(self) -> List[List[Any]]:
        return self._fitted().clusters()

    def noise(self) -> List[Any]:
        return self._fitted().noise()

    def _fitted(self) -> ClusterResults:
        if self.results_ is None:
            raise RuntimeError("DBSCANSequential is not fitted yet; call fit() first")
        return self.results_

    def get_cluster_stats(self) -> dict:
        """
        Summary statistics of the last run

        Returns:
            dictionary with n_clusters, n_noise, n_core_points,
            execution_time and cluster_sizes; empty before fit()
        """
        if self.results_ is None:
            return {}

        return {
            'n_clusters': self.results_.n_clusters,
            'n_noise': len(self.results_.noise()),
            'n_core_points': len(self.results_.core_points()),
            'execution_time': self.execution_time,
            'cluster_sizes': self.results_.cluster_sizes()
        }
