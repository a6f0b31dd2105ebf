"""
Clustering results
Read-only view over the label assignment produced by the DBSCAN engine
"""

from collections import defaultdict
from types import MappingProxyType
from typing import Any, Callable, Dict, Hashable, Iterator, List, Mapping, Optional, Set, Tuple

# Label reserved for noise; cluster ids start at 0
NOISE = -1


class ClusterResults:
    """Label assignment grouped into clusters and noise"""

    def __init__(self, labels: Dict[Hashable, int], entities: Dict[Hashable, Any],
                 core_keys: Optional[Set[Hashable]] = None,
                 key: Optional[Callable[[Any], Hashable]] = None):
        """
        Wrap a finished label assignment

        Args:
            labels: identity -> cluster id (or NOISE) for every input entity
            entities: identity -> entity
            core_keys: identities of the core points found during the run
            key: identity extractor used for the run, None when entities are
                their own identity
        """
        self._labels = labels
        self._entities = entities
        self._core_keys = frozenset(core_keys or ())
        self._key = key

    def _identity(self, entity: Any) -> Hashable:
        return entity if self._key is None else self._key(entity)

    @property
    def labels(self) -> Mapping[Hashable, int]:
        """Identity -> label mapping (read-only)"""
        return MappingProxyType(self._labels)

    @property
    def n_clusters(self) -> int:
        return len({label for label in self._labels.values() if label != NOISE})

    def label_of(self, entity: Any) -> int:
        """
        Label assigned to an entity

        Args:
            entity: one of the clustered entities

        Returns:
            cluster id, or NOISE

        Raises:
            KeyError: the entity was not part of the input
        """
        return self._labels[self._identity(entity)]

    def grouped(self) -> Dict[Optional[int], List[Any]]:
        """
        Entities grouped by cluster id, noise collected under the ``None`` key

        Returns:
            dictionary mapping cluster id (or None) to its entities
        """
        groups = defaultdict(list)
        for identity, label in self._labels.items():
            groups[None if label == NOISE else label].append(self._entities[identity])
        return dict(groups)

    def clusters(self) -> List[List[Any]]:
        """
        Entities grouped by cluster

        Order of clusters and of entities inside a cluster is not meaningful.

        Returns:
            one list of entities per cluster
        """
        return [members for label, members in self.grouped().items() if label is not None]

    def noise(self) -> List[Any]:
        """
        Entities that did not join any cluster

        Returns:
            list of noise entities
        """
        return [self._entities[identity]
                for identity, label in self._labels.items() if label == NOISE]

    def core_points(self) -> List[Any]:
        """Entities that had enough neighbours to grow a cluster"""
        return [self._entities[identity] for identity in self._labels
                if identity in self._core_keys]

    def cluster_sizes(self) -> Dict[int, int]:
        sizes = defaultdict(int)
        for label in self._labels.values():
            if label != NOISE:
                sizes[label] += 1
        return dict(sizes)

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        for identity, label in self._labels.items():
            yield self._entities[identity], label

    def __repr__(self) -> str:
        return (f"ClusterResults(n_entities={len(self)}, n_clusters={self.n_clusters}, "
                f"n_noise={len(self.noise())})")
