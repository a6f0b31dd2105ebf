"""
Clustering helpers
Neighbourhood queries and distance matrices shared by the DBSCAN engine
"""

import math
from typing import Any, Callable, Hashable, List, Optional, Sequence

import numpy as np
from numba import jit, prange

from .proximity import EARTH_RADIUS_M, is_near


def region_query(entity: Any, entities: Sequence[Any], eps: Any,
                 key: Optional[Callable[[Any], Hashable]] = None) -> List[Any]:
    """
    Find every other entity within ``eps`` of ``entity``

    Brute-force scan over the whole collection. The entity itself (and any
    entity sharing its identity) is never part of its own neighbourhood.

    Args:
        entity: query entity
        entities: all entities being clustered
        eps: neighbourhood radius (inclusive)
        key: identity extractor, None when entities are their own identity

    Returns:
        neighbours in input order
    """
    if key is None:
        return [other for other in entities
                if other != entity and is_near(entity, other, eps)]

    identity = key(entity)
    return [other for other in entities
            if key(other) != identity and is_near(entity, other, eps)]


def compute_distance_matrix(points: np.ndarray, metric: str = 'euclidean') -> np.ndarray:
    """
    Pairwise distance matrix

    Args:
        points: array of shape (n_samples, n_features); for 'haversine' each
            row is [latitude, longitude] in degrees
        metric: 'euclidean', 'manhattan' or 'haversine'

    Returns:
        matrix of shape (n_samples, n_samples)
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2:
        raise ValueError(f"points must be a 2D array, got shape {points.shape}")

    if metric == 'euclidean':
        diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
        return np.sqrt(np.sum(diff ** 2, axis=2))

    elif metric == 'manhattan':
        diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
        return np.sum(np.abs(diff), axis=2)

    elif metric == 'haversine':
        if points.shape[1] != 2:
            raise ValueError("haversine metric needs [latitude, longitude] rows")
        return _haversine_distance_matrix(points)

    else:
        raise ValueError(f"Unsupported metric: {metric}")


@jit(nopython=True, parallel=True)
def _haversine_distance_matrix(points: np.ndarray) -> np.ndarray:
    n_samples = points.shape[0]
    distance_matrix = np.zeros((n_samples, n_samples))

    lat_rad = np.radians(points[:, 0])
    lon_rad = np.radians(points[:, 1])

    for i in prange(n_samples):
        for j in range(i + 1, n_samples):
            dlon = lon_rad[j] - lon_rad[i]
            dlat = lat_rad[j] - lat_rad[i]

            a = math.sin(dlat / 2) ** 2 + math.cos(lat_rad[i]) * math.cos(lat_rad[j]) * math.sin(dlon / 2) ** 2
            c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
            distance = EARTH_RADIUS_M * c

            distance_matrix[i, j] = distance
            distance_matrix[j, i] = distance

    return distance_matrix


def cluster_array(points: np.ndarray, eps: float, min_pts: int,
                  metric: str = 'euclidean'):
    """
    Cluster the rows of a numeric array

    The distances are computed once up front; every row is then wrapped in a
    MatrixPoint so the generic engine can run over it.

    Args:
        points: array of shape (n_samples, n_features)
        eps: neighbourhood radius
        min_pts: neighbour count a point must exceed to be a core point
        metric: see compute_distance_matrix

    Returns:
        fitted DBSCANSequential; ``labels_`` follows the row order
    """
    from ..data_processing.points import MatrixPoint
    from .dbscan_sequential import DBSCANSequential

    distance_matrix = compute_distance_matrix(points, metric)
    entities = [MatrixPoint(i, distance_matrix) for i in range(distance_matrix.shape[0])]

    return DBSCANSequential(eps=eps, min_pts=min_pts).fit(entities)
