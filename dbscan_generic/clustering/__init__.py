"""
Clustering module
Generic DBSCAN engine, proximity contract and result view
"""

from .dbscan_sequential import DBSCANSequential, cluster
from .proximity import (
    Proximity,
    ProximityMixin,
    euclidean_distance,
    haversine_distance,
    is_near,
    manhattan_distance,
)
from .results import NOISE, ClusterResults
from .utils import cluster_array, compute_distance_matrix, region_query

__all__ = [
    'DBSCANSequential',
    'cluster',
    'Proximity',
    'ProximityMixin',
    'is_near',
    'euclidean_distance',
    'manhattan_distance',
    'haversine_distance',
    'NOISE',
    'ClusterResults',
    'cluster_array',
    'compute_distance_matrix',
    'region_query'
]
