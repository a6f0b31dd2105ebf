"""
dbscan-generic
DBSCAN density-based clustering over any entity type with a distance metric
"""

from .clustering import (
    NOISE,
    ClusterResults,
    DBSCANSequential,
    Proximity,
    ProximityMixin,
    cluster,
    is_near,
)

__version__ = '0.1.0'

__all__ = [
    'NOISE',
    'ClusterResults',
    'DBSCANSequential',
    'Proximity',
    'ProximityMixin',
    'cluster',
    'is_near'
]
