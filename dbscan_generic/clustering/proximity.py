"""
Proximity capability
The distance contract every clusterable entity type has to satisfy
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence, runtime_checkable

from numba import jit

# Mean Earth radius (metres)
EARTH_RADIUS_M = 6371000.0


@runtime_checkable
class Proximity(Protocol):
    """Entity that can measure its distance to another entity of the same type"""

    def distance(self, other: Any) -> Any:
        ...

    def is_near(self, other: Any, epsilon: Any) -> bool:
        ...


class ProximityMixin(ABC):
    """Supplies the default ``is_near`` predicate on top of ``distance``"""

    @abstractmethod
    def distance(self, other):
        ...

    def is_near(self, other, epsilon) -> bool:
        """
        Whether ``other`` lies inside the closed ball of radius ``epsilon``

        Args:
            other: entity of the same type
            epsilon: neighbourhood radius, same domain as ``distance``

        Returns:
            True when distance(self, other) <= epsilon
        """
        return self.distance(other) <= epsilon


def is_near(a, b, epsilon) -> bool:
    """
    Neighbourhood predicate for two entities

    Uses the entity's own ``is_near`` when it defines one, otherwise falls
    back to comparing ``distance`` against ``epsilon``.

    Args:
        a: first entity
        b: second entity
        epsilon: neighbourhood radius (inclusive)

    Returns:
        True when the two entities are neighbours
    """
    predicate = getattr(a, 'is_near', None)
    if predicate is not None:
        return predicate(b, epsilon)
    return a.distance(b) <= epsilon


def euclidean_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Straight-line distance between two coordinate sequences"""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(p, q)))


def manhattan_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """City-block distance between two coordinate sequences"""
    return sum(abs(a - b) for a, b in zip(p, q))


@jit(nopython=True)
def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two coordinates

    Args:
        lat1: latitude of the first point (degrees)
        lon1: longitude of the first point (degrees)
        lat2: latitude of the second point (degrees)
        lon2: longitude of the second point (degrees)

    Returns:
        distance in metres
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = phi2 - phi1
    dlon = math.radians(lon2) - math.radians(lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c
