"""
Clusterable point types
Ready-made entities implementing the proximity contract
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from ..clustering.proximity import (
    ProximityMixin,
    euclidean_distance,
    haversine_distance,
    manhattan_distance,
)


@dataclass(frozen=True)
class Point2D(ProximityMixin):
    """Cartesian point; identity is the ``id`` field only"""

    id: int
    x: float = field(compare=False)
    y: float = field(compare=False)

    def distance(self, other: 'Point2D') -> float:
        return euclidean_distance((self.x, self.y), (other.x, other.y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class GridPoint(ProximityMixin):
    """Integer lattice point measured with the Manhattan metric"""

    x: int
    y: int

    def distance(self, other: 'GridPoint') -> int:
        return int(manhattan_distance((self.x, self.y), (other.x, other.y)))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class GeoPoint(ProximityMixin):
    """Geographic coordinate; distances are great-circle metres"""

    id: Any
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)

    def distance(self, other: 'GeoPoint') -> float:
        """
        Haversine distance to another point

        Args:
            other: another geographic point

        Returns:
            distance (metres)
        """
        return float(haversine_distance(self.latitude, self.longitude,
                                        other.latitude, other.longitude))

    def to_array(self) -> np.ndarray:
        """
        [longitude, latitude] so that x runs east-west when plotted
        """
        return np.array([self.longitude, self.latitude])

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'latitude': self.latitude,
            'longitude': self.longitude
        }


@dataclass(frozen=True)
class MatrixPoint(ProximityMixin):
    """Row of a precomputed distance matrix"""

    index: int
    matrix: np.ndarray = field(compare=False, repr=False)

    def distance(self, other: 'MatrixPoint') -> float:
        return float(self.matrix[self.index, other.index])


def make_points(coordinates: Iterable[Tuple[float, float]]) -> List[Point2D]:
    """
    Number (x, y) tuples in order and turn them into points

    Args:
        coordinates: iterable of (x, y) pairs

    Returns:
        list of Point2D with ids 0, 1, 2, ...
    """
    return [Point2D(id=i, x=float(x), y=float(y)) for i, (x, y) in enumerate(coordinates)]
