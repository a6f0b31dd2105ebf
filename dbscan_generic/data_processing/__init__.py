"""
Data processing module
Example clusterable entities and CSV input/output
"""

from .loader import load_points_csv, save_labels_csv
from .points import GeoPoint, GridPoint, MatrixPoint, Point2D, make_points

__all__ = [
    'load_points_csv',
    'save_labels_csv',
    'Point2D',
    'GridPoint',
    'GeoPoint',
    'MatrixPoint',
    'make_points'
]
