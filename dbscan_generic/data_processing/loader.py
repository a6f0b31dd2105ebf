"""
Point data loader
Reads clusterable points from CSV files
"""

import warnings
from pathlib import Path
from typing import List, Union

import pandas as pd

from .points import GeoPoint, Point2D

SUPPORTED_KINDS = ('euclidean', 'geo')


def load_points_csv(path: Union[str, Path], kind: str = 'euclidean') -> List[Union[Point2D, GeoPoint]]:
    """
    Load points from a CSV file with a header row

    Args:
        path: CSV file path
        kind: 'euclidean' for x,y columns or 'geo' for latitude,longitude
            columns; an ``id`` column is optional, row numbers are used
            when it is missing

    Returns:
        list of Point2D or GeoPoint in file order
    """
    if kind not in SUPPORTED_KINDS:
        raise ValueError(f"Unsupported point kind: {kind}")

    df = pd.read_csv(path)
    df.columns = [str(column).strip().lower() for column in df.columns]

    coord_columns = ['x', 'y'] if kind == 'euclidean' else ['latitude', 'longitude']
    missing = [column for column in coord_columns if column not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing column(s) {', '.join(missing)}")

    if 'id' not in df.columns:
        df['id'] = range(len(df))

    for column in coord_columns:
        df[column] = pd.to_numeric(df[column], errors='coerce')

    invalid = df[coord_columns].isna().any(axis=1)
    if invalid.any():
        warnings.warn(f"{path}: skipped {int(invalid.sum())} row(s) with invalid coordinates")
        df = df[~invalid]

    if kind == 'euclidean':
        return [Point2D(id=row.id, x=float(row.x), y=float(row.y))
                for row in df.itertuples(index=False)]

    return [GeoPoint(id=row.id, latitude=float(row.latitude), longitude=float(row.longitude))
            for row in df.itertuples(index=False)]


def save_labels_csv(path: Union[str, Path], results) -> None:
    """
    Write one ``id,label`` row per entity

    Args:
        path: output CSV path
        results: ClusterResults of a run over Point2D or GeoPoint entities
    """
    rows = [{'id': entity.id, 'label': label} for entity, label in results]
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows, columns=['id', 'label']).to_csv(output_path, index=False)
