#!/usr/bin/env python3
"""
Run sequential DBSCAN
Clusters a CSV of points (or a built-in sample) and reports the result
"""

import sys
from pathlib import Path

# Make the project root importable when run from a checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import json
import logging
from typing import Any, Dict, List, Optional

from dbscan_generic.clustering.dbscan_sequential import DBSCANSequential
from dbscan_generic.data_processing.loader import load_points_csv, save_labels_csv
from dbscan_generic.data_processing.points import make_points

# Sample field of 2D points
SAMPLE_POINTS = [
    (0.0, 0.0), (1.0, 0.0), (0.0, -1.0),
    (1.0, 2.0),
    (3.0, 5.0), (4.0, 5.0), (5.0, 5.0),
    (3.0, -2.0), (3.0, 0.0),
    (-1.0, 4.0),
]


def load_points(data_path: Optional[str], kind: str) -> List[Any]:
    """
    Load the points to cluster

    Args:
        data_path: CSV path, None for the built-in sample
        kind: point kind understood by load_points_csv

    Returns:
        list of points
    """
    if data_path is None:
        print("No --data given, using the built-in sample points")
        return make_points(SAMPLE_POINTS)

    points = load_points_csv(data_path, kind=kind)
    print(f"Loaded {len(points)} points from {data_path}")
    return points


def run_sequential_dbscan(points: List[Any], eps: float, min_pts: int) -> Dict[str, Any]:
    """
    Run DBSCAN and print the clusters and noise

    Args:
        points: points to cluster
        eps: neighbourhood radius
        min_pts: core point threshold

    Returns:
        dictionary with the parameters, statistics and fitted estimator
    """
    print("=" * 60)
    print("Sequential DBSCAN")
    print("=" * 60)
    print(f"  eps: {eps}")
    print(f"  min_pts: {min_pts}")
    print(f"  points: {len(points)}")

    dbscan = DBSCANSequential(eps=eps, min_pts=min_pts)
    results = dbscan.cluster(points)
    stats = dbscan.get_cluster_stats()

    for i, members in enumerate(results.clusters()):
        print(f"\nCluster {i}: [ {' '.join(str(p) for p in members)} ]")
    print(f"\nNoise: [ {' '.join(str(p) for p in results.noise())} ]")

    print(f"\n  clusters: {stats['n_clusters']}")
    print(f"  core points: {stats['n_core_points']}")
    print(f"  noise: {stats['n_noise']}")
    print(f"  execution time: {stats['execution_time']:.4f} s")

    return {
        'algorithm': 'DBSCAN_Sequential',
        'parameters': {
            'eps': eps,
            'min_pts': min_pts,
            'n_points': len(points)
        },
        'results': stats,
        'dbscan_object': dbscan
    }


def save_results(result: Dict[str, Any], output_dir: str) -> None:
    """
    Write the JSON summary and the per-point labels

    Args:
        result: output of run_sequential_dbscan
        output_dir: output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    summary_file = output_path / "sequential_results.json"
    serializable_result = {
        'algorithm': result['algorithm'],
        'parameters': result['parameters'],
        'results': result['results']
    }
    with open(summary_file, 'w') as f:
        json.dump(serializable_result, f, indent=2, default=str)

    labels_file = output_path / "sequential_labels.csv"
    save_labels_csv(labels_file, result['dbscan_object'].results_)

    print(f"Results saved to: {summary_file}")
    print(f"Labels saved to: {labels_file}")


def visualize_results(result: Dict[str, Any], output_dir: str) -> None:
    # Imported lazily so --no-visualize works without a display backend
    import matplotlib.pyplot as plt

    from dbscan_generic.visualization.plot_clusters import ClusterVisualizer

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    params = result['parameters']
    visualizer = ClusterVisualizer(figsize=(10, 8))
    fig = visualizer.plot_clusters_2d(
        result['dbscan_object'].results_,
        title=f"DBSCAN (eps={params['eps']}, min_pts={params['min_pts']})",
        save_path=str(output_path / "sequential_clusters_2d.png")
    )
    plt.close(fig)
    print(f"Plot saved to: {output_path / 'sequential_clusters_2d.png'}")


def main():
    """Entry point"""
    parser = argparse.ArgumentParser(description='Run sequential DBSCAN clustering')
    parser.add_argument('--data', type=str,
                        help='CSV file with id,x,y or id,latitude,longitude columns')
    parser.add_argument('--eps', type=float, default=2.0,
                        help='neighbourhood radius (default: 2.0)')
    parser.add_argument('--min-pts', type=int, default=1,
                        help='core points need more neighbours than this (default: 1)')
    parser.add_argument('--kind', type=str, default='euclidean',
                        choices=['euclidean', 'geo'],
                        help='point kind; geo distances are in metres (default: euclidean)')
    parser.add_argument('--output-dir', type=str, default='./results/sequential',
                        help='output directory (default: ./results/sequential)')
    parser.add_argument('--no-visualize', action='store_true',
                        help='do not render the cluster plot')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='logging level (default: WARNING)')

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        points = load_points(args.data, args.kind)
        result = run_sequential_dbscan(points, eps=args.eps, min_pts=args.min_pts)

        if not args.no_visualize:
            visualize_results(result, args.output_dir)

        save_results(result, args.output_dir)

    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
