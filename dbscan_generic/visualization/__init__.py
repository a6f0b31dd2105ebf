"""
Visualization module
Plots of clustering results
"""

from .plot_clusters import ClusterVisualizer, plot_results

__all__ = [
    'ClusterVisualizer',
    'plot_results'
]
