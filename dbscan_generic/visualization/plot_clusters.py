"""
Cluster visualization
Scatter and size plots of a ClusterResults view
"""

from typing import Any, Callable, Optional, Sequence, Tuple

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from ..clustering.results import ClusterResults


def _default_coords(entity: Any) -> Sequence[float]:
    return entity.to_array()


class ClusterVisualizer:
    """Cluster plotter"""

    def __init__(self, figsize: Tuple[int, int] = (12, 10),
                 colormap: str = 'tab20'):
        """
        Set up the plotter

        Args:
            figsize: figure size
            colormap: matplotlib colormap used for cluster colours
        """
        self.figsize = figsize
        self.colormap = colormap
        self.cmap = matplotlib.colormaps[colormap]

    def plot_clusters_2d(self, results: ClusterResults,
                         coords: Optional[Callable[[Any], Sequence[float]]] = None,
                         title: str = "DBSCAN clusters",
                         save_path: Optional[str] = None,
                         show_noise: bool = True,
                         alpha: float = 0.8,
                         s: float = 40.0) -> plt.Figure:
        """
        Scatter plot of every cluster and the noise

        Args:
            results: clustering results
            coords: maps an entity to its (x, y) position; defaults to the
                entity's ``to_array()``
            title: figure title
            save_path: file to save the figure to
            show_noise: whether noise points are drawn
            alpha: marker transparency
            s: marker size

        Returns:
            matplotlib figure
        """
        coords = coords or _default_coords
        fig, ax = plt.subplots(figsize=self.figsize)

        clusters = results.clusters()
        colors = self.cmap(np.linspace(0, 1, max(len(clusters), 1)))

        for i, members in enumerate(clusters):
            xy = np.array([coords(entity) for entity in members], dtype=float)
            ax.scatter(xy[:, 0], xy[:, 1], c=[colors[i]], label=f'Cluster {i}',
                       marker='o', s=s, alpha=alpha, edgecolors='w', linewidths=0.5)

        noise = results.noise()
        if show_noise and noise:
            xy = np.array([coords(entity) for entity in noise], dtype=float)
            ax.scatter(xy[:, 0], xy[:, 1], c='gray', label='Noise',
                       marker='x', s=s * 0.5, alpha=alpha * 0.5)

        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')
        ax.grid(True, alpha=0.3)

        # Keep the legend readable
        handles, legend_labels = ax.get_legend_handles_labels()
        if len(handles) > 15:
            ax.legend(handles[:15], legend_labels[:15], loc='upper right', fontsize=8)
        elif handles:
            ax.legend(loc='upper right')

        stats_text = f'Clusters: {len(clusters)}\nNoise: {len(noise)}\nPoints: {len(results)}'
        ax.text(0.02, 0.98, stats_text, transform=ax.transAxes,
                fontsize=10, verticalalignment='top',
                bbox=dict(boxstyle='round', facecolor='wheat', alpha=0.8))

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        return fig

    def plot_cluster_sizes(self, results: ClusterResults,
                           title: str = "Cluster sizes",
                           save_path: Optional[str] = None) -> plt.Figure:
        """
        Bar chart of the number of entities per cluster

        Args:
            results: clustering results
            title: figure title
            save_path: file to save the figure to

        Returns:
            matplotlib figure
        """
        sizes = results.cluster_sizes()
        cluster_ids = sorted(sizes)

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.bar([str(cluster_id) for cluster_id in cluster_ids],
               [sizes[cluster_id] for cluster_id in cluster_ids],
               color=self.cmap(np.linspace(0, 1, max(len(cluster_ids), 1))))
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xlabel('Cluster')
        ax.set_ylabel('Points')

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        return fig


def plot_results(results: ClusterResults, save_path: Optional[str] = None,
                 **kwargs) -> plt.Figure:
    """Shortcut for ClusterVisualizer().plot_clusters_2d"""
    return ClusterVisualizer().plot_clusters_2d(results, save_path=save_path, **kwargs)
