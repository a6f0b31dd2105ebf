"""Tests for cluster plotting."""

import matplotlib.pyplot as plt

from dbscan_generic.clustering.dbscan_sequential import cluster
from dbscan_generic.visualization.plot_clusters import ClusterVisualizer, plot_results


class TestClusterVisualizer:
    """Figures are produced and saved."""

    def test_plot_clusters_2d_saves_figure(self, tmp_path, two_groups_and_outlier):
        results = cluster(two_groups_and_outlier, 2.0, 1)
        save_path = tmp_path / "clusters.png"

        fig = ClusterVisualizer(figsize=(4, 4)).plot_clusters_2d(results, save_path=str(save_path))

        assert save_path.exists()
        # two clusters plus noise
        assert len(fig.axes[0].collections) == 3
        plt.close(fig)

    def test_hide_noise_and_custom_coords(self, two_groups_and_outlier):
        results = cluster(two_groups_and_outlier, 2.0, 1)

        fig = ClusterVisualizer(figsize=(4, 4)).plot_clusters_2d(
            results, coords=lambda p: (p.y, p.x), show_noise=False)

        assert len(fig.axes[0].collections) == 2
        plt.close(fig)

    def test_all_noise(self, two_groups_and_outlier):
        results = cluster(two_groups_and_outlier, 0.1, 1)

        fig = plot_results(results)

        assert len(fig.axes[0].collections) == 1
        plt.close(fig)

    def test_plot_cluster_sizes(self, tmp_path, two_groups):
        results = cluster(two_groups, 2.0, 1)
        save_path = tmp_path / "sizes.png"

        fig = ClusterVisualizer(figsize=(4, 4)).plot_cluster_sizes(results, save_path=str(save_path))

        assert save_path.exists()
        assert len(fig.axes[0].patches) == 2
        plt.close(fig)
