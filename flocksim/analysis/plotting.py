"""
Plotting functions for visualizing headless run results.
"""

from typing import Dict

import matplotlib.pyplot as plt


MODE_COLORS = {
    'position': '#FF6B6B',  # Red - exact position exclusion
    'identity': '#4ECDC4',  # Teal - self-only exclusion
}

MODE_LABELS = {
    'position': 'Exclude by position',
    'identity': 'Exclude by identity',
}


def plot_exclusion_comparison(results_by_mode: Dict[str, Dict],
                              output_file: str = "flock_exclusion_comparison.png",
                              show: bool = False) -> str:
    """
    Plot average speed and cohesion over time for each neighbor exclusion mode.

    Args:
        results_by_mode: One run's results keyed by exclusion mode
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    fig, (ax_speed, ax_cohesion) = plt.subplots(2, 1, figsize=(12, 9), sharex=True)

    for mode, result in results_by_mode.items():
        series = result["stats_over_time"]
        ticks = [d["tick"] for d in series]
        speeds = [d["avg_speed"] for d in series]
        cohesion = [d["cohesion"] for d in series]
        color = MODE_COLORS.get(mode)
        label = MODE_LABELS.get(mode, mode)

        ax_speed.plot(ticks, speeds, label=label, linewidth=2, color=color, alpha=0.8)
        ax_cohesion.plot(ticks, cohesion, label=label, linewidth=2, color=color, alpha=0.8)

        if cohesion:
            ax_cohesion.annotate(f'{cohesion[-1]:.0f}', xy=(ticks[-1], cohesion[-1]),
                                 xytext=(5, 0), textcoords='offset points',
                                 fontsize=8, color=color)

    ax_speed.set_ylabel('Average speed (units/s)', fontsize=10)
    ax_speed.set_title('Average Speed', fontsize=12, fontweight='bold')
    ax_speed.legend(fontsize=9, loc='upper right')
    ax_speed.grid(True, alpha=0.3, linestyle='--')

    ax_cohesion.set_xlabel('Tick', fontsize=10)
    ax_cohesion.set_ylabel('Cohesion (avg dist to centroid)', fontsize=10)
    ax_cohesion.set_title('Cohesion', fontsize=12, fontweight='bold')
    ax_cohesion.legend(fontsize=9, loc='upper right')
    ax_cohesion.grid(True, alpha=0.3, linestyle='--')

    fig.suptitle('Neighbor Exclusion Comparison\n(Lower cohesion = tighter flock)',
                 fontsize=14, fontweight='bold')
    fig.tight_layout()

    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
