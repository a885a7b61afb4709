"""
Analysis module for flock statistics, plotting and exporting run results.
"""

from .statistics import flock_statistics
from .plotting import plot_exclusion_comparison
from .export import (
    export_results_to_csv, export_timeseries_to_csv, export_report,
    calculate_aggregate_stats,
)

__all__ = [
    'flock_statistics',
    'plot_exclusion_comparison',
    'export_results_to_csv',
    'export_timeseries_to_csv',
    'export_report',
    'calculate_aggregate_stats',
]
