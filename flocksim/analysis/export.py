"""
Export functions for saving headless run results to CSV and JSON.
"""

import csv
import json
from typing import Dict, List, Any

import numpy as np


AGGREGATE_METRICS = ("avg_speed", "avg_cohesion", "final_cohesion", "final_boid_count",
                     "elapsed_time_seconds")

TRIAL_FIELDS = ['simulation_id', 'exclusion', 'seed', 'ticks', 'final_boid_count',
                'avg_speed', 'avg_cohesion', 'final_cohesion', 'elapsed_time_seconds']


def export_results_to_csv(results_by_mode: Dict[str, List[Dict]],
                          filename: str = "flock_trials.csv") -> str:
    """
    Export per-trial results to CSV format.

    Args:
        results_by_mode: Trial results keyed by neighbor exclusion mode
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TRIAL_FIELDS)
        writer.writeheader()

        for mode, results in results_by_mode.items():
            for result in results:
                writer.writerow({
                    'simulation_id': f"{mode}_trial{result['trial']}",
                    'exclusion': mode,
                    'seed': result['seed'],
                    'ticks': result['ticks'],
                    'final_boid_count': result['final_boid_count'],
                    'avg_speed': result['avg_speed'],
                    'avg_cohesion': result['avg_cohesion'],
                    'final_cohesion': result['final_cohesion'],
                    'elapsed_time_seconds': result['elapsed_time_seconds'],
                })

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_timeseries_to_csv(results_by_mode: Dict[str, Dict],
                             filename: str = "flock_timeseries.csv") -> str:
    """
    Export speed and cohesion time series of one run per mode to CSV.

    Rows are aligned on tick number; a mode without a sample at a tick
    leaves its columns empty.

    Args:
        results_by_mode: One run's results keyed by neighbor exclusion mode
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    modes = list(results_by_mode)
    samples = {
        mode: {e["tick"]: e for e in results_by_mode[mode]["stats_over_time"]}
        for mode in modes
    }
    all_ticks = sorted(set().union(*(s.keys() for s in samples.values()))) if samples else []

    fieldnames = ['tick']
    for mode in modes:
        fieldnames += [f'{mode}_avg_speed', f'{mode}_cohesion', f'{mode}_boid_count']

    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()

        for tick in all_ticks:
            row = {'tick': tick}
            for mode in modes:
                entry = samples[mode].get(tick)
                row[f'{mode}_avg_speed'] = f"{entry['avg_speed']:.2f}" if entry else ''
                row[f'{mode}_cohesion'] = f"{entry['cohesion']:.2f}" if entry else ''
                row[f'{mode}_boid_count'] = entry['boid_count'] if entry else ''
            writer.writerow(row)

    print(f"  Time series saved to: {filename}")
    return filename


def export_report(results: Dict[str, Any], filename: str = "flock_report.json") -> str:
    """
    Export full run report to JSON.

    Args:
        results: Complete results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nReport saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with mean and std for each metric
    """
    aggregates = {}
    for metric in AGGREGATE_METRICS:
        values = np.array([r[metric] for r in trial_results if r.get(metric) is not None],
                          dtype=float)
        if values.size == 0:
            continue
        aggregates[f"{metric}_mean"] = float(values.mean())
        # Sample std; a single trial has no spread
        aggregates[f"{metric}_std"] = float(values.std(ddof=1)) if values.size > 1 else 0.0

    return aggregates
