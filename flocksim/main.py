"""
Main entry point for the flocking simulation.

Run with:
    python -m flocksim.main                # Interactive simulation
    python -m flocksim.main --headless     # Compare neighbor exclusion modes
"""

import os
from typing import Optional

from .core.config import SimulationConfig, FlockParameters, NEIGHBOR_EXCLUSION_MODES


def set_headless():
    """Enable headless mode for offscreen rendering."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def run_interactive(config: SimulationConfig, params: FlockParameters):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Boids Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC         - Quit")
    print("  D           - Toggle debug view (ranges and separation vectors)")
    print("  S / click   - Spawn a boid")
    print("  UP/DOWN     - Select parameter")
    print("  LEFT/RIGHT  - Adjust parameter (hold SHIFT for fine steps)")
    print(f"\nBoids: {config.boidCount}, neighbor exclusion: {config.neighborExclusion}")
    print("\nStarting simulation...")

    sim = Simulation(config, params)
    sim.run()


def run_headless(config: SimulationConfig, params: FlockParameters,
                 num_trials: int = 5, ticks: int = 2000, seed: int = 42,
                 record_video: bool = False, show_plot: bool = False) -> dict:
    """
    Run every neighbor exclusion mode from the same seeds and compare them.

    Args:
        config: Simulation configuration
        params: Starting flock parameters, copied for every trial
        num_trials: Number of trials per mode
        ticks: Ticks per trial
        seed: Seed of the first trial; trial i uses seed + i
        record_video: Record the first trial of each mode
        show_plot: Open the comparison plot after saving it

    Returns:
        The report written to config.reportFile
    """
    if num_trials < 1:
        raise ValueError(f"num_trials must be at least 1, got {num_trials}")
    if ticks < 0:
        raise ValueError(f"ticks must be non-negative, got {ticks}")

    set_headless()

    from .simulation.headless import HeadlessSimulation
    from .analysis.export import (
        export_results_to_csv, export_timeseries_to_csv, export_report,
        calculate_aggregate_stats,
    )
    from .analysis.plotting import plot_exclusion_comparison

    print("=" * 60)
    print("NEIGHBOR EXCLUSION COMPARISON")
    print("=" * 60)
    print(f"Ticks per trial: {ticks} (timestep {1.0 / config.fpsTarget:.4f}s)")
    print(f"Trials per mode: {num_trials}")
    print(f"Boids: {config.boidCount}")
    print()

    results_by_mode = {}
    for mode in NEIGHBOR_EXCLUSION_MODES:
        print(f"\n{'=' * 60}")
        print(f"Mode: {mode}")
        print(f"{'=' * 60}")

        results = []
        for trial in range(num_trials):
            print(f"\nTrial {trial + 1}/{num_trials}")
            video_file = None
            if record_video and trial == 0:
                video_file = f"recording_{mode}_trial{trial + 1}.mp4"

            sim = HeadlessSimulation(
                config, FlockParameters.from_dict(params.to_dict()),
                seed=seed + trial, exclusion=mode,
                enable_video=video_file is not None, video_filename=video_file,
            )
            result = sim.run(ticks)
            result["trial"] = trial + 1
            results.append(result)

        results_by_mode[mode] = results

    report = {
        "run_config": {"ticks": ticks, "trials_per_mode": num_trials, "seed": seed},
        "config": config.to_dict(),
        "parameters": params.to_dict(),
        "modes": {
            mode: {
                "trial_results": [
                    {k: v for k, v in r.items() if k != "stats_over_time"}
                    for r in results
                ],
                "aggregates": calculate_aggregate_stats(results),
            }
            for mode, results in results_by_mode.items()
        },
    }

    export_report(report, config.reportFile)
    export_results_to_csv(results_by_mode, config.resultsCsvFile)
    first_trials = {mode: results[0] for mode, results in results_by_mode.items()}
    export_timeseries_to_csv(first_trials, config.timeseriesCsvFile)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for mode, entry in report["modes"].items():
        agg = entry["aggregates"]
        print(f"\n{mode.upper()}:")
        print(f"   Avg Speed: {agg.get('avg_speed_mean', 0):.2f} +/- {agg.get('avg_speed_std', 0):.2f}")
        print(f"   Avg Cohesion: {agg.get('avg_cohesion_mean', 0):.2f} +/- {agg.get('avg_cohesion_std', 0):.2f}")
        print(f"   Final Cohesion: {agg.get('final_cohesion_mean', 0):.2f}")

    print("\nGenerating comparison plot...")
    plot_exclusion_comparison(first_trials, config.plotFile, show=show_plot)

    return report


def build_config(args) -> SimulationConfig:
    """Apply command-line overrides to the default configuration."""
    config = SimulationConfig()
    if args.boids is not None:
        config.boidCount = args.boids
    if args.width is not None:
        config.screenWidth = args.width
    if args.height is not None:
        config.screenHeight = args.height
    if args.fps is not None:
        config.fpsTarget = args.fps
    if args.seed is not None:
        config.seed = args.seed
    config.neighborExclusion = args.exclusion
    config.debugMode = args.debug
    return config


def main(argv: Optional[list] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Boids Flocking Simulation")
    parser.add_argument("--headless", action="store_true",
                        help="Compare neighbor exclusion modes without a window")
    parser.add_argument("--boids", type=int, help="Initial number of boids")
    parser.add_argument("--width", type=int, help="Simulation width")
    parser.add_argument("--height", type=int, help="Simulation height")
    parser.add_argument("--fps", type=int, help="Target frame rate (headless timestep is 1/fps)")
    parser.add_argument("--seed", type=int, help="Random seed for the initial flock")
    parser.add_argument("--exclusion", choices=NEIGHBOR_EXCLUSION_MODES, default="position",
                        help="Neighbor exclusion for the interactive simulation")
    parser.add_argument("--debug", action="store_true", help="Start with the debug view on")
    parser.add_argument("--trials", type=int, default=5, help="Headless trials per mode")
    parser.add_argument("--ticks", type=int, default=2000, help="Headless ticks per trial")
    parser.add_argument("--record-video", action="store_true", help="Record video during headless runs")
    parser.add_argument("--show-plot", action="store_true", help="Show the comparison plot")

    args = parser.parse_args(argv)
    config = build_config(args)
    params = FlockParameters()

    if args.headless:
        run_headless(
            config, params,
            num_trials=args.trials,
            ticks=args.ticks,
            seed=args.seed if args.seed is not None else 42,
            record_video=args.record_video,
            show_plot=args.show_plot,
        )
    else:
        run_interactive(config, params)


if __name__ == "__main__":
    main()
