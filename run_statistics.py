#!/usr/bin/env python3
"""
Statistics Collection Script for Robot Missions
Runs many random missions and collects loss and scent metrics for analysis
"""

import sys
import io
import random
import numpy as np
from contextlib import redirect_stdout
from grid import make_grid
from mission import split_input
from simulation import Simulation

def generate_input(max_x, max_y, num_robots, instruction_length, rng=random):
    """Build a random, well-formed mission text"""
    blocks = [f"{max_x} {max_y}"]
    for _ in range(num_robots):
        x = rng.randint(0, max_x)
        y = rng.randint(0, max_y)
        bearing = rng.choice(['N', 'E', 'S', 'W'])
        instructions = ''.join(rng.choice('LRF') for _ in range(instruction_length))
        blocks.append(f"{x} {y} {bearing}\n{instructions}")
    return "\n\n".join(blocks)

def run_single_simulation(max_x=5, max_y=3, num_robots=10, instruction_length=20, seed=None, show_output=False):
    """Run a single random mission and return statistics"""
    rng = random.Random(seed)
    text = generate_input(max_x, max_y, num_robots, instruction_length, rng)

    size_line, scripts = split_input(text)
    grid = make_grid(size_line)

    # Redirect stdout to suppress output unless requested
    if not show_output:
        f = io.StringIO()
        with redirect_stdout(f):
            sim = Simulation(grid, scripts, verbose=True)
            sim.run()
    else:
        sim = Simulation(grid, scripts, verbose=True)
        sim.run()

    stats = {
        'robots': sim.robots_run,
        'lost': sim.lost_count,
        'survived': sim.robots_run - sim.lost_count,
        'scent_saves': sim.scent_saves,
        'scented_cells': grid.scent_count(),
        'loss_rate': sim.lost_count / sim.robots_run if sim.robots_run else 0.0,
    }
    return stats

def run_statistics(num_runs=20, max_x=5, max_y=3, num_robots=10, instruction_length=20, seed=None):
    """Run multiple missions and collect statistics"""
    print(f"Running {num_runs} missions for statistical analysis...")
    print("=" * 80)

    rng = random.Random(seed)
    all_stats = []

    for i in range(num_runs):
        print(f"Running mission {i+1}/{num_runs}...", end='\r')
        stats = run_single_simulation(max_x, max_y, num_robots, instruction_length, seed=rng.randrange(2**32))
        all_stats.append(stats)

    print("\n" + "=" * 80)
    print("\nCOMPLETED! Analyzing results...\n")

    lost = np.array([s['lost'] for s in all_stats])
    scent_saves = np.array([s['scent_saves'] for s in all_stats])
    scented_cells = np.array([s['scented_cells'] for s in all_stats])
    loss_rates = np.array([s['loss_rate'] for s in all_stats]) * 100

    print("=" * 80)
    print("MISSION STATISTICS REPORT")
    print("=" * 80)
    print(f"Number of missions: {num_runs}")
    print(f"Configuration: {max_x + 1}x{max_y + 1} grid, {num_robots} robots, {instruction_length} instructions each")
    print()

    print("--- LOSSES ---")
    print(f"Average Robots Lost: {np.mean(lost):.2f} ± {np.std(lost):.2f}")
    print(f"  Min: {np.min(lost)} | Max: {np.max(lost)} | Median: {np.median(lost):.1f}")
    print(f"Average Loss Rate: {np.mean(loss_rates):.1f}%")
    print()

    print("--- SCENT ---")
    print(f"Average Scented Cells: {np.mean(scented_cells):.2f}")
    print(f"Average Steps Refused by Scent: {np.mean(scent_saves):.2f} ± {np.std(scent_saves):.2f}")
    print(f"  Min: {np.min(scent_saves)} | Max: {np.max(scent_saves)}")
    print()
    print("=" * 80)

    return all_stats

def main():
    """Main entry point"""
    # Default to 20 runs, but allow command line argument
    num_runs = 20
    if len(sys.argv) > 1:
        try:
            num_runs = int(sys.argv[1])
        except ValueError:
            print(f"Invalid argument. Using default: {num_runs} runs")

    stats = run_statistics(num_runs)

    # Optionally save detailed results to CSV
    print("\nWould you like to save detailed results to CSV? (y/n): ", end='')
    response = input().strip().lower()

    if response == 'y':
        import csv
        filename = 'mission_results.csv'
        with open(filename, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=stats[0].keys())
            writer.writeheader()
            writer.writerows(stats)
        print(f"Results saved to {filename}")

if __name__ == "__main__":
    main()
