# simulation.py

import argparse
import logging
import time

import numpy as np
import matplotlib.pyplot as plt

from environment import Environment
from planner import run_optimization, run_random_patrol
from risk_stats import summarize
from errors import PatrolError
from config import GRID_SIZE, NUM_RANGERS, MAX_STEPS, SEED, HIGH_RISK_THRESHOLD, ROUTE_COLORS


def plot_results(env, optimized, baseline, path='patrol_results.png', show=False):
    """Risk map with both route sets drawn on top, plus the optimized coverage."""
    risk = np.ma.masked_where(env.terrain_map == 0, env.risk_map)
    fig, axes = plt.subplots(1, 3, figsize=(24, 8))

    for ax, result, title in ((axes[0], optimized, "Optimized Routes"),
                              (axes[1], baseline, "Random Routes")):
        ax.imshow(risk, cmap='Reds', vmin=0, vmax=1, origin='upper')
        ax.imshow(env.terrain_map == 0, cmap='Greys', alpha=0.6, origin='upper')
        animals = np.argwhere(env.animal_map)
        if len(animals) > 0:
            ax.scatter(animals[:, 1], animals[:, 0], c='green', marker='^', label='Animals')
            ax.legend()
        for route in result['routes']:
            pts = np.array(route['path'])
            color = ROUTE_COLORS[route['ranger_id'] % len(ROUTE_COLORS)]
            ax.plot(pts[:, 1], pts[:, 0], '-', color=color, linewidth=2)
            ax.plot(pts[0, 1], pts[0, 0], 'o', color=color)
        ax.set_title(f"{title} (risk reduction {result['stats']['risk_reduction']})")

    im = axes[2].imshow(np.array(optimized['coverage']), cmap='Blues', origin='upper')
    fig.colorbar(im, ax=axes[2])
    axes[2].set_title("Optimized Coverage (visits per cell)")

    plt.tight_layout()
    plt.savefig(path)
    if show:
        plt.show()
    plt.close(fig)


def print_stats(label, stats):
    s = summarize(stats)
    print(f"\n{label}:")
    print(f"  Risk Before: {s['before_risk']}")
    print(f"  Risk After: {s['after_risk']}")
    print(f"  Risk Reduction: {s['risk_reduction']}")
    print(f"  High-Risk Coverage (risk >= {HIGH_RISK_THRESHOLD}): {s['high_risk_coverage']}")


def run_simulation(grid_size=GRID_SIZE, ranger_count=NUM_RANGERS, max_steps=MAX_STEPS,
                   seed=SEED, output='patrol_results.png', show=False):
    start_time = time.time()

    rng = np.random.default_rng(seed)
    env = Environment(grid_size, rng=rng)
    params = env.params(ranger_count, max_steps)

    optimized = run_optimization(params, rng=rng)
    baseline = run_random_patrol(params, rng=rng)

    print("\n=== Patrol Summary ===")
    print(f"Grid: {grid_size}x{grid_size}, Passable Cells: {int(env.terrain_map.sum())}, "
          f"Animals: {int(env.animal_map.sum())}")

    coverage = np.array(optimized['coverage'])
    for route in optimized['routes']:
        path = route['path']
        print(f"\nRanger {route['ranger_id']}:")
        print(f"  Start: ({path[0][0]}, {path[0][1]})")
        print(f"  End: ({path[-1][0]}, {path[-1][1]})")
        print(f"  Steps: {len(path)}")
    print(f"\nCells Patrolled: {int((coverage > 0).sum())}")

    print_stats("Optimized Patrol", optimized['stats'])
    print_stats("Random Patrol", baseline['stats'])

    if output:
        plot_results(env, optimized, baseline, path=output, show=show)

    print(f"\nTotal Time: {time.time() - start_time:.2f}s")
    return optimized, baseline


def main(argv=None):
    parser = argparse.ArgumentParser(description="Greedy anti-poaching patrol route planner")
    parser.add_argument('--grid-size', type=int, default=GRID_SIZE)
    parser.add_argument('--rangers', type=int, default=NUM_RANGERS)
    parser.add_argument('--max-steps', type=int, default=MAX_STEPS)
    parser.add_argument('--seed', type=int, default=SEED)
    parser.add_argument('--output', default='patrol_results.png',
                        help="figure path ('' to skip plotting)")
    parser.add_argument('--show', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        run_simulation(args.grid_size, args.rangers, args.max_steps, args.seed,
                       output=args.output, show=args.show)
    except PatrolError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
