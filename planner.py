# planner.py
"""
Patrol route generation:
  - greedy routes: each step moves to the neighbor with the best
    (risk*2 + animal) / (coverage + 1) score
  - random routes: uniform random walk, used as an uncoordinated baseline

Rangers are generated strictly one after another on one shared coverage grid.
Later rangers see earlier rangers' visits, which is what spreads the fleet out;
do not parallelize this loop.

Previous modules:
  - config.py
  - errors.py
  - grid.py
  - ranger.py
  - risk_stats.py
"""
import logging

import numpy as np

from errors import InvalidConfiguration, NoPassableCells
from grid import PatrolGrid, check_positive_int
from ranger import Ranger
from risk_stats import compute_statistics

logger = logging.getLogger(__name__)


def make_rng(rng=None, seed=None):
    """Return `rng` if given, else a numpy Generator seeded with `seed`."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def _run_rangers(grid, ranger_count, max_steps, rng, chooser_factory=None):
    ranger_count = check_positive_int("ranger_count", ranger_count)
    max_steps = check_positive_int("max_steps", max_steps)
    if not grid.has_passable_cell():
        raise NoPassableCells("every cell is impassable; no ranger can be placed")

    rangers = []
    for rid in range(ranger_count):
        ranger = Ranger(rid)
        ranger.start(grid, rng)
        chooser = chooser_factory(ranger) if chooser_factory is not None else None
        ranger.walk(grid, max_steps, chooser=chooser)
        rangers.append(ranger)
    return rangers


def generate_routes(grid, ranger_count, max_steps, rng=None):
    """
    Greedy patrol routes for `ranger_count` rangers, each at most `max_steps`
    cells long. Updates grid.coverage in place. Returns list of route dicts.
    """
    rng = make_rng(rng)
    rangers = _run_rangers(grid, ranger_count, max_steps, rng)
    logger.info("Generated %d greedy routes (max %d steps)", len(rangers), max_steps)
    return [r.route() for r in rangers]


def generate_random_routes(grid, ranger_count, max_steps, rng=None):
    """
    Baseline: same start rule, but each step goes to a uniformly random
    passable neighbor, ignoring risk, animals and coverage.
    """
    rng = make_rng(rng)

    def random_chooser(ranger):
        def choose(g):
            options = g.neighbors(*ranger.pos)
            if not options:
                return None
            return options[rng.integers(len(options))]
        return choose

    rangers = _run_rangers(grid, ranger_count, max_steps, rng, chooser_factory=random_chooser)
    logger.info("Generated %d random routes (max %d steps)", len(rangers), max_steps)
    return [r.route() for r in rangers]


def _counts(params):
    def pick(camel, snake):
        if camel in params:
            return params[camel]
        if snake in params:
            return params[snake]
        raise InvalidConfiguration(f"{camel} is required")
    return pick("rangerCount", "ranger_count"), pick("maxSteps", "max_steps")


def _solve(params, generator, rng, seed):
    grid = PatrolGrid.from_params(params)
    ranger_count, max_steps = _counts(params)
    routes = generator(grid, ranger_count, max_steps, rng=make_rng(rng, seed))
    stats = compute_statistics(grid)
    return {
        'routes': routes,
        'coverage': grid.coverage.tolist(),
        'stats': stats,
    }


def run_optimization(params, rng=None, seed=None):
    """
    Single-shot entry point.

    params: mapping with gridSize, rangerCount, maxSteps, riskMap, animalMap,
            terrainMap (snake_case keys accepted too).
    Returns {'routes': [...], 'coverage': [[int]], 'stats': {...}}.
    Raises InvalidConfiguration / NoPassableCells before any route is built.
    """
    return _solve(params, generate_routes, rng, seed)


def run_random_patrol(params, rng=None, seed=None):
    """Same contract as run_optimization, using the random-walk baseline."""
    return _solve(params, generate_random_routes, rng, seed)
