# environment.py

import logging

import numpy as np

from config import (
    GRID_SIZE, IMPASSABLE_RATE, ANIMAL_RATE,
    EDGE_RISK_DAMPING, EDGE_ANIMAL_DAMPING, RISK_DECIMALS,
)
from grid import check_positive_int

logger = logging.getLogger(__name__)


class Environment:
    """
    Generates a random reserve map: impassable terrain scattered at
    IMPASSABLE_RATE, poaching risk that is highest along the borders, and
    animals that prefer the interior. Impassable cells get risk 0 and no animal.
    """

    def __init__(self, grid_size=GRID_SIZE, rng=None, seed=None):
        self.grid_size = check_positive_int("grid_size", grid_size)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.terrain_map = self._generate_terrain()
        self.risk_map, self.animal_map = self._generate_risk_and_animals()

    def _generate_terrain(self):
        """1 = passable, 0 = impassable."""
        n = self.grid_size
        return (self.rng.random((n, n)) > IMPASSABLE_RATE).astype(np.int8)

    def _edge_factor(self):
        """
        Distance to the nearest border, scaled by half the grid size:
        0 on the border, ~1 at the centre.
        """
        n = self.grid_size
        rows, cols = np.meshgrid(np.arange(n), np.arange(n), indexing='ij')
        dist = np.minimum.reduce([rows, cols, n - 1 - rows, n - 1 - cols])
        return dist / (n / 2.0)

    def _generate_risk_and_animals(self):
        n = self.grid_size
        passable = self.terrain_map == 1
        edge = self._edge_factor()

        base = self.rng.random((n, n))
        risk = np.clip(base * (1 - edge * EDGE_RISK_DAMPING), 0.0, 1.0)
        risk = np.round(risk, RISK_DECIMALS)
        risk[~passable] = 0.0

        animals = self.rng.random((n, n)) < ANIMAL_RATE * (1 - edge * EDGE_ANIMAL_DAMPING)
        animals &= passable

        logger.debug("Generated %dx%d map: %d passable, %d animals",
                     n, n, int(passable.sum()), int(animals.sum()))
        return risk, animals

    def params(self, ranger_count, max_steps):
        """Parameters mapping for planner.run_optimization."""
        return {
            'gridSize': self.grid_size,
            'rangerCount': ranger_count,
            'maxSteps': max_steps,
            'riskMap': self.risk_map.tolist(),
            'animalMap': self.animal_map.tolist(),
            'terrainMap': self.terrain_map.tolist(),
        }
