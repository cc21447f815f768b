# grid.py

import logging
import numbers

import numpy as np

from config import DIRECTIONS, RISK_WEIGHT, ANIMAL_WEIGHT
from errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def check_positive_int(name, value):
    """Raise InvalidConfiguration unless `value` is an integer >= 1 (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value}")
    return int(value)


def _as_square(name, values, grid_size, dtype):
    try:
        arr = np.asarray(values, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} is not a rectangular grid: {exc}") from exc
    if arr.shape != (grid_size, grid_size):
        raise InvalidConfiguration(
            f"{name} has shape {arr.shape}, expected ({grid_size}, {grid_size})"
        )
    return arr


def _as_flags(name, values, grid_size):
    """0/1 (or bool) grid → bool array; any other value is rejected."""
    arr = _as_square(name, values, grid_size, np.float64)
    if not np.all(np.isin(arr, (0.0, 1.0))):
        raise InvalidConfiguration(f"{name} values must be 0 or 1")
    return arr != 0


class PatrolGrid:
    """
    Square patrol area. Holds, per cell:
      - terrain:  True = passable, False = impassable (input 1 / 0)
      - risk:     poaching risk in [0,1] (0 on impassable cells by convention)
      - animals:  animal presence flag
      - coverage: visits by any ranger during the current computation
    terrain/risk/animals are fixed once built; only coverage changes.
    """

    def __init__(self, risk_map, animal_map, terrain_map, grid_size=None):
        if grid_size is None:
            try:
                grid_size = len(risk_map)
            except TypeError as exc:
                raise InvalidConfiguration(f"risk_map is not a grid: {risk_map!r}") from exc
        self.grid_size = check_positive_int("grid_size", grid_size)
        shape = (self.grid_size, self.grid_size)

        self.risk = _as_square("risk_map", risk_map, self.grid_size, np.float64)
        self.animals = _as_flags("animal_map", animal_map, self.grid_size)
        self.terrain = _as_flags("terrain_map", terrain_map, self.grid_size)

        if not np.all(np.isfinite(self.risk)):
            raise InvalidConfiguration("risk_map contains non-finite values")
        if np.any((self.risk < 0.0) | (self.risk > 1.0)):
            raise InvalidConfiguration("risk_map values must lie in [0, 1]")

        self.coverage = np.zeros(shape, dtype=np.int64)

    @classmethod
    def from_params(cls, params):
        """
        Build a grid from a Parameters mapping. Accepts the camelCase keys
        (gridSize, riskMap, animalMap, terrainMap) or their snake_case forms.
        """
        def pick(camel, snake, default=None):
            if camel in params:
                return params[camel]
            return params.get(snake, default)

        risk_map = pick("riskMap", "risk_map")
        animal_map = pick("animalMap", "animal_map")
        terrain_map = pick("terrainMap", "terrain_map")
        if risk_map is None or animal_map is None or terrain_map is None:
            raise InvalidConfiguration("riskMap, animalMap and terrainMap are all required")
        return cls(risk_map, animal_map, terrain_map, grid_size=pick("gridSize", "grid_size"))

    def in_bounds(self, row, col):
        return 0 <= row < self.grid_size and 0 <= col < self.grid_size

    def is_passable(self, row, col):
        if not self.in_bounds(row, col):
            return False
        return bool(self.terrain[row, col])

    def neighbors(self, row, col):
        """In-bounds passable cells around (row, col), in DIRECTIONS order."""
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = row + dr, col + dc
            if self.is_passable(nr, nc):
                result.append((nr, nc))
        return result

    def passable_cells(self):
        """(N,2) array of passable (row, col), row-major."""
        return np.argwhere(self.terrain)

    def has_passable_cell(self):
        return bool(self.terrain.any())

    def visit(self, row, col):
        self.coverage[row, col] += 1

    def score(self, row, col):
        """
        Attractiveness of stepping onto (row, col): risk and animal presence,
        divided down by how often the cell has already been patrolled.
        """
        value = self.risk[row, col] * RISK_WEIGHT
        if self.animals[row, col]:
            value += ANIMAL_WEIGHT
        return float(value / (self.coverage[row, col] + 1))
