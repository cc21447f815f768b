# ranger.py

import logging

import numpy as np

from errors import NoPassableCells

logger = logging.getLogger(__name__)


class Ranger:
    """
    Each Ranger maintains:
      - id:   sequential ranger id (generation order)
      - pos:  current (row, col)
      - path: every cell visited so far, start cell first
    The walk reads and writes the grid's shared coverage after every step, so a
    ranger sees the visits of all rangers generated before it, and its own.
    """

    def __init__(self, id):
        self.id = id
        self.pos = None
        self.path = []

    def move_to(self, grid, cell):
        """Step onto `cell`, append it to the path and count the visit."""
        self.pos = (int(cell[0]), int(cell[1]))
        self.path.append(self.pos)
        grid.visit(*self.pos)

    def start(self, grid, rng):
        """
        Pick the start cell uniformly among all passable cells and count it as
        visited.
        """
        cells = grid.passable_cells()
        if len(cells) == 0:
            raise NoPassableCells("no passable cell to start a route from")
        idx = rng.integers(len(cells))
        self.move_to(grid, cells[idx])
        logger.debug("Ranger %d starts at %s", self.id, self.pos)

    def choose_next(self, grid):
        """
        Highest-scoring passable neighbor of the current cell, or None when
        boxed in. Only a strictly greater score replaces the current best, so
        ties keep the earliest neighbor (up, down, left, right).
        """
        best_score = -np.inf
        best_cell = None
        for (nr, nc) in grid.neighbors(*self.pos):
            score = grid.score(nr, nc)
            if score > best_score:
                best_score = score
                best_cell = (nr, nc)
        return best_cell

    def walk(self, grid, max_steps, chooser=None):
        """
        Extend the path until it holds `max_steps` cells or no neighbor is left.
        `chooser(grid)` overrides the greedy choice (used by the random baseline).
        """
        chooser = chooser or self.choose_next
        for step in range(1, max_steps):
            nxt = chooser(grid)
            if nxt is None:
                logger.debug("Ranger %d stopped early at step %d: no passable neighbor", self.id, step)
                break
            self.move_to(grid, nxt)
        return self.path

    def route(self):
        return {
            'ranger_id': self.id,
            'path': [[r, c] for (r, c) in self.path],
        }
