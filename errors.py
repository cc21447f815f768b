# errors.py


class PatrolError(ValueError):
    """Base class for every failure raised by the route optimizer."""


class InvalidConfiguration(PatrolError):
    """
    Non-positive grid size / ranger count / step budget, or input maps whose
    shape or values do not match the grid.
    """


class NoPassableCells(PatrolError):
    """Every cell is impassable, so no ranger can be placed."""
