# risk_stats.py

import logging
import math

import numpy as np

from config import MITIGATION_FACTOR, HIGH_RISK_THRESHOLD

logger = logging.getLogger(__name__)


def format_percent(value):
    """Whole-number percentage string, halves rounded away from zero: 36.5 → '37%'."""
    rounded = math.floor(abs(value) + 0.5)
    if value < 0:
        rounded = -rounded
    return f"{int(rounded)}%"


def compute_statistics(grid, mitigation=MITIGATION_FACTOR, threshold=HIGH_RISK_THRESHOLD):
    """
    Before/after risk of a finished patrol plan, over passable cells only.

    A patrolled cell keeps `mitigation` of its risk. Means are taken over all
    grid_size² cells, so impassable cells (risk 0) dilute both equally.
    Call only once every route is complete.
    """
    passable = grid.terrain
    covered = grid.coverage > 0
    risk = np.where(passable, grid.risk, 0.0)

    total_risk = float(risk.sum())
    covered_risk = float(np.where(covered, risk * mitigation, risk).sum())

    n_cells = grid.grid_size * grid.grid_size
    before = total_risk / n_cells
    after = covered_risk / n_cells

    if before > 0:
        reduction = (before - after) / before * 100.0
    else:
        reduction = 0.0

    high = passable & (grid.risk >= threshold)
    n_high = int(high.sum())
    if n_high > 0:
        high_cov = int((high & covered).sum()) / n_high * 100.0
    else:
        high_cov = 100.0

    stats = {
        'before_risk': before,
        'after_risk': after,
        'risk_reduction': format_percent(reduction),
        'high_risk_coverage': format_percent(high_cov),
    }
    logger.info("Risk %.4f → %.4f (%s), high-risk coverage %s",
                before, after, stats['risk_reduction'], stats['high_risk_coverage'])
    return stats


def summarize(stats):
    """Display form: mean risks as one-decimal percentages."""
    return {
        'before_risk': f"{stats['before_risk'] * 100:.1f}%",
        'after_risk': f"{stats['after_risk'] * 100:.1f}%",
        'risk_reduction': stats['risk_reduction'],
        'high_risk_coverage': stats['high_risk_coverage'],
    }
