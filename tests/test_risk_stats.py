"""
Before/after risk statistics on hand-built coverage.
"""

import pytest

from grid import PatrolGrid
from risk_stats import compute_statistics, format_percent, summarize


def _small_grid():
    # (1,0) is impassable; high-risk cells are (0,0) and (1,1).
    return PatrolGrid(
        [[1.0, 0.5], [0.0, 0.8]],
        [[False, True], [False, False]],
        [[1, 1], [0, 1]],
    )


def test_statistics_by_hand():
    grid = _small_grid()
    grid.visit(0, 0)
    stats = compute_statistics(grid)

    assert stats['before_risk'] == pytest.approx(2.3 / 4)
    assert stats['after_risk'] == pytest.approx(1.5 / 4)
    assert stats['risk_reduction'] == "35%"
    assert stats['high_risk_coverage'] == "50%"


def test_no_coverage_means_no_reduction():
    stats = compute_statistics(_small_grid())
    assert stats['after_risk'] == pytest.approx(stats['before_risk'])
    assert stats['risk_reduction'] == "0%"
    assert stats['high_risk_coverage'] == "0%"


def test_full_coverage_gives_mitigation_factor():
    grid = _small_grid()
    for (r, c) in grid.passable_cells():
        grid.visit(r, c)
    stats = compute_statistics(grid)
    assert stats['after_risk'] == pytest.approx(stats['before_risk'] * 0.2)
    assert stats['risk_reduction'] == "80%"
    assert stats['high_risk_coverage'] == "100%"


def test_repeat_visits_do_not_stack():
    grid = _small_grid()
    grid.visit(0, 1)
    once = compute_statistics(grid)
    grid.visit(0, 1)
    grid.visit(0, 1)
    assert compute_statistics(grid) == once


def test_no_high_risk_cells_is_full_coverage():
    grid = PatrolGrid([[0.1, 0.2], [0.3, 0.69]], [[False] * 2] * 2, [[1] * 2] * 2)
    assert compute_statistics(grid)['high_risk_coverage'] == "100%"


def test_impassable_risk_is_ignored():
    grid = PatrolGrid([[0.9, 0.0], [0.0, 0.0]], [[False] * 2] * 2, [[0, 1], [1, 1]])
    stats = compute_statistics(grid)
    assert stats['before_risk'] == 0.0
    assert stats['risk_reduction'] == "0%"
    assert stats['high_risk_coverage'] == "100%"


def test_custom_constants():
    grid = _small_grid()
    grid.visit(0, 1)
    stats = compute_statistics(grid, mitigation=0.0, threshold=0.5)
    assert stats['after_risk'] == pytest.approx(1.8 / 4)
    assert stats['high_risk_coverage'] == "33%"


@pytest.mark.parametrize("value, expected", [
    (0.0, "0%"), (36.5, "37%"), (36.49, "36%"), (99.6, "100%"), (100.0, "100%"),
])
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_summarize():
    stats = {'before_risk': 0.3456, 'after_risk': 0.1, 'risk_reduction': "71%",
             'high_risk_coverage': "40%"}
    assert summarize(stats) == {'before_risk': "34.6%", 'after_risk': "10.0%",
                                'risk_reduction': "71%", 'high_risk_coverage': "40%"}
