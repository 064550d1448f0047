import numpy as np
import pytest

from coordshape.core.domain.models.search_mode import SearchMode


def _grid_angles(budget):
    return {
        round(2.0 * np.pi * i / budget.grid_steps, 12)
        for i in range(0, budget.grid_steps, budget.grid_stride)
    }


def test_grid_sizes():
    assert SearchMode.FAST.budget.grid_points == 27
    assert SearchMode.DEFAULT.budget.grid_points == 216
    assert SearchMode.INTENSIVE.budget.grid_points == 1728


def test_grids_are_nested():
    fast = _grid_angles(SearchMode.FAST.budget)
    default = _grid_angles(SearchMode.DEFAULT.budget)
    intensive = _grid_angles(SearchMode.INTENSIVE.budget)

    assert fast <= default <= intensive


def test_effort_grows_with_mode():
    fast, default, intensive = (mode.budget for mode in SearchMode)

    for field in ("num_restarts", "steps_per_run", "refinement_steps"):
        assert getattr(fast, field) < getattr(default, field) < getattr(intensive, field)
    assert intensive.reassignment_interval <= default.reassignment_interval
    assert default.reassignment_interval <= fast.reassignment_interval


def test_from_name():
    assert SearchMode.from_name("fast") is SearchMode.FAST
    assert SearchMode.from_name(" Intensive ") is SearchMode.INTENSIVE

    with pytest.raises(ValueError, match="Unknown search mode"):
        SearchMode.from_name("exhaustive")
