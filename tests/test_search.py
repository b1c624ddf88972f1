# -*- coding: utf-8 -*-
import numpy as np
import pytest

from starbattle.csp.propagation import create_root_state
from starbattle.csp.search import SearchContext, add_star, solve_battle_grid, solve_with_stats
from starbattle.eval.verify import find_violations, verify_solution
from starbattle.grid.parser import build_grid_model, parse_grid_text

from conftest import KNOWN_STARS_14, QUAD_SOLUTION_4, SINGLE_REGION_10, UNSOLVABLE_10


def test_solves_10x10(grid10):
    solution = solve_battle_grid(grid10)

    assert solution is not None
    assert solution.star_pos.sum() == 20
    assert find_violations(grid10, solution.star_pos) == []


def test_solution_has_k_stars_per_line_and_region(grid10):
    solution = solve_battle_grid(grid10)
    stars = solution.star_pos.reshape(10, 10)

    assert list(stars.sum(axis=1)) == [2] * 10
    assert list(stars.sum(axis=0)) == [2] * 10
    for cells in grid10.cells_of_region:
        assert sum(solution.star_pos[i] for i in cells) == 2


def test_stars_are_never_marked_valid(grid10):
    solution = solve_battle_grid(grid10)
    assert not np.any(solution.star_pos & solution.valid)


def test_search_is_deterministic(grid10):
    first = solve_battle_grid(grid10)
    second = solve_battle_grid(parse_grid_text("\n".join(
        "".join(f"{grid10.region_at(r, c):X}" for c in range(10)) for r in range(10)
    )))
    assert np.array_equal(first.star_pos, second.star_pos)
    assert np.array_equal(first.valid, second.valid)


def test_quad_grid_finds_first_solution_in_row_major_order(quad_grid):
    solution = solve_battle_grid(quad_grid)
    assert solution.star_cells(4) == QUAD_SOLUTION_4
    assert verify_solution(quad_grid, solution.star_pos)


def test_single_region_grid_has_no_solution():
    grid = parse_grid_text(SINGLE_REGION_10)
    ctx = SearchContext.for_grid(grid)

    assert solve_battle_grid(grid, ctx) is None
    # rejected by the root feasibility check, before any placement
    assert ctx.nodes_visited == 0


def test_impossible_region_has_no_solution():
    grid = parse_grid_text(UNSOLVABLE_10)
    outcome = solve_with_stats(grid)

    assert outcome.solution is None
    assert not outcome.solved
    assert outcome.nodes_visited > 0
    assert outcome.pruned > 0


def test_unsolvable_small_grid():
    # 2x2 with K=1: every pair of cells is adjacent
    grid = build_grid_model([0, 0, 1, 1], dimension=2, stars_per_line=1)
    assert solve_battle_grid(grid) is None


def test_add_star_leaves_caller_state_untouched(grid10):
    ctx = SearchContext.for_grid(grid10)
    root = create_root_state(grid10)
    before = root.copy()

    add_star(ctx, root, 0)

    assert np.array_equal(root.valid, before.valid)
    assert np.array_equal(root.free_row, before.free_row)
    assert np.array_equal(root.free_region, before.free_region)


def test_add_star_on_invalid_cell_returns_none(grid10):
    ctx = SearchContext.for_grid(grid10)
    state = create_root_state(grid10)
    state.valid[3] = False

    assert add_star(ctx, state, 3) is None
    assert ctx.star_count == 0


def test_failed_branch_restores_engine_counters():
    grid = parse_grid_text(UNSOLVABLE_10)
    ctx = SearchContext.for_grid(grid)
    root = create_root_state(grid)

    assert add_star(ctx, root, 2) is None
    assert ctx.star_count == 0
    assert not ctx.star_pos.any()


def test_solve_with_stats(grid10):
    outcome = solve_with_stats(grid10)

    assert outcome.solved
    assert outcome.elapsed >= 0
    assert outcome.nodes_visited >= 20
    stats = outcome.stats()
    assert set(stats) == {"nodes_visited", "pruned", "backtracks", "elapsed"}


def test_solves_14x14_with_three_stars(tight_grid14):
    outcome = solve_with_stats(tight_grid14)
    solution = outcome.solution

    assert solution is not None
    assert solution.star_cells(14) == KNOWN_STARS_14
    assert find_violations(tight_grid14, solution.star_pos) == []

    stars = solution.star_pos.reshape(14, 14)
    assert list(stars.sum(axis=1)) == [3] * 14
    assert list(stars.sum(axis=0)) == [3] * 14
    for cells in tight_grid14.cells_of_region:
        assert sum(solution.star_pos[i] for i in cells) == 3

    # every wrong star is pruned right after placement
    assert outcome.backtracks == 0
    assert outcome.nodes_visited <= tight_grid14.cell_count


@pytest.mark.slow
def test_solves_14x14_row_regions(grid14):
    solution = solve_battle_grid(grid14)

    assert solution is not None
    assert find_violations(grid14, solution.star_pos) == []
