# -*- coding: utf-8 -*-
import pytest

from starbattle.grid.parser import build_grid_model, parse_grid_text

# 2x5 rectangles with a few border cells moved between neighbouring regions.
# Built around the star layout below, so at least one solution exists.
PUZZLE_10 = "\n".join(
    [
        "0000111111",
        "0000011113",
        "2222233333",
        "4222233333",
        "4444455555",
        "4444455557",
        "6666677777",
        "6666677777",
        "6888899999",
        "8888899999",
    ]
)

KNOWN_STARS_10 = [
    (0, 0), (0, 5),
    (1, 2), (1, 7),
    (2, 4), (2, 9),
    (3, 1), (3, 6),
    (4, 3), (4, 8),
    (5, 0), (5, 5),
    (6, 2), (6, 7),
    (7, 4), (7, 9),
    (8, 1), (8, 6),
    (9, 3), (9, 8),
]

# region 0 is two horizontally adjacent cells, so it can never hold two stars
UNSOLVABLE_10 = "\n".join(
    ["0011111111", "1111111111"] + [str(r) * 10 for r in range(2, 10)]
)

SINGLE_REGION_10 = "\n".join(["0" * 10] * 10)

# one region per row, hex digits 0..D
PUZZLE_14 = "\n".join("0123456789ABCD"[r] * 14 for r in range(14))

# 14x14 star layout: row r holds {c, c+5, c+10} mod 14, c stepping by 2 (and once by 7)
ROW_STARS_14 = [
    (0, 5, 10),
    (2, 7, 12),
    (0, 4, 9),
    (2, 6, 11),
    (4, 8, 13),
    (1, 6, 10),
    (3, 8, 12),
    (1, 5, 10),
    (3, 7, 12),
    (0, 5, 9),
    (2, 7, 11),
    (4, 9, 13),
    (1, 6, 11),
    (3, 8, 13),
]

KNOWN_STARS_14 = [(r, c) for r, cols in enumerate(ROW_STARS_14) for c in cols]

# Regions 0..C are exactly the three stars of rows 0..12; region D takes every other cell.
# A wrong star is either next to a placed star or takes a cell from a three-cell region.
TIGHT_PUZZLE_14 = "\n".join(
    "".join(
        f"{r:X}" if r < 13 and c in ROW_STARS_14[r] else "D"
        for c in range(14)
    )
    for r in range(14)
)

QUAD_REGIONS_4 = [
    0, 0, 1, 1,
    0, 0, 1, 1,
    2, 2, 3, 3,
    2, 2, 3, 3,
]

QUAD_SOLUTION_4 = [(0, 1), (1, 3), (2, 0), (3, 2)]


@pytest.fixture
def grid10():
    return parse_grid_text(PUZZLE_10)


@pytest.fixture
def grid14():
    return parse_grid_text(PUZZLE_14)


@pytest.fixture
def tight_grid14():
    return parse_grid_text(TIGHT_PUZZLE_14)


@pytest.fixture
def quad_grid():
    return build_grid_model(QUAD_REGIONS_4, dimension=4, stars_per_line=1)


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(PUZZLE_10 + "\n", encoding="utf-8")
    return path
