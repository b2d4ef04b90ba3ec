import numpy as np

from block_puzzle.game import COLS, ROWS, GameGrid, Piece, TetrominoType, shape_for
from tests.helpers import fill_rows, o_piece


def _reference_collides(grid, piece):
    for x, y, _ in piece.cells():
        if not 0 <= x < COLS:
            return True
        if y >= ROWS:
            return True
        if y >= 0 and grid.grid[y, x] != 0:
            return True
    return False


def test_new_grid_is_empty():
    grid = GameGrid()
    assert grid.grid.shape == (ROWS, COLS)
    assert not grid.grid.any()


def test_collides_with_walls_and_floor():
    grid = GameGrid()
    assert not grid.collides(o_piece(0, 0))
    assert not grid.collides(o_piece(COLS - 2, ROWS - 2))
    assert grid.collides(o_piece(-1, 0))
    assert grid.collides(o_piece(COLS - 1, 0))
    assert grid.collides(o_piece(0, ROWS - 1))


def test_cells_above_board_only_collide_horizontally():
    grid = GameGrid()
    fill_rows(grid, [0])
    grid.grid[0, 4] = 0
    piece = o_piece(4, -2)
    assert not grid.collides(piece)
    piece.y = -1
    assert grid.collides(piece)
    assert grid.collides(o_piece(-1, -3))


def test_empty_template_rows_never_collide():
    grid = GameGrid()
    # The I template's top row is empty, so its cells sit one row below y
    piece = Piece(TetrominoType.I, shape_for(TetrominoType.I), x=0, y=ROWS - 2)
    assert not grid.collides(piece)
    piece.y += 1
    assert grid.collides(piece)


def test_collides_matches_cell_by_cell_rule():
    rng = np.random.default_rng(11)
    grid = GameGrid()
    grid.grid[:] = (rng.random((ROWS, COLS)) < 0.3) * 3
    for kind in TetrominoType:
        for x in range(-3, COLS + 1):
            for y in range(-3, ROWS + 1):
                piece = Piece(kind, shape_for(kind), x=x, y=y)
                assert grid.collides(piece) == _reference_collides(grid, piece)


def test_merge_writes_piece_values():
    grid = GameGrid()
    piece = Piece(TetrominoType.T, shape_for(TetrominoType.T), x=3, y=ROWS - 2)
    grid.merge(piece)
    assert grid.grid[ROWS - 2, 4] == int(TetrominoType.T)
    assert list(grid.grid[ROWS - 1, 3:6]) == [6, 6, 6]
    assert np.count_nonzero(grid.grid) == 4


def test_merge_skips_cells_above_board():
    grid = GameGrid()
    grid.merge(o_piece(2, -1))
    assert np.count_nonzero(grid.grid) == 2
    assert list(grid.grid[0, 2:4]) == [4, 4]


def test_clear_without_full_rows_is_noop():
    grid = GameGrid()
    fill_rows(grid, range(ROWS - 5, ROWS), value=2, gap=7)
    before = grid.clone_state()
    assert grid.clear_full_rows() == 0
    assert np.array_equal(grid.grid, before)


def test_clear_two_bottom_rows():
    grid = GameGrid()
    fill_rows(grid, [ROWS - 2, ROWS - 1], value=5)
    assert grid.clear_full_rows() == 2
    assert not grid.grid.any()


def test_clear_collapses_rows_above_in_order():
    grid = GameGrid()
    fill_rows(grid, [ROWS - 1, ROWS - 3], value=1)
    grid.grid[ROWS - 2, 0] = 2
    grid.grid[ROWS - 4, 5] = 3
    grid.grid[ROWS - 5, 9] = 7
    assert grid.clear_full_rows() == 2
    assert grid.grid[ROWS - 1, 0] == 2
    assert grid.grid[ROWS - 2, 5] == 3
    assert grid.grid[ROWS - 3, 9] == 7
    assert np.count_nonzero(grid.grid) == 3


def test_clear_adjacent_full_rows_rechecks_same_index():
    grid = GameGrid()
    fill_rows(grid, range(ROWS - 4, ROWS), value=1)
    grid.grid[ROWS - 5, 2] = 4
    assert grid.clear_full_rows() == 4
    assert grid.grid[ROWS - 1, 2] == 4
    assert np.count_nonzero(grid.grid) == 1


def test_clear_entire_board():
    grid = GameGrid()
    fill_rows(grid, range(ROWS), value=3)
    assert grid.clear_full_rows() == ROWS
    assert not grid.grid.any()


def test_reset_empties_grid():
    grid = GameGrid()
    fill_rows(grid, range(5))
    grid.reset()
    assert not grid.grid.any()
