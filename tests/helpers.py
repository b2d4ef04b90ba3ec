from block_puzzle.game import COLS, Piece, TetrominoType, shape_for


def place_piece(game, kind, x=None, y=0):
    """Replace the active piece with a known one at (x, y)."""
    shape = shape_for(kind)
    if x is None:
        x = COLS // 2 - shape.shape[1] // 2
    piece = Piece(kind=kind, shape=shape, x=x, y=y)
    game.current_piece = piece
    return piece


def fill_rows(grid, rows, value=1, gap=None):
    """Fill whole rows with `value`, optionally leaving column `gap` empty."""
    for y in rows:
        grid.grid[y, :] = value
        if gap is not None:
            grid.grid[y, gap] = 0


def o_piece(x, y):
    return Piece(kind=TetrominoType.O, shape=shape_for(TetrominoType.O), x=x, y=y)
