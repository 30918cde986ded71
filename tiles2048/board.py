"""
Board primitives for 2048.

A board is a 4x4 ``uint8`` array of tile magnitudes: 0 is an empty cell and
``m >= 1`` is a tile showing ``2 ** m``. Every function here returns a new
array and leaves its arguments untouched.
"""

import numpy as np

from tiles2048.config import GameConfig

SIZE = GameConfig.SIZE

Board = np.ndarray


def new_board() -> Board:
    return np.zeros((SIZE, SIZE), dtype=np.uint8)


def board_from_values(rows) -> Board:
    """Build a board from displayed tile values (0, 2, 4, 8, ...)."""
    values = np.asarray(rows, dtype=np.int64)
    if values.shape != (SIZE, SIZE):
        raise ValueError(f"Board must be {SIZE}x{SIZE}, got shape {values.shape}")

    tiles = values[values != 0]
    if ((tiles < 2) | ((tiles & (tiles - 1)) != 0)).any():
        raise ValueError(f"Tile values must be 0 or a power of two >= 2: {rows}")

    board = new_board()
    nonzero = values != 0
    board[nonzero] = np.log2(values[nonzero]).astype(np.uint8)
    return board


def board_to_values(board: Board) -> np.ndarray:
    magnitudes = board.astype(np.int64)
    return np.where(magnitudes == 0, 0, np.left_shift(1, magnitudes))


def count_empty(board: Board) -> int:
    return int(np.count_nonzero(board == 0))


def equal(a: Board, b: Board) -> bool:
    return bool(np.array_equal(a, b))


def any_at_least(board: Board, threshold: int) -> bool:
    return bool((board >= threshold).any())


def rotate_cw(board: Board) -> Board:
    """Quarter turn clockwise: ``out[i][j] = board[N - 1 - j][i]``."""
    return np.rot90(board, -1).copy()


def rotate_cw_n(board: Board, n: int) -> Board:
    return np.rot90(board, -(n % 4)).copy()


def compact_row(row) -> np.ndarray:
    """Slide the non-zero cells of ``row`` to the front, keeping their order."""
    row = np.asarray(row)
    tiles = row[row != 0]
    out = np.zeros_like(row)
    out[: len(tiles)] = tiles
    return out


def merge_row_left(row) -> np.ndarray:
    """
    Slide and merge one row toward index 0.

    A single left-to-right pass over the compacted row merges each pair of
    equal neighbours into one tile of the next magnitude. A freshly merged
    tile is never merged again in the same pass, so ``[1, 1, 1]`` becomes
    ``[2, 1, 0]`` and ``[1, 1, 1, 1]`` becomes ``[2, 2, 0, 0]``.
    """
    row = compact_row(row)
    for k in range(len(row) - 1):
        if row[k] == 0 or row[k] != row[k + 1]:
            continue
        row[k] += 1
        row[k + 1] = 0
    return compact_row(row)


def merge_left(board: Board) -> Board:
    return np.stack([merge_row_left(row) for row in board])
