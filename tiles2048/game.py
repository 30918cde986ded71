import copy
import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

from tiles2048.board import (
    Board,
    any_at_least,
    board_to_values,
    count_empty,
    equal,
    merge_left,
    new_board,
    rotate_cw_n,
)
from tiles2048.config import GameConfig

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Move direction; the value is the number of clockwise turns that
    brings the direction to the left edge."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 3


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


_KEY_DIRECTIONS = {
    "a": Direction.LEFT,
    "h": Direction.LEFT,
    "left": Direction.LEFT,
    "s": Direction.DOWN,
    "j": Direction.DOWN,
    "down": Direction.DOWN,
    "d": Direction.RIGHT,
    "l": Direction.RIGHT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "k": Direction.UP,
    "up": Direction.UP,
}


def direction_of_key(key) -> Direction | None:
    """Map an input intent to a direction, or ``None`` if it is not a move."""
    if isinstance(key, Direction):
        return key
    if isinstance(key, bool):
        return None
    if isinstance(key, (int, np.integer)):
        return Direction(int(key)) if 0 <= key < len(Direction) else None
    if isinstance(key, str):
        return _KEY_DIRECTIONS.get(key.strip().lower())
    return None


def spawn(
    board: Board,
    rng: random.Random,
    four_probability: float = GameConfig.FOUR_PROBABILITY,
) -> Board:
    """
    Place a 2 (or, with ``four_probability``, a 4) on a random empty cell.

    The cell index is drawn first, then the tile size, both from ``rng``.
    Empty cells are counted in row-major order.
    """
    zeros = count_empty(board)
    assert zeros > 0, "spawn called on a full board"

    tile = rng.randrange(zeros)
    magnitude = 2 if rng.random() < four_probability else 1

    out = board.copy()
    rows, cols = np.nonzero(out == 0)
    out[rows[tile], cols[tile]] = magnitude
    logger.debug("spawned %d at (%d, %d)", 1 << magnitude, rows[tile], cols[tile])
    return out


def score_delta(before: Board, after: Board, target: int = GameConfig.TARGET_TILE) -> int:
    """
    Points earned by the move that turned ``before`` into ``after``.

    Only the tile histograms are compared. Every merge removes two tiles of
    magnitude ``m`` and adds one of ``m + 1`` worth ``2 ** (m + 1)``; tiles
    created at ``m + 1`` and merged again show up as extra missing tiles one
    rank up, so the upgrades are carried upward.
    """
    # tiles past the target still count, so size the histogram to the largest one
    bins = max(target, int(before.max()), int(after.max())) + 1
    delta = [
        int(b) - int(a)
        for b, a in zip(
            np.bincount(before.ravel(), minlength=bins),
            np.bincount(after.ravel(), minlength=bins),
        )
    ]

    score = 0
    for m in range(1, bins - 1):
        upgrades = delta[m] // 2
        if upgrades <= 0:
            continue
        score += upgrades << (m + 1)
        delta[m + 1] += upgrades
    return score


def apply_direction(
    board: Board, direction: Direction, target: int = GameConfig.TARGET_TILE
) -> tuple[Board, int]:
    """Slide ``board`` in ``direction``; returns the new board and the points
    earned. No tile is spawned."""
    turns = int(direction)
    merged = merge_left(rotate_cw_n(board, turns))
    moved = rotate_cw_n(merged, 4 - turns)
    return moved, score_delta(board, moved, target)


def _changes(board: Board, direction: Direction) -> bool:
    rotated = rotate_cw_n(board, direction)
    return not equal(rotated, merge_left(rotated))


def legal_moves(board: Board) -> list[Direction]:
    return [d for d in Direction if _changes(board, d)]


def is_victory(board: Board, target: int = GameConfig.TARGET_TILE) -> bool:
    return any_at_least(board, target)


def is_loss(board: Board) -> bool:
    return not any(_changes(board, d) for d in Direction)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game for renderers"""

    board: np.ndarray
    score: int
    status: Status
    moves: int


class Game:
    """2048 game state"""

    board: Board
    score: int

    def __init__(
        self,
        seed: int | None = None,
        target: int = GameConfig.TARGET_TILE,
        initial_tiles: int = GameConfig.INITIAL_TILES,
    ):
        if target < 1:
            raise ValueError(f"target must be at least 1, got {target}")
        if not 0 <= initial_tiles <= GameConfig.SIZE**2:
            raise ValueError(f"initial_tiles out of range: {initial_tiles}")

        self.target = target
        self.seed = seed
        self._rng = random.Random(seed)
        self.board = new_board()
        self.score = 0
        self.moves = 0
        self._status = None
        for _ in range(initial_tiles):
            self._place()

    def _place(self):
        self.board = spawn(self.board, self._rng)

    def _evaluate(self) -> Status:
        if is_victory(self.board, self.target):
            return Status.WON
        if is_loss(self.board):
            return Status.LOST
        return Status.PLAYING

    @property
    def status(self) -> Status:
        # cached against the board bytes; callers may assign or edit the board
        key = self.board.tobytes()
        if self._status is None or self._status[0] != key:
            self._status = (key, self._evaluate())
        return self._status[1]

    @property
    def won(self) -> bool:
        return self.status is Status.WON

    @property
    def lost(self) -> bool:
        return self.status is Status.LOST

    @property
    def over(self) -> bool:
        return self.status is not Status.PLAYING

    def move(self, intent) -> bool:
        """
        Play a move in the game. Return whether the board changed.

        ``intent`` is a ``Direction``, its integer value or a key name
        (see ``direction_of_key``). Unknown intents, moves that do not
        change the board and moves on a finished game are ignored.
        """
        if self.over:
            return False

        direction = direction_of_key(intent)
        if direction is None:
            logger.debug("ignoring intent %r", intent)
            return False

        board, points = apply_direction(self.board, direction, self.target)
        if equal(board, self.board):
            return False

        self.board = board
        self.score += points
        self._place()
        self.moves += 1
        logger.debug("move %d: %s, +%d points", self.moves, direction.name, points)

        status = self.status
        if status is not Status.PLAYING:
            logger.debug("game %s with score %d", status.value, self.score)
        return True

    def clone(self) -> "Game":
        g = copy.copy(self)
        g.board = self.board.copy()
        g._rng = random.Random()
        g._rng.setstate(self._rng.getstate())
        return g

    def valid(self, direction) -> bool:
        return self.clone().move(direction)

    def legal_moves(self) -> list[Direction]:
        if self.over:
            return []
        return legal_moves(self.board)

    def snapshot(self) -> Snapshot:
        board = self.board.copy()
        board.flags.writeable = False
        return Snapshot(board=board, score=self.score, status=self.status, moves=self.moves)

    def display(self):
        for row in board_to_values(self.board):
            print(row.tolist())
