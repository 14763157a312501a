"""
Game state management for n x n TicTacToe.
Tracks the board, whose turn it is, and the game status.
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .errors import (
    GameOverError,
    IllegalMoveError,
    InvalidSizeError,
    OutOfRangeIndexError,
)


class Cell(Enum):
    """The three states a board cell can be in."""
    EMPTY = GameConfig.EMPTY_MARK
    PLAYER = GameConfig.PLAYER_MARK
    COMPUTER = GameConfig.COMPUTER_MARK


class Player(Enum):
    """The two sides in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> Cell:
        """The cell value this player writes."""
        return Cell.PLAYER if self == Player.HUMAN else Cell.COMPUTER


class Outcome(Enum):
    """Result of scanning the board for a completed line."""
    NO_WINNER = "no_winner"
    PLAYER_WINS = "player_wins"
    COMPUTER_WINS = "computer_wins"


class GameStatus(Enum):
    """Session state. Everything except IN_PROGRESS is terminal."""
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Board:
    """
    An n x n TicTacToe board.

    Cells are stored in a numpy array of marker characters. Besides
    (row, col) access, every cell has a linear index in [0, n*n),
    numbered row-major:

        0 1 2
        3 4 5
        6 7 8
    """

    def __init__(self, size: int):
        """
        Create an empty board.

        Args:
            size: Number of rows (and columns). Must be a positive integer.

        Raises:
            InvalidSizeError: If size is not a positive integer or is too large.
        """
        # bool is an int subclass, but True is not a board size
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidSizeError(f"Board size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidSizeError(f"Board size must be positive, got {size}")

        self.size = int(size)

        # Huge sizes fail in numpy before any cell is set
        try:
            self.grid = np.full((self.size, self.size), Cell.EMPTY.value, dtype="<U1")
        except (MemoryError, ValueError) as e:
            raise InvalidSizeError(f"Board size {size} is too large: {e}") from e

    @classmethod
    def create(cls, size: int) -> "Board":
        """Create a fresh board with all cells empty."""
        return cls(size)

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    # ==================== INDEXING ====================

    def _check_index(self, index: int):
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise OutOfRangeIndexError(f"Cell index must be an integer, got {index!r}")
        # Negative indices would wrap around in numpy, so reject them here
        if not 0 <= index < self.cell_count:
            raise OutOfRangeIndexError(
                f"Cell index {index} is out of range (0-{self.cell_count - 1})"
            )

    def index_to_coords(self, index: int) -> Tuple[int, int]:
        """
        Convert a linear index to (row, col).

        Raises:
            OutOfRangeIndexError: If index is not in [0, n*n).
        """
        self._check_index(index)
        row, col = divmod(int(index), self.size)
        return row, col

    def coords_to_index(self, row: int, col: int) -> int:
        """
        Convert (row, col) to a linear index.

        Raises:
            OutOfRangeIndexError: If row or col is off the board.
        """
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfRangeIndexError(
                f"Position ({row}, {col}) is off a {self.size}x{self.size} board"
            )
        return row * self.size + col

    # ==================== CELL ACCESS ====================

    def cell_at(self, index: int) -> Cell:
        """
        Get the cell at a linear index.

        Args:
            index: Linear index in [0, n*n).

        Returns:
            The Cell stored there.

        Raises:
            OutOfRangeIndexError: If index is not in [0, n*n).
        """
        row, col = self.index_to_coords(index)
        return Cell(self.grid[row, col])

    def is_legal(self, index: int) -> bool:
        """
        Check if a move at index is allowed.

        This is the only legality rule: the index must be on the board
        and the cell must be empty. Never raises.
        """
        try:
            return self.cell_at(index) == Cell.EMPTY
        except OutOfRangeIndexError:
            return False

    def apply_move(self, index: int, cell: Cell):
        """
        Place a mark on the board.

        Args:
            index: Linear index of the target cell.
            cell: Cell.PLAYER or Cell.COMPUTER.

        Raises:
            IllegalMoveError: If the cell is occupied or cell is EMPTY.
            OutOfRangeIndexError: If index is not in [0, n*n).
        """
        # Only real marks can be placed
        if cell not in (Cell.PLAYER, Cell.COMPUTER):
            raise IllegalMoveError(f"Cannot place {cell!r} on the board")

        # Check if cell is empty (index_to_coords checks the range)
        row, col = self.index_to_coords(index)
        occupant = Cell(self.grid[row, col])
        if occupant != Cell.EMPTY:
            raise IllegalMoveError(
                f"Cell {index} is already occupied by {occupant.value}"
            )

        self.grid[row, col] = cell.value

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not bool(np.any(self.grid == Cell.EMPTY.value))

    def empty_indices(self) -> List[int]:
        """Linear indices of all empty cells, in ascending order."""
        return [int(i) for i in np.flatnonzero(self.grid == Cell.EMPTY.value)]

    # ==================== LINES ====================

    def rows(self) -> Iterator[np.ndarray]:
        for row in range(self.size):
            yield self.grid[row, :]

    def columns(self) -> Iterator[np.ndarray]:
        for col in range(self.size):
            yield self.grid[:, col]

    def main_diagonal(self) -> np.ndarray:
        """Cells (i, i)."""
        return np.diagonal(self.grid)

    def anti_diagonal(self) -> np.ndarray:
        """Cells (n-1-i, i)."""
        return np.diagonal(np.flipud(self.grid))

    # ==================== DISPLAY ====================

    def render(self) -> str:
        """Markers separated by spaces, one row per line."""
        return "\n".join(" ".join(row) for row in self.grid)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(size={self.size})"


@dataclass
class GameState:
    """
    The complete state of one game session.

    Tracks:
    - The n x n board
    - Whose turn it is (the human always starts)
    - How many moves have been made
    - Game status (in progress, won, draw)
    """

    board: Board
    current_player: Player = Player.HUMAN
    turn: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS

    # The line that decided the game, as (row, col) tuples
    winning_line: Optional[List[Tuple[int, int]]] = field(default=None)

    @classmethod
    def new_game(cls, size: int) -> "GameState":
        """
        Start a new session on an empty board.

        Raises:
            InvalidSizeError: If size is not a positive integer or is too large.
        """
        return cls(board=Board(size))

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    def play(self, index: int) -> Player:
        """
        Make one move and advance the session.

        Places the current player's mark, then checks the board. A win or
        a full board ends the game; otherwise the turn passes to the
        other player.

        Args:
            index: Linear index of the target cell.

        Returns:
            The player who just moved.

        Raises:
            GameOverError: If the game has already ended.
            IllegalMoveError: If the cell is occupied.
            OutOfRangeIndexError: If index is off the board.
        """
        # WinChecker imports this module
        from .win_checker import WinChecker

        # Check if game is over
        if self.is_game_over:
            raise GameOverError(f"Game is already over ({self.status.value})")

        # Place the mark (raises before anything changes if illegal)
        mover = self.current_player
        self.board.apply_move(index, mover.mark)
        self.turn += 1

        # Check for winner or draw
        WinChecker().update_game_state(self)

        # The mover stays current once the game is over
        if not self.is_game_over:
            self.current_player = mover.opposite()

        return mover


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState.new_game(3)

    for index in [4, 0, 8, 2]:
        mover = game.play(index)
        print(f"\n{mover.value} moves to {index} {game.board.index_to_coords(index)}")
        print(game.board.render())

    print(f"\nEmpty cells: {game.board.empty_indices()}")
    print("\nGame state test done!")
