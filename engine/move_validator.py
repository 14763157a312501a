"""
Move validator for n x n TicTacToe.
Turns raw player input into board sizes and cell indices.
"""

from typing import List, Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of validating player input."""
    is_valid: bool
    value: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates what the human types.

    Rules:
    1. Board size must be a whole number from 1 to max_size
    2. A move must be a whole number in 0..n*n-1
    3. The target cell must be empty (Board.is_legal)
    4. Game must not be over

    Problems come back as a ValidationResult so the caller can
    re-prompt. Nothing here raises.
    """

    def __init__(self, max_size: int = GameConfig.MAX_BOARD_SIZE):
        """
        Args:
            max_size: Largest board size accepted by validate_size.
        """
        self.max_size = max_size

    def validate_size(self, text: str) -> ValidationResult:
        """
        Validate a requested board size.

        Args:
            text: Raw input, e.g. "3".

        Returns:
            ValidationResult with the size in value when valid.
        """
        # Check if it is a number at all
        number = self._parse_int(text)

        if number is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text.strip()}' is not a whole number."
            )

        # Check the size is in range
        if number <= 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board size must be at least 1, got {number}."
            )

        if number > self.max_size:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board size must be at most {self.max_size}, got {number}."
            )

        return ValidationResult(is_valid=True, value=number)

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move by linear index.

        Args:
            game_state: Current game state.
            index: Requested cell.

        Returns:
            ValidationResult with the index in value when valid.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        board = game_state.board
        last = board.cell_count - 1

        # Check if index is in valid range
        if not 0 <= index <= last:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid spot {index}. Must be 0-{last}."
            )

        # Check if cell is empty
        if not board.is_legal(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Spot {index} is already taken by {board.cell_at(index).value}."
            )

        return ValidationResult(is_valid=True, value=index)

    def validate_input(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Parse and validate a typed move.

        Args:
            game_state: Current game state.
            text: Raw input, e.g. "4".

        Returns:
            ValidationResult with the index in value when valid.
        """
        index = self._parse_int(text)

        if index is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text.strip()}' is not a spot number."
            )

        return self.validate_move(game_state, index)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """All legal indices for the current player."""
        if game_state.is_game_over:
            return []
        return game_state.board.empty_indices()

    @staticmethod
    def _parse_int(text: str) -> Optional[int]:
        try:
            return int(text.strip())
        except ValueError:
            return None
