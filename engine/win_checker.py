"""
Win checker for n x n TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import List, Optional, Tuple

import numpy as np

from .game_state import Board, Cell, GameState, GameStatus, Outcome


class WinChecker:
    """
    Checks for win conditions in n x n TicTacToe.

    Win condition: n marks of the same kind along a full row,
    a full column, or one of the two main diagonals.

    Lines are scanned in a fixed order: rows, columns, the main
    diagonal, then the anti-diagonal. The first completed line wins.
    """

    OUTCOME_FOR_CELL = {
        Cell.PLAYER: Outcome.PLAYER_WINS,
        Cell.COMPUTER: Outcome.COMPUTER_WINS,
    }

    STATUS_FOR_OUTCOME = {
        Outcome.PLAYER_WINS: GameStatus.PLAYER_WON,
        Outcome.COMPUTER_WINS: GameStatus.COMPUTER_WON,
    }

    def evaluate_win(self, board: Board) -> Outcome:
        """
        Check if there's a winner.

        Args:
            board: The board to scan.

        Returns:
            PLAYER_WINS, COMPUTER_WINS, or NO_WINNER.
        """
        for line, _ in self._lines(board):
            owner = self._check_line(line)
            if owner is not None:
                return self.OUTCOME_FOR_CELL[owner]

        return Outcome.NO_WINNER

    def _lines(self, board: Board):
        """Yield (cells, coordinates) for every line in scan order."""
        n = board.size

        for row, cells in enumerate(board.rows()):
            yield cells, [(row, col) for col in range(n)]

        for col, cells in enumerate(board.columns()):
            yield cells, [(row, col) for row in range(n)]

        yield board.main_diagonal(), [(i, i) for i in range(n)]
        yield board.anti_diagonal(), [(n - 1 - i, i) for i in range(n)]

    def _check_line(self, line: np.ndarray) -> Optional[Cell]:
        """
        Check if a single line is completed.

        Returns:
            The owning Cell if every cell matches and is not empty,
            None otherwise.
        """
        first = line[0]

        # An all-empty line is not a win
        if first == Cell.EMPTY.value:
            return None

        if np.all(line == first):
            return Cell(first)

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        if self.evaluate_win(board) != Outcome.NO_WINNER:
            return False

        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line as a list of (row, col), or None.
        """
        for line, coords in self._lines(board):
            if self._check_line(line) is not None:
                return coords
        return None

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        GameState.play calls this after every move. A won or drawn
        game stays that way.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        # Terminal states never change
        if game_state.is_game_over:
            return game_state

        outcome = self.evaluate_win(game_state.board)

        # Someone completed a line
        if outcome != Outcome.NO_WINNER:
            game_state.status = self.STATUS_FOR_OUTCOME[outcome]
            game_state.winning_line = self.get_winning_line(game_state.board)
        # No line and no empty cells left
        elif game_state.board.is_full():
            game_state.status = GameStatus.DRAW

        return game_state


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Column win on a 4x4 board
    board = Board(4)
    for index in [1, 5, 9, 13]:
        board.apply_move(index, Cell.COMPUTER)
    print(board.render())
    print(f"Test 1 (column): {checker.evaluate_win(board)}")
    assert checker.evaluate_win(board) == Outcome.COMPUTER_WINS

    # Test 2: Classic draw
    board = Board(3)
    for index, cell in enumerate("XOXXOOOXX"):
        board.apply_move(index, Cell(cell))
    print(board.render())
    print(f"Test 2 (draw): {checker.check_draw(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
