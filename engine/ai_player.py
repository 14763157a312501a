"""
Computer player for n x n TicTacToe.
Picks a uniformly random empty cell.
"""

from typing import Callable, Optional

import numpy as np

from .game_state import Board, Cell, GameState, Player
from .errors import IllegalMoveError


class RandomPlayer:
    """
    A computer opponent with no strategy at all.

    Draws a linear index uniformly from [0, n*n) and tries again until
    it lands on an empty cell. Because every index is equally likely
    on each draw, the accepted index is uniform over the empty cells.

    The random source is injected: a numpy Generator by default, but any
    object with an integers(low, high) method works, so tests can pass a
    scripted sequence.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        player: Player = Player.COMPUTER,
        debug: bool = False,
        output_fn: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the computer player.

        Args:
            rng: Random source. A fresh unseeded Generator if not provided.
            player: Which side the computer controls (default: COMPUTER)
            debug: Report how many draws each move took.
            output_fn: Writes one line of output. Defaults to print.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.player = player
        self.debug = debug
        self.output_fn = output_fn or print

        # How many indices the last choose_move drew (for debugging)
        self.samples_drawn = 0

    def choose_move(self, board: Board) -> int:
        """
        Pick a legal cell.

        Args:
            board: Current board. Must have at least one empty cell.

        Returns:
            Linear index of an empty cell.

        Raises:
            IllegalMoveError: If the board is already full.
        """
        # Rejection sampling needs at least one empty cell to stop
        if board.is_full():
            raise IllegalMoveError("No empty cells left to choose from")

        self.samples_drawn = 0

        # Draw until an empty cell comes up
        while True:
            self.samples_drawn += 1
            index = int(self.rng.integers(0, board.cell_count))
            if board.is_legal(index):
                break

        if self.debug:
            self.output_fn(f"Computer drew {self.samples_drawn} sample(s). Move: {index}")

        return index

    def get_move(self, game_state: GameState) -> Optional[int]:
        """
        Pick a move for the current position.

        Returns:
            Linear index, or None if it's not our turn or the game is over.
        """
        if game_state.is_game_over:
            return None

        # Check if it's our turn
        if game_state.current_player != self.player:
            self.output_fn(f"Warning: It's not {self.player.value}'s turn!")
            return None

        return self.choose_move(game_state.board)


# Quick test
if __name__ == "__main__":
    print("Testing RandomPlayer...")

    ai = RandomPlayer(np.random.default_rng(7), debug=True)

    board = Board(3)
    for index in range(8):
        board.apply_move(index, Cell.PLAYER)

    move = ai.choose_move(board)
    print(board.render())
    print(f"Only spot left is 8, computer picked {move}")
    assert move == 8

    print("\nRandomPlayer test done!")
