"""
Console game for n x n TicTacToe.

This script ties together:
- The board engine (board, win checking, input validation)
- The random computer opponent
- A plain text prompt/print loop

Run this script to play TicTacToe against the computer!
"""

from typing import Callable, Optional

import numpy as np

from engine.config import GameConfig
from engine.errors import InvalidSizeError
from engine.game_state import GameState, GameStatus, Player
from engine.move_validator import MoveValidator
from engine.ai_player import RandomPlayer


class TicTacToeGame:
    """
    Main controller for the console game.

    Game flow:
    1. Ask for the board size
    2. Human (X) types a spot number
    3. Computer (O) picks a random empty spot
    4. Repeat until someone has n in a row or the board is full
    5. Ask whether to play again
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        rng: Optional[np.random.Generator] = None,
        config: Optional[GameConfig] = None,
        initial_size: Optional[int] = None
    ):
        """
        Initialize the game.

        Args:
            input_fn: Reads one line given a prompt. Raises EOFError at end of input.
            output_fn: Writes one line of output.
            rng: Random source for the computer. Unseeded if not provided.
            config: Game configuration. Uses defaults if not provided.
            initial_size: Board size for the first game, skipping the prompt.
        """
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.config = config or GameConfig()
        self.initial_size = initial_size

        self.validator = MoveValidator(max_size=self.config.MAX_BOARD_SIZE)
        self.ai = RandomPlayer(rng, debug=self.config.DEBUG_MODE, output_fn=self.output_fn)

        self.game_state: Optional[GameState] = None
        self.games_played = 0

    def run(self):
        """Play games until the human declines a replay or input runs out."""
        try:
            while True:
                self.game_state = self._new_game()
                self._game_loop()
                self.games_played += 1

                if not self._ask_replay():
                    break
        except EOFError:
            self.output_fn("")
            self._debug("Input closed.")

    def _game_loop(self):
        """Alternate human and computer moves until the game ends."""
        self._show_board()

        while not self.game_state.is_game_over:
            if self.game_state.current_player == Player.HUMAN:
                index = self._ask_move()
            else:
                index = self.ai.choose_move(self.game_state.board)

            # Apply the move, check for a winner, pass the turn
            mover = self.game_state.play(index)

            row, col = self.game_state.board.index_to_coords(index)
            self._debug(f">>> {mover.value} placed {mover.mark.value} at {index} ({row}, {col})")

            self._show_board()

        self._show_game_result()

    def _new_game(self) -> GameState:
        """Ask for a size until a board can actually be created."""
        while True:
            size = self._ask_size()
            try:
                return GameState.new_game(size)
            except InvalidSizeError as e:
                self.output_fn(f"ERROR: {e}")

    def _ask_size(self) -> int:
        """Prompt until a usable board size is entered."""
        if self.initial_size is not None:
            size, self.initial_size = self.initial_size, None
            result = self.validator.validate_size(str(size))
            if result.is_valid:
                return result.value
            self.output_fn(f"ERROR: {result.error_message}")

        prompt = self.config.SIZE_PROMPT.format(size=self.config.DEFAULT_BOARD_SIZE)

        while True:
            result = self.validator.validate_size(self.input_fn(prompt))
            if result.is_valid:
                return result.value
            self.output_fn(f"ERROR: {result.error_message}")

    def _ask_move(self) -> int:
        """Prompt until the human names an empty spot."""
        last = self.game_state.board.cell_count - 1
        prompt = self.config.MOVE_PROMPT.format(last=last)

        while True:
            result = self.validator.validate_input(self.game_state, self.input_fn(prompt))
            if result.is_valid:
                return result.value
            self.output_fn(f"ERROR: {result.error_message}")

    def _ask_replay(self) -> bool:
        """Anything not starting with the negative answer means yes."""
        answer = self.input_fn(self.config.REPLAY_PROMPT).strip().lower()
        self.output_fn("")
        return not answer.startswith(self.config.REPLAY_NEGATIVE.lower())

    def _show_board(self):
        self.output_fn("")
        self.output_fn(self.game_state.board.render())
        self.output_fn("")

    def _show_game_result(self):
        """Show the final game result."""
        status = self.game_state.status
        size = self.game_state.board.size

        if status == GameStatus.PLAYER_WON:
            self.output_fn(self.config.WIN_MESSAGE.format(size=size, mark=self.config.PLAYER_MARK))
        elif status == GameStatus.COMPUTER_WON:
            self.output_fn(self.config.WIN_MESSAGE.format(size=size, mark=self.config.COMPUTER_MARK))
        else:
            self.output_fn(self.config.DRAW_MESSAGE)

        if self.game_state.winning_line:
            self._debug(f"Winning line: {self.game_state.winning_line}")

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            self.output_fn(message)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="n x n TicTacToe against a random computer")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Board size for the first game (skips the size prompt once)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print move traces and computer sampling details"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    game = TicTacToeGame(
        rng=np.random.default_rng(args.seed),
        config=config,
        initial_size=args.size
    )

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
