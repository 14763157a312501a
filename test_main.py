"""
Tests for the console game.
Drives TicTacToeGame with scripted input and a scripted computer.
"""

import builtins

import numpy as np
import pytest

from engine.config import GameConfig
from engine.game_state import GameStatus
from main import TicTacToeGame, main


class ScriptedRng:
    """Random source that replays a fixed list of integers."""

    def __init__(self, values):
        self.values = iter(values)

    def integers(self, low, high):
        return next(self.values)


class ScriptedInput:
    """Answers prompts from a list, then signals end of input."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def make_game(answers, computer_moves=(), **kwargs):
    output = []
    scripted = ScriptedInput(answers)
    game = TicTacToeGame(
        input_fn=scripted,
        output_fn=output.append,
        rng=ScriptedRng(computer_moves),
        **kwargs
    )
    return game, scripted, output


def test_player_wins_top_row():
    game, scripted, output = make_game(["3", "0", "1", "2", "n"], computer_moves=[4, 8])
    game.run()

    assert game.game_state.status == GameStatus.PLAYER_WON
    assert "Tic-Tac-Toe. 3 in a row! X wins!" in output
    assert "X X X\n- O -\n- - O" in output
    assert game.games_played == 1
    assert scripted.prompts[0] == "Enter the size of the board (3 for a 3x3 board): "
    assert scripted.prompts[1] == "Enter the spot you want to place your piece in (0-8): "
    assert scripted.prompts[-1] == "Would you like to play again? "


def test_board_shown_after_every_half_move():
    game, _, output = make_game(["3", "0", "1", "2", "n"], computer_moves=[4, 8])
    game.run()

    boards = [line for line in output if "\n" in line]
    # Empty board plus five half-moves
    assert len(boards) == 6
    assert boards[0] == "- - -\n- - -\n- - -"


def test_computer_wins():
    game, _, output = make_game(["3", "0", "1", "5", "n"], computer_moves=[6, 4, 2])
    game.run()

    assert game.game_state.status == GameStatus.COMPUTER_WON
    assert "Tic-Tac-Toe. 3 in a row! O wins!" in output


def test_draw():
    game, _, output = make_game(
        ["3", "0", "2", "3", "7", "8", "no"],
        computer_moves=[1, 4, 5, 6]
    )
    game.run()

    assert game.game_state.status == GameStatus.DRAW
    assert "There is no winner here." in output
    assert "X O X\nX O O\nO X X" in output


def test_bad_size_reprompts():
    game, scripted, output = make_game(["0", "-4", "big", "1", "0", "n"])
    game.run()

    errors = [line for line in output if line.startswith("ERROR:")]
    assert len(errors) == 3
    assert game.game_state.board.size == 1
    assert "Tic-Tac-Toe. 1 in a row! X wins!" in output


def test_huge_size_reprompts():
    game, scripted, output = make_game(["1000000", "1", "0", "n"])
    game.run()

    errors = [line for line in output if line.startswith("ERROR:")]
    assert len(errors) == 1
    assert "at most" in errors[0]
    assert "Tic-Tac-Toe. 1 in a row! X wins!" in output


def test_board_that_cannot_be_allocated_reprompts(monkeypatch):
    real_full = np.full

    def full(shape, *args, **kwargs):
        if shape[0] > 2:
            raise MemoryError("Unable to allocate")
        return real_full(shape, *args, **kwargs)

    monkeypatch.setattr(np, "full", full)

    game, scripted, output = make_game(["3", "1", "0", "n"])
    game.run()

    errors = [line for line in output if line.startswith("ERROR:")]
    assert len(errors) == 1
    assert "too large" in errors[0]
    assert game.game_state.board.size == 1


def test_bad_move_reprompts():
    game, scripted, output = make_game(
        ["2", "4", "seven", "0", "1", "2", "n"],
        computer_moves=[1]
    )
    game.run()

    errors = [line for line in output if line.startswith("ERROR:")]
    # "4" is off a 2x2 board, "seven" is not a number, "1" is the computer's
    assert len(errors) == 3
    assert "Tic-Tac-Toe. 2 in a row! X wins!" in output


def test_replay_until_no():
    game, scripted, output = make_game(["1", "0", "yes", "1", "0", "", "1", "0", "NOPE"])
    game.run()

    assert game.games_played == 3
    assert scripted.answers == []


def test_end_of_input_stops_cleanly():
    game, _, output = make_game(["3", "4"], computer_moves=[0])
    game.run()

    assert game.game_state.status == GameStatus.IN_PROGRESS
    assert game.games_played == 0


def test_initial_size_skips_first_prompt():
    game, scripted, output = make_game(["0", "n"], initial_size=1)
    game.run()

    assert scripted.prompts[0].startswith("Enter the spot")
    assert game.game_state.status == GameStatus.PLAYER_WON


def test_invalid_initial_size_falls_back_to_prompt():
    game, scripted, output = make_game(["1", "0", "n"], initial_size=0)
    game.run()

    assert output[0].startswith("ERROR:")
    assert scripted.prompts[0].startswith("Enter the size")


def test_debug_mode_traces_moves():
    config = GameConfig()
    config.DEBUG_MODE = True
    game, _, output = make_game(["1", "0", "n"], config=config)
    game.run()

    assert ">>> human placed X at 0 (0, 0)" in output
    assert "Winning line: [(0, 0)]" in output


def test_debug_mode_reports_computer_draws():
    config = GameConfig()
    config.DEBUG_MODE = True
    game, _, output = make_game(["2", "0", "2", "n"], computer_moves=[0, 1], config=config)
    game.run()

    assert "Computer drew 2 sample(s). Move: 1" in output
    assert ">>> computer placed O at 1 (0, 1)" in output


def test_main_entry_point(monkeypatch, capsys):
    answers = iter(["0", "n"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    main(["--size", "1", "--seed", "3"])

    out = capsys.readouterr().out
    assert "Tic-Tac-Toe. 1 in a row! X wins!" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_rejects_non_integer_size():
    with pytest.raises(SystemExit):
        main(["--size", "three"])
