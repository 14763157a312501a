"""
Game configuration for n x n TicTacToe.
Markers, prompts, and debug switches used by the engine and the console.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the console game.
    """

    # ==================== BOARD SETTINGS ====================
    # Suggested size shown in the size prompt (classic 3x3)
    DEFAULT_BOARD_SIZE = 3

    # Largest size the console accepts (bigger boards cannot be shown or played)
    MAX_BOARD_SIZE = 100

    # ==================== MARKERS ====================
    EMPTY_MARK = "-"
    PLAYER_MARK = "X"       # Human always moves first
    COMPUTER_MARK = "O"

    # ==================== PROMPTS ====================
    SIZE_PROMPT = "Enter the size of the board ({size} for a {size}x{size} board): "
    MOVE_PROMPT = "Enter the spot you want to place your piece in (0-{last}): "
    REPLAY_PROMPT = "Would you like to play again? "

    # Any replay answer starting with this letter (case-insensitive) quits
    REPLAY_NEGATIVE = "n"

    # ==================== MESSAGES ====================
    WIN_MESSAGE = "Tic-Tac-Toe. {size} in a row! {mark} wins!"
    DRAW_MESSAGE = "There is no winner here."

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
