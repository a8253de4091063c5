"""
Game Errors

Every rejected engine operation raises one of these. They are local and
recoverable: the game is left exactly as it was before the call.
"""

from typing import Optional

from ..config.game_settings import (
    INVALID_WORD_MESSAGE, NO_FREE_CELLS_MESSAGE, HINTS_EXHAUSTED_MESSAGE,
    GAME_OVER_MESSAGE
)


class GuessError(ValueError):
    """Base class for rejected player actions."""

    code = "GUESS_ERROR"
    message = "Invalid action"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail or self.message

    def to_dict(self) -> dict:
        return {
            'success': False,
            'error': self.message,
            'error_code': self.code,
            'detail': self.detail
        }


class InvalidLength(GuessError):
    code = "INVALID_LENGTH"
    message = INVALID_WORD_MESSAGE


class InvalidCharacters(GuessError):
    # Same player-facing text as InvalidLength
    code = "INVALID_CHARACTERS"
    message = INVALID_WORD_MESSAGE


class InvalidColumn(GuessError):
    code = "INVALID_COLUMN"
    message = "No such cell in this row"


class CellLocked(GuessError):
    code = "CELL_LOCKED"
    message = "This letter was revealed by a hint"


class GameAlreadyOver(GuessError):
    code = "GAME_ALREADY_OVER"
    message = GAME_OVER_MESSAGE


class HintError(GuessError):
    """Base class for rejected hint requests."""
    code = "HINT_ERROR"


class HintBudgetExhausted(HintError):
    code = "HINT_BUDGET_EXHAUSTED"
    message = HINTS_EXHAUSTED_MESSAGE


class NoFreeCells(HintError):
    code = "NO_FREE_CELLS"
    message = NO_FREE_CELLS_MESSAGE
