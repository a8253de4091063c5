"""
Data Models Package

Contains all data models, enums and errors used throughout the application.
"""

from .game import GameState, GameStatus, GuessOutcome, Hint, LetterStatus
from .errors import (
    GuessError, InvalidLength, InvalidCharacters, InvalidColumn, CellLocked,
    GameAlreadyOver, HintError, HintBudgetExhausted, NoFreeCells
)

__all__ = [
    'GameState', 'GameStatus', 'GuessOutcome', 'Hint', 'LetterStatus',
    'GuessError', 'InvalidLength', 'InvalidCharacters', 'InvalidColumn', 'CellLocked',
    'GameAlreadyOver', 'HintError', 'HintBudgetExhausted', 'NoFreeCells'
]
