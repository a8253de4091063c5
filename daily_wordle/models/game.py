"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LetterStatus(Enum):
    """Per-letter feedback tag for a submitted guess."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class GameStatus(Enum):
    """Lifecycle of a single game."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


@dataclass(frozen=True)
class Hint:
    """A letter of the target revealed into an empty cell of the active row."""
    row: int
    column: int
    letter: str


@dataclass(frozen=True)
class GuessOutcome:
    """Result of an accepted guess."""
    guess: str
    row: int
    feedback: List[LetterStatus]
    status: GameStatus

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON


@dataclass
class GameState:
    """Serializable snapshot handed to the presentation layer."""
    game_id: str
    current_row: int
    row_count: int
    row_length: int
    status: str
    guesses: List[str]
    guess_results: List[List[str]]  # Letter status values for JSON serialization
    row_cells: List[Optional[str]]
    hinted_columns: List[int]
    hints_used: int
    hints_remaining: int
    can_submit: bool
    can_hint: bool
    answer: Optional[str] = None  # Only included when game is over
    message: Optional[str] = field(default=None)
