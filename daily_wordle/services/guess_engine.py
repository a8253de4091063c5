"""
Guess Engine

Pure game logic for a single game: target selection, guess validation,
letter feedback, hints and row progression. Nothing here knows about Flask,
sockets or widgets; the presentation layer reads the returned data.
"""

import logging
import random
from typing import List, Optional, Sequence

from ..config.game_settings import ROW_COUNT, ROW_LENGTH, MAX_HINTS
from ..models.errors import (
    InvalidLength, InvalidCharacters, InvalidColumn, CellLocked,
    GameAlreadyOver, HintBudgetExhausted, NoFreeCells
)
from ..models.game import GameStatus, GuessOutcome, Hint, LetterStatus

logger = logging.getLogger('wordle_game.engine')


def evaluate_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Colours each letter of a guess against the target.

    A letter in the right position is CORRECT, a letter found anywhere else in
    the target is PRESENT, anything else is ABSENT. Letter counts are not
    consumed, so a repeated guess letter can be PRESENT more often than it
    occurs in the target.
    """
    guess = guess.upper()
    target = target.upper()

    result: List[LetterStatus] = []
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append(LetterStatus.CORRECT)
        elif letter in target:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return result


def validate_word(word: str) -> str:
    """Returns the upper-cased word or raises InvalidLength/InvalidCharacters."""
    if not isinstance(word, str):
        raise InvalidLength(f"Guess must be exactly {ROW_LENGTH} letters")
    # Upper-case first: some letters expand (ß -> SS)
    word = word.upper()
    if len(word) != ROW_LENGTH:
        raise InvalidLength(f"Guess must be exactly {ROW_LENGTH} letters")
    if not word.isalpha():
        raise InvalidCharacters("Guess must contain only letters")
    return word


class GuessEngine:
    """
    State and rules of one game on a ROW_COUNT x ROW_LENGTH board.

    The engine holds the draft letters of the active row so that hints can
    tell which cells are still free. Submitting moves to the next row and
    starts it empty.
    """

    def __init__(self, word_list: Sequence[str], rng: Optional[random.Random] = None,
                 target: Optional[str] = None):
        self.word_list = list(word_list)
        self.rng = rng or random.Random()
        self.row_count = ROW_COUNT
        self.row_length = ROW_LENGTH
        self.max_hints = MAX_HINTS
        self.reset(target)

    def reset(self, target: Optional[str] = None) -> None:
        """Starts a brand-new game, discarding every trace of the previous one."""
        if target is None:
            if not self.word_list:
                raise ValueError("Word list cannot be empty")
            target = self.rng.choice(self.word_list)
        self.target_word = validate_word(target)
        self.current_row = 0
        self.hints_used = 0
        self.status = GameStatus.IN_PROGRESS
        self.guesses: List[str] = []
        self._clear_row()
        logger.debug("New game started from %d candidate words", len(self.word_list))

    def _clear_row(self) -> None:
        self.row_cells: List[Optional[str]] = [None] * self.row_length
        self.hinted_columns: List[int] = []

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def hints_remaining(self) -> int:
        return max(0, self.max_hints - self.hints_used)

    @property
    def can_hint(self) -> bool:
        return not self.is_over and self.hints_remaining > 0

    @property
    def draft(self) -> str:
        """Letters typed or revealed in the active row, empty cells skipped."""
        return ''.join(cell for cell in self.row_cells if cell)

    def _ensure_in_progress(self) -> None:
        if self.is_over:
            raise GameAlreadyOver()

    def _check_column(self, column: int) -> None:
        if not isinstance(column, int) or not 0 <= column < self.row_length:
            raise InvalidColumn(f"Column must be between 0 and {self.row_length - 1}")
        if column in self.hinted_columns:
            raise CellLocked()

    def enter_letter(self, column: int, letter: str) -> None:
        """Puts a letter into a cell of the active row."""
        self._ensure_in_progress()
        self._check_column(column)
        letter = letter.upper() if isinstance(letter, str) else ''
        if len(letter) != 1 or not letter.isalpha():
            raise InvalidCharacters("A cell holds a single letter")
        self.row_cells[column] = letter

    def erase_letter(self, column: int) -> None:
        self._ensure_in_progress()
        self._check_column(column)
        self.row_cells[column] = None

    def submit_guess(self, word: Optional[str] = None) -> GuessOutcome:
        """
        Submits a guess for the active row.

        Args:
            word: The guess; None submits the letters in the active row

        Returns:
            GuessOutcome with the feedback and the status after this guess

        Raises:
            GameAlreadyOver: If the game has already been won or lost
            InvalidLength / InvalidCharacters: If the word is not 5 letters
        """
        self._ensure_in_progress()
        if word is None:
            # An empty cell makes the row short, as with a partially typed word
            word = self.draft if all(self.row_cells) else ''
        guess = validate_word(word)

        feedback = evaluate_guess(guess, self.target_word)
        row = self.current_row
        self.guesses.append(guess)
        self.current_row += 1

        if guess == self.target_word:
            self.status = GameStatus.WON
        elif self.current_row >= self.row_count:
            self.status = GameStatus.LOST
        self._clear_row()

        return GuessOutcome(guess=guess, row=row, feedback=feedback, status=self.status)

    def request_hint(self) -> Hint:
        """
        Reveals the target's letter in a random free cell of the active row.

        A request on a full row is rejected without using up a hint.

        Raises:
            GameAlreadyOver: If the game has ended
            HintBudgetExhausted: If all hints were used
            NoFreeCells: If every cell of the row is filled
        """
        self._ensure_in_progress()
        if self.hints_used >= self.max_hints:
            raise HintBudgetExhausted()

        free_columns = [i for i, cell in enumerate(self.row_cells) if not cell]
        if not free_columns:
            raise NoFreeCells()

        column = self.rng.choice(free_columns)
        letter = self.target_word[column]
        self.row_cells[column] = letter
        self.hinted_columns.append(column)
        self.hints_used += 1

        return Hint(row=self.current_row, column=column, letter=letter)

    def feedback_history(self) -> List[List[LetterStatus]]:
        """Recomputes the feedback of every submitted row."""
        return [evaluate_guess(guess, self.target_word) for guess in self.guesses]
