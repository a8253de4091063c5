"""
Game Service

Keeps one GuessEngine per play session and turns engine state into the
GameState snapshots the presentation layer renders.
"""

import random
import uuid
from typing import Dict, List, Optional

from ..config.game_settings import (
    load_word_list, validate_word_list_integrity, WIN_MESSAGE, LOSS_MESSAGE_TEMPLATE
)
from ..models.game import GameState, GameStatus, GuessOutcome, Hint
from .guess_engine import GuessEngine


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection from the injected word list
    - Routing player actions to the session's engine
    - Game state snapshots without exposing answers before the game ends
    """

    def __init__(self, word_list: Optional[List[str]] = None, rng: Optional[random.Random] = None):
        if word_list is None:
            word_list = load_word_list()
        validate_word_list_integrity(word_list)
        self.word_list = list(word_list)
        self.rng = rng or random.Random()
        self.games: Dict[str, GuessEngine] = {}  # Store active games by game_id

    def create_new_game(self, target: Optional[str] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            target: Fixed target word, mainly for tests

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = GuessEngine(self.word_list, rng=self.rng, target=target)
        return game_id

    def get_engine(self, game_id: str) -> Optional[GuessEngine]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        answer = None
        message = None
        if engine.status == GameStatus.WON:
            answer = engine.target_word
            message = WIN_MESSAGE
        elif engine.status == GameStatus.LOST:
            answer = engine.target_word
            message = LOSS_MESSAGE_TEMPLATE.format(word=engine.target_word)

        return GameState(
            game_id=game_id,
            current_row=engine.current_row,
            row_count=engine.row_count,
            row_length=engine.row_length,
            status=engine.status.value,
            guesses=engine.guesses.copy(),
            guess_results=[[status.value for status in row] for row in engine.feedback_history()],
            row_cells=engine.row_cells.copy(),
            hinted_columns=sorted(engine.hinted_columns),
            hints_used=engine.hints_used,
            hints_remaining=engine.hints_remaining,
            can_submit=not engine.is_over,
            can_hint=engine.can_hint,
            answer=answer,
            message=message
        )

    def enter_letter(self, game_id: str, column: int, letter: str) -> Optional[GameState]:
        engine = self.games.get(game_id)
        if engine is None:
            return None
        engine.enter_letter(column, letter)
        return self.get_game_state(game_id)

    def erase_letter(self, game_id: str, column: int) -> Optional[GameState]:
        engine = self.games.get(game_id)
        if engine is None:
            return None
        engine.erase_letter(column)
        return self.get_game_state(game_id)

    def make_guess(self, game_id: str, guess: Optional[str] = None) -> Optional[GuessOutcome]:
        """
        Processes a guess for a session.

        Returns:
            GuessOutcome, or None if the game does not exist

        Raises:
            GuessError: If the engine rejects the guess
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None
        return engine.submit_guess(guess)

    def request_hint(self, game_id: str) -> Optional[Hint]:
        """
        Reveals one letter for a session.

        Raises:
            HintError: If no hint can be given
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None
        return engine.request_hint()

    def reset_game(self, game_id: str) -> Optional[GameState]:
        """Starts over in the same session with a freshly drawn word."""
        engine = self.games.get(game_id)
        if engine is None:
            return None
        engine.reset()
        return self.get_game_state(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: Optional[List[str]] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_list, rng)
    return _game_service
