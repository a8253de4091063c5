"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Dict, Optional

from ..models.game import GameState, GuessOutcome, Hint


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract player identity information from a request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def serialize_state(state: GameState) -> dict:
    return asdict(state)


def serialize_outcome(outcome: GuessOutcome) -> dict:
    """GuessOutcome as plain JSON types."""
    return {
        'guess': outcome.guess,
        'row': outcome.row,
        'feedback': [status.value for status in outcome.feedback],
        'status': outcome.status.value,
        'won': outcome.won
    }


def serialize_hint(hint: Hint) -> dict:
    return asdict(hint)
