"""
Game Logger Module for Daily Wordle

This module provides structured logging for player actions, server responses,
and game events (wins, losses, hints, restarts).
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - Player action tracking with IP identification
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'request_hint')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = get_user_identity(request)

        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Rejected player actions are expected traffic and are logged at INFO;
        only failed responses flagged as errors go to ERROR.
        """
        user_info = get_user_identity(request)

        safe_response = self._sanitize_response_data(response_data)

        details = {
            'game_id': game_id,
            'success': success,
            'response_data': safe_response,
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success or 'error_code' in response_data:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: Optional[str],
                       **kwargs):
        """
        Log game-specific events.

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'hint_revealed')
            user_ip: Player's IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None}

        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log unexpected errors with full context."""
        user_info = get_user_identity(request)

        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, user_info, details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep the answer out of the logs while a game is running."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_row': state.get('current_row'),
                'status': state.get('status'),
                'hints_used': state.get('hints_used'),
                'guesses_count': len(state.get('guesses', [])),
                'answer_revealed': state.get('answer') is not None
            }
        if 'hint' in sanitized and isinstance(sanitized['hint'], dict):
            sanitized['hint'] = {'column': sanitized['hint'].get('column')}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
