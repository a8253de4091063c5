"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word list loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ROW_COUNT, ROW_LENGTH, MAX_HINTS,
    load_word_list, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ROW_COUNT', 'ROW_LENGTH', 'MAX_HINTS',
    'load_word_list', 'validate_word_list_integrity', 'get_word_statistics'
]
