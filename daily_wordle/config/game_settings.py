"""
Game Configuration Constants Module

This module defines the fixed game rules (grid size, hint budget, player
messages) and the word list loader. The word list is a plain-text file with
one word per line; malformed entries are filtered out here so the engine
only ever sees clean 5-letter words.
"""

import os
from typing import Final, Iterable, List, Optional

ROW_COUNT: Final[int] = 6
"""
Number of guess rows (attempts) on the board.
"""

ROW_LENGTH: Final[int] = 5
"""
Number of letter cells per row; every word has exactly this many letters.
"""

MAX_HINTS: Final[int] = 3
"""
Hint budget per game.
"""

# Player-facing messages
INVALID_WORD_MESSAGE: Final[str] = "The word must have 5 letters!"
NO_FREE_CELLS_MESSAGE: Final[str] = "Free up space for a hint"
HINTS_EXHAUSTED_MESSAGE: Final[str] = "No hints left"
GAME_OVER_MESSAGE: Final[str] = "Game is already over"
WIN_MESSAGE: Final[str] = "You win!"
LOSS_MESSAGE_TEMPLATE: Final[str] = "The correct word is {word}"

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)


def clean_word_list(lines: Iterable[str]) -> List[str]:
    """
    Normalise raw word list lines.

    Blank lines, words that are not exactly ROW_LENGTH letters and words with
    non-alphabetic characters are dropped. Duplicates are removed while
    keeping the first occurrence's order.

    Returns:
        List[str]: Upper-case words
    """
    words: List[str] = []
    seen = set()
    for line in lines:
        word = line.strip().upper()
        if len(word) != ROW_LENGTH or not word.isalpha():
            continue
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a newline-delimited text file.

    Args:
        path: File to read; defaults to the bundled words.txt

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If no valid word remains after filtering
    """
    path = path or DEFAULT_WORD_LIST_PATH

    if not os.path.exists(path):
        raise FileNotFoundError(f"Word list file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        words = clean_word_list(f)

    if not words:
        raise ValueError(f"No valid {ROW_LENGTH}-letter words found in {path}")

    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates a word list before it is handed to the engine.

    Returns:
        bool: True if the word list passes all checks

    Raises:
        ValueError: If any check fails, with a detailed message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != ROW_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {ROW_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Summarises a word list.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and the five
        most common letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":
    try:
        word_list = load_word_list()
        validate_word_list_integrity(word_list)
        print(" Word list validation passed")
        print(f" Word statistics: {get_word_statistics(word_list)}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
