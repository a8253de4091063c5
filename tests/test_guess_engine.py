"""
Testing pure game logic.
"""

import logging
import random

import pytest

from daily_wordle.models import (
    GameStatus, LetterStatus, InvalidLength, InvalidCharacters, InvalidColumn,
    CellLocked, GameAlreadyOver, HintBudgetExhausted, NoFreeCells, HintError, GuessError
)
from daily_wordle.services import GuessEngine

WORDS = ["CRANE", "APPLE", "TRACE"]
MISSES = ["APPLE", "GHOST", "TRACE", "SLATE", "BLIMP", "DOUGH"]


@pytest.fixture
def engine():
    return GuessEngine(WORDS, rng=random.Random(7), target="CRANE")


def fill_row(engine, word):
    for column, letter in enumerate(word):
        engine.enter_letter(column, letter)


def test_new_game_starts_in_progress(engine):
    assert engine.status == GameStatus.IN_PROGRESS
    assert engine.current_row == 0
    assert engine.hints_used == 0
    assert engine.row_count == 6
    assert engine.row_length == 5
    assert engine.guesses == []
    assert engine.row_cells == [None] * 5


def test_target_drawn_from_word_list():
    for seed in range(20):
        engine = GuessEngine(WORDS, rng=random.Random(seed))
        assert engine.target_word in WORDS


def test_target_is_upper_cased():
    engine = GuessEngine(WORDS, target="apple")
    assert engine.target_word == "APPLE"


def test_empty_word_list_rejected():
    with pytest.raises(ValueError):
        GuessEngine([])


def test_valid_guess_gives_five_tags_and_advances_one_row(engine):
    outcome = engine.submit_guess("TRACE")

    assert len(outcome.feedback) == 5
    assert outcome.row == 0
    assert outcome.guess == "TRACE"
    assert outcome.status == GameStatus.IN_PROGRESS
    assert engine.current_row == 1
    assert engine.guesses == ["TRACE"]


def test_feedback_matches_simplified_rules(engine):
    outcome = engine.submit_guess("TRACE")
    assert outcome.feedback == [
        LetterStatus.ABSENT, LetterStatus.CORRECT, LetterStatus.CORRECT,
        LetterStatus.PRESENT, LetterStatus.CORRECT,
    ]


@pytest.mark.parametrize("misses", [0, 3, 5])
def test_exact_target_wins_on_any_row(engine, misses):
    for guess in MISSES[:misses]:
        engine.submit_guess(guess)

    outcome = engine.submit_guess("cRaNe")

    assert outcome.won
    assert outcome.status == GameStatus.WON
    assert engine.status == GameStatus.WON
    assert engine.current_row == misses + 1


def test_six_misses_lose_only_after_the_sixth(engine):
    for guess in MISSES[:5]:
        assert engine.submit_guess(guess).status == GameStatus.IN_PROGRESS

    outcome = engine.submit_guess(MISSES[5])

    assert outcome.status == GameStatus.LOST
    assert engine.is_over
    assert engine.current_row == 6


@pytest.mark.parametrize("word", ["", "CRAN", "CRANES", None])
def test_wrong_length_rejected_without_mutation(engine, word):
    # None submits the half-typed row
    fill_row(engine, "CRA")

    with pytest.raises(InvalidLength):
        engine.submit_guess(word)

    assert engine.current_row == 0
    assert engine.guesses == []
    assert engine.status == GameStatus.IN_PROGRESS
    assert engine.draft == "CRA"


@pytest.mark.parametrize("word", ["CR4NE", "CRA E", "CRAN!", "-----"])
def test_non_letters_rejected(engine, word):
    with pytest.raises(InvalidCharacters):
        engine.submit_guess(word)
    assert engine.current_row == 0
    assert engine.guesses == []


def test_digit_reports_invalid_characters(engine):
    with pytest.raises(InvalidCharacters) as excinfo:
        engine.submit_guess("CR4NE")
    assert excinfo.value.message == "The word must have 5 letters!"


def test_invalid_length_and_characters_share_player_message():
    assert InvalidLength.message == InvalidCharacters.message


def test_submit_uses_typed_row(engine):
    fill_row(engine, "trace")
    assert engine.draft == "TRACE"

    outcome = engine.submit_guess()

    assert outcome.guess == "TRACE"
    assert engine.row_cells == [None] * 5


def test_submit_after_win_is_rejected_and_changes_nothing(engine):
    engine.submit_guess("CRANE")

    for _ in range(2):
        with pytest.raises(GameAlreadyOver):
            engine.submit_guess("TRACE")
        assert engine.current_row == 1
        assert engine.status == GameStatus.WON


def test_submit_after_loss_is_rejected_and_changes_nothing(engine):
    for guess in MISSES:
        engine.submit_guess(guess)

    for _ in range(2):
        with pytest.raises(GameAlreadyOver):
            engine.submit_guess("CRANE")
        assert engine.current_row == 6
        assert engine.status == GameStatus.LOST


def test_game_over_checked_before_validation(engine):
    engine.submit_guess("CRANE")
    with pytest.raises(GameAlreadyOver):
        engine.submit_guess("X")


def test_enter_and_erase_letter(engine):
    engine.enter_letter(2, "a")
    assert engine.row_cells[2] == "A"

    engine.erase_letter(2)
    assert engine.row_cells[2] is None


@pytest.mark.parametrize("column", [-1, 5, "1", None])
def test_enter_letter_bad_column(engine, column):
    with pytest.raises(InvalidColumn):
        engine.enter_letter(column, "A")


@pytest.mark.parametrize("letter", ["", "AB", "1", " ", None])
def test_enter_letter_bad_letter(engine, letter):
    with pytest.raises(InvalidCharacters):
        engine.enter_letter(0, letter)


def test_hint_reveals_target_letter_in_free_cell(engine):
    hint = engine.request_hint()

    assert hint.row == 0
    assert 0 <= hint.column < 5
    assert hint.letter == "CRANE"[hint.column]
    assert engine.row_cells[hint.column] == hint.letter
    assert engine.hinted_columns == [hint.column]
    assert engine.hints_used == 1
    assert engine.hints_remaining == 2


def test_hint_only_uses_the_remaining_free_cell(engine):
    fill_row(engine, "XXXX")

    hint = engine.request_hint()

    assert hint.column == 4
    assert hint.letter == "E"
    assert engine.row_cells == ["X", "X", "X", "X", "E"]


def test_hints_never_overwrite_filled_cells():
    for seed in range(25):
        engine = GuessEngine(WORDS, rng=random.Random(seed), target="CRANE")
        engine.enter_letter(0, "Z")
        engine.enter_letter(3, "Q")
        taken = {0, 3}
        for _ in range(3):
            hint = engine.request_hint()
            assert hint.column not in taken
            taken.add(hint.column)
        assert engine.row_cells[0] == "Z"
        assert engine.row_cells[3] == "Q"


def test_hinted_cell_is_locked(engine):
    hint = engine.request_hint()

    with pytest.raises(CellLocked):
        engine.enter_letter(hint.column, "Z")
    with pytest.raises(CellLocked):
        engine.erase_letter(hint.column)
    assert engine.row_cells[hint.column] == hint.letter


def test_fourth_hint_exhausts_budget(engine):
    for _ in range(3):
        engine.request_hint()
    assert not engine.can_hint

    with pytest.raises(HintBudgetExhausted) as excinfo:
        engine.request_hint()

    assert isinstance(excinfo.value, HintError)
    assert engine.hints_used == 3


def test_budget_spans_rows(engine):
    engine.request_hint()
    engine.request_hint()
    engine.submit_guess("TRACE")
    engine.request_hint()

    with pytest.raises(HintBudgetExhausted):
        engine.request_hint()


def test_full_row_hint_is_rejected_without_cost(engine):
    fill_row(engine, "TRACE")

    with pytest.raises(NoFreeCells) as excinfo:
        engine.request_hint()

    assert excinfo.value.message == "Free up space for a hint"
    assert engine.hints_used == 0
    assert engine.row_cells == list("TRACE")


def test_row_filled_by_hints_then_typing(engine):
    engine.request_hint()
    engine.request_hint()
    for column in range(5):
        if engine.row_cells[column] is None:
            engine.enter_letter(column, "Z")

    with pytest.raises(NoFreeCells):
        engine.request_hint()
    assert engine.hints_used == 2


def test_hinted_letters_are_part_of_submitted_row(engine):
    hint = engine.request_hint()
    for column in range(5):
        if column != hint.column:
            engine.enter_letter(column, "CRANE"[column].lower())

    outcome = engine.submit_guess()

    assert outcome.won
    assert engine.hinted_columns == []


def test_hint_after_game_over(engine):
    engine.submit_guess("CRANE")
    assert not engine.can_hint
    with pytest.raises(GameAlreadyOver):
        engine.request_hint()
    assert engine.hints_used == 0


def test_cell_entry_after_game_over(engine):
    engine.submit_guess("CRANE")
    with pytest.raises(GameAlreadyOver):
        engine.enter_letter(0, "A")


def test_reset_starts_fresh_game(engine):
    engine.request_hint()
    engine.submit_guess("CRANE")

    engine.reset()

    assert engine.status == GameStatus.IN_PROGRESS
    assert engine.current_row == 0
    assert engine.hints_used == 0
    assert engine.guesses == []
    assert engine.row_cells == [None] * 5
    assert engine.hinted_columns == []
    assert engine.target_word in WORDS


def test_reset_with_explicit_target(engine):
    engine.reset("apple")
    assert engine.target_word == "APPLE"
    assert engine.submit_guess("APPLE").won


def test_errors_are_value_errors():
    assert issubclass(GuessError, ValueError)
    assert issubclass(NoFreeCells, HintError)
    assert InvalidLength().to_dict()['error_code'] == "INVALID_LENGTH"


def test_feedback_history_recomputed(engine):
    engine.submit_guess("TRACE")
    engine.submit_guess("GHOST")

    history = engine.feedback_history()

    assert len(history) == 2
    assert history[1] == [LetterStatus.ABSENT] * 5


def test_letter_expanding_when_upper_cased_is_too_long(engine):
    # "ß" upper-cases to "SS", so this is six letters
    with pytest.raises(InvalidLength):
        engine.submit_guess("CRANß")

    assert engine.current_row == 0
    assert engine.guesses == []
    assert engine.status == GameStatus.IN_PROGRESS


def test_cell_rejects_letter_expanding_when_upper_cased(engine):
    with pytest.raises(InvalidCharacters):
        engine.enter_letter(0, "ß")
    assert engine.row_cells == [None] * 5


def test_new_game_log_does_not_reveal_target(caplog):
    caplog.set_level(logging.DEBUG, logger='wordle_game.engine')

    engine = GuessEngine(WORDS, rng=random.Random(5))
    engine.reset()

    assert caplog.records
    assert all(engine.target_word not in record.getMessage() for record in caplog.records)
