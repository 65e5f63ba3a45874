"""Letter evaluation and keyboard aggregation rules."""

from __future__ import annotations

from animal_wordle.models.game import LetterMark, best_mark
from animal_wordle.services.evaluator import evaluate_guess, merge_keyboard

C = LetterMark.CORRECT
P = LetterMark.PRESENT
A = LetterMark.ABSENT
U = LetterMark.UNUSED


def test_exact_match_is_all_correct() -> None:
    assert evaluate_guess("TIGER", "TIGER") == [C, C, C, C, C]


def test_exact_matches_consume_repeated_letter_budget() -> None:
    # Both A's in PANDA are matched in place, so no A is left to be PRESENT.
    assert evaluate_guess("PANDA", "AAAAA") == [A, C, A, A, C]


def test_surplus_repeats_are_absent_left_to_right() -> None:
    assert evaluate_guess("TIGER", "EERIE") == [P, A, P, P, A]


def test_present_letters_use_remaining_count_after_exact_matches() -> None:
    assert evaluate_guess("OTTER", "TOTEM") == [P, P, C, C, A]
    assert evaluate_guess("LEMUR", "EERIE") == [A, C, P, A, A]


def test_no_shared_letters_is_all_absent() -> None:
    assert evaluate_guess("OKAPI", "THUMB") == [A, A, A, A, A]


def test_one_mark_per_letter_and_correct_count_matches_positions() -> None:
    pairs = [("SHARK", "HARKS"), ("CORAL", "CAROL"), ("SEALS", "LEASH"), ("WHALE", "WHEAT"), ("RHINO", "ROBIN")]
    for secret, guess in pairs:
        marks = evaluate_guess(secret, guess)
        assert len(marks) == len(guess)
        exact = sum(1 for s, g in zip(secret, guess) if s == g)
        assert marks.count(C) == exact


def test_works_for_other_word_lengths() -> None:
    assert evaluate_guess("YAK", "KAY") == [P, C, P]
    assert evaluate_guess("GORILLA", "GALLONS") == [C, P, P, P, P, A, A]


def test_best_mark_follows_priority_order() -> None:
    assert best_mark(U, A) is A
    assert best_mark(A, P) is P
    assert best_mark(P, C) is C
    assert best_mark(C, A) is C
    assert best_mark(P, A) is P
    assert C.priority > P.priority > A.priority > U.priority


def test_merge_keyboard_never_downgrades() -> None:
    keyboard = {"T": U, "I": U, "G": U, "E": U, "R": U}
    merge_keyboard(keyboard, "TIGER", [C, A, P, A, A])
    assert keyboard == {"T": C, "I": A, "G": P, "E": A, "R": A}

    merge_keyboard(keyboard, "TIGER", [A, P, C, A, A])
    assert keyboard["T"] is C
    assert keyboard["I"] is P
    assert keyboard["G"] is C


def test_merge_keyboard_repeated_letter_keeps_best_mark_within_one_guess() -> None:
    keyboard = {}
    merge_keyboard(keyboard, "AAAAA", [A, C, A, A, C])
    assert keyboard == {"A": C}
