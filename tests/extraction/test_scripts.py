from __future__ import annotations

from ctsextract.extraction.scripts import count_scripts


def test_separated_greek_words_are_counted_individually() -> None:
    counts = count_scripts("λόγος λόγος")

    assert counts.greek == 2
    assert counts.latin == 0
    assert counts.arabic == 0


def test_adjacent_same_script_letters_form_one_word() -> None:
    assert count_scripts("λόγοςλόγος").greek == 1


def test_polytonic_greek_stays_in_one_run() -> None:
    assert count_scripts("μῆνιν ἄειδε θεὰ").greek == 3


def test_mixed_scripts_are_tallied_separately() -> None:
    counts = count_scripts("Arma virumque cano, λόγος; بسم الله")

    assert counts.latin == 3
    assert counts.greek == 1
    assert counts.arabic == 2
    assert counts.total == 6


def test_punctuation_and_digits_split_runs_without_counting() -> None:
    counts = count_scripts("λόγος.λόγος 1234 -- ...")

    assert counts.greek == 2
    assert counts.total == 2


def test_script_switch_without_separator_starts_a_new_word() -> None:
    counts = count_scripts("verbumλόγος")

    assert counts.latin == 1
    assert counts.greek == 1


def test_empty_text_counts_nothing() -> None:
    assert count_scripts("").total == 0
