"""
BeamEntry Tests

Construction defaults and additive probability updates.
"""

import pytest

from ctcbeam import BeamEntry, ProbabilityT


def test_beam_entry_default():
    """A fresh entry holds no probability mass."""
    entry = BeamEntry()

    assert entry.pr_total == 0.0
    assert entry.pr_non_blank == 0.0
    assert entry.pr_blank == 0.0


def test_beam_entry_new():
    """pr_total starts as the sum of both path kinds."""
    entry = BeamEntry(0.3, 0.7)

    assert entry.pr_non_blank == pytest.approx(0.3)
    assert entry.pr_blank == pytest.approx(0.7)
    assert entry.pr_total == entry.pr_non_blank + entry.pr_blank


def test_beam_entry_stores_single_precision():
    entry = BeamEntry(0.25, 0.5)

    assert isinstance(entry.pr_non_blank, ProbabilityT)
    assert isinstance(entry.pr_blank, ProbabilityT)
    assert isinstance(entry.pr_total, ProbabilityT)


def test_pr_total_is_not_an_init_argument():
    with pytest.raises(TypeError):
        BeamEntry(0.1, 0.2, 0.3)


def test_update_probabilities():
    entry = BeamEntry(0.2, 0.3)

    entry.update_probabilities(0.1, 0.1)

    assert entry.pr_total == pytest.approx(0.7)
    assert entry.pr_non_blank == pytest.approx(0.3)
    assert entry.pr_blank == pytest.approx(0.4)


def test_update_probabilities_accumulates():
    """pr_total tracks the sum of every delta ever applied."""
    entry = BeamEntry()
    deltas = [(0.01, 0.02), (0.1, 0.0), (0.0, 0.25), (0.05, 0.05)]

    for pr_non_blank, pr_blank in deltas:
        entry.update_probabilities(pr_non_blank, pr_blank)

    assert entry.pr_non_blank == pytest.approx(sum(d[0] for d in deltas))
    assert entry.pr_blank == pytest.approx(sum(d[1] for d in deltas))
    assert entry.pr_total == pytest.approx(sum(d[0] + d[1] for d in deltas))
    assert entry.pr_total == pytest.approx(entry.pr_non_blank + entry.pr_blank)


def test_update_probabilities_accepts_negative_deltas():
    entry = BeamEntry(0.5, 0.5)

    entry.update_probabilities(-0.25, 0.0)

    assert entry.pr_non_blank == pytest.approx(0.25)
    assert entry.pr_total == pytest.approx(0.75)
