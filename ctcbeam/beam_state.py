from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from .beam_entry import BeamEntry, ProbabilityT
from .config import DEFAULT_PRUNING_THRESHOLD, BeamStateConfig
from .errors import ScoreNotComparableError
from .sorting import ScoredValue, top_n_elements

logger = logging.getLogger(__name__)


class BeamState:
    """
    Probability records of all labelings alive at one decoding step.

    Labelings are keyed by their string form. The decoding loop feeds
    contributions through ``update`` and reads the ranked survivors back
    with ``sort`` or ``sort_top_n``. With pruning on, both of those first
    drop every labeling whose total probability is not above
    ``pruning_threshold``.
    """

    def __init__(self, pruning: bool = True, pruning_threshold: float = DEFAULT_PRUNING_THRESHOLD):
        self.entries: dict[str, BeamEntry] = {}
        self.pruning = pruning
        self.pruning_threshold = ProbabilityT(pruning_threshold)

    @classmethod
    def from_config(cls, config: BeamStateConfig) -> BeamState:
        return cls(pruning=config.pruning, pruning_threshold=config.pruning_threshold)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, labeling: str) -> bool:
        return labeling in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get_probabilities(self, labeling: str) -> BeamEntry | None:
        return self.entries.get(labeling)

    def update(self, labeling: str, pr_non_blank: float, pr_blank: float) -> None:
        entry = self.entries.setdefault(labeling, BeamEntry())
        entry.update_probabilities(pr_non_blank, pr_blank)

    def prune(self) -> None:
        """
        Drop labelings with ``pr_total <= pruning_threshold``.

        Raises ScoreNotComparableError on a NaN total, leaving the beam as it was.
        """
        if not self.pruning:
            logger.warning("prune() called with pruning disabled; nothing removed")
            return

        doomed = []
        for labeling, entry in self.entries.items():
            if math.isnan(entry.pr_total):
                raise ScoreNotComparableError(entry.pr_total, labeling)
            if entry.pr_total <= self.pruning_threshold:
                doomed.append(labeling)
        for labeling in doomed:
            del self.entries[labeling]
        if doomed:
            logger.debug(
                f"Pruned {len(doomed)} labelings at threshold {self.pruning_threshold}, "
                f"{len(self.entries)} left"
            )

    def sort(self) -> list[tuple[str, ProbabilityT]]:
        """All labelings with their total probability, best first."""
        if self.pruning:
            self.prune()

        scored = [ScoredValue(labeling, entry.pr_total) for labeling, entry in self.entries.items()]
        scored.sort(reverse=True)
        return [(s.value, s.score) for s in scored]

    def sort_top_n(self, n: int) -> list[tuple[str, ProbabilityT]]:
        """
        The ``n`` most probable labelings, best first.

        Gives the same result as ``sort()[:n]`` up to the order of equal
        totals, without sorting the whole beam.
        """
        if self.pruning:
            self.prune()

        scored = (ScoredValue(labeling, entry.pr_total) for labeling, entry in self.entries.items())
        best = top_n_elements(scored, n)
        logger.debug(f"Selected {len(best)} of {len(self.entries)} labelings")
        return [(s.value, s.score) for s in best]
