from dataclasses import dataclass, field

import numpy as np

# Probabilities are kept in single precision throughout the beam.
ProbabilityT = np.float32


@dataclass
class BeamEntry:
    """
    Probability mass of one labeling at the current decoding step.

    ``pr_non_blank`` collects paths that end in a real label, ``pr_blank``
    paths that end in a blank. ``pr_total`` is derived and only ever moves
    together with the other two.
    """

    pr_non_blank: ProbabilityT = ProbabilityT(0.0)
    pr_blank: ProbabilityT = ProbabilityT(0.0)
    pr_total: ProbabilityT = field(init=False)

    def __post_init__(self):
        self.pr_non_blank = ProbabilityT(self.pr_non_blank)
        self.pr_blank = ProbabilityT(self.pr_blank)
        self.pr_total = self.pr_non_blank + self.pr_blank

    def update_probabilities(self, pr_non_blank: float, pr_blank: float) -> None:
        """Add probability contributions for both path kinds, in place."""
        pr_non_blank = ProbabilityT(pr_non_blank)
        pr_blank = ProbabilityT(pr_blank)
        self.pr_non_blank += pr_non_blank
        self.pr_blank += pr_blank
        self.pr_total += pr_blank + pr_non_blank
