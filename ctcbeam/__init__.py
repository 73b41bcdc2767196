import logging

from .beam_entry import BeamEntry, ProbabilityT
from .beam_state import BeamState
from .config import BeamStateConfig, load_config
from .errors import ConfigError, CTCBeamError, ScoreNotComparableError
from .sorting import ScoredValue, top_n, top_n_elements

__all__ = [
    "BeamEntry",
    "BeamState",
    "BeamStateConfig",
    "ConfigError",
    "CTCBeamError",
    "ProbabilityT",
    "ScoreNotComparableError",
    "ScoredValue",
    "load_config",
    "top_n",
    "top_n_elements",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
