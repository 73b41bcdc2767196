from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, fields
from typing import Any

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PRUNING_THRESHOLD = 1e-5


@dataclass(frozen=True)
class BeamStateConfig:
    pruning: bool = True
    pruning_threshold: float = DEFAULT_PRUNING_THRESHOLD

    def __post_init__(self):
        if not isinstance(self.pruning, bool):
            raise ConfigError(f"pruning must be a bool, got {self.pruning!r}")
        if isinstance(self.pruning_threshold, bool) or not isinstance(
            self.pruning_threshold, numbers.Real
        ):
            raise ConfigError(
                f"pruning_threshold must be a number, got {self.pruning_threshold!r}"
            )
        if not math.isfinite(self.pruning_threshold):
            raise ConfigError(
                f"pruning_threshold must be finite, got {self.pruning_threshold!r}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BeamStateConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown beam state settings: {', '.join(unknown)}")

        data = dict(data)
        threshold = data.get("pruning_threshold")
        # YAML 1.1 loads exponent floats without a dot ("1e-5") as strings.
        if isinstance(threshold, str):
            try:
                data["pruning_threshold"] = float(threshold)
            except ValueError:
                raise ConfigError(
                    f"pruning_threshold must be a number, got {threshold!r}"
                ) from None
        return cls(**data)


def load_config(config_path: str) -> BeamStateConfig:
    """
    Parse a YAML file into a BeamStateConfig.

    Settings may be given at the top level or under a ``beam_state`` key.
    An empty file gives the defaults.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"Config file '{config_path}' not found.")
        raise
    except yaml.YAMLError as e:
        logger.error(f"YAML parse error in '{config_path}': {e}")
        raise

    if not isinstance(cfg, dict):
        raise ConfigError(f"Config '{config_path}' must contain a mapping")
    section = cfg.get("beam_state", cfg)
    if not isinstance(section, dict):
        raise ConfigError(f"'beam_state' in '{config_path}' must be a mapping")

    config = BeamStateConfig.from_dict(section)
    logger.info(f"Configuration loaded from {config_path}")
    return config
