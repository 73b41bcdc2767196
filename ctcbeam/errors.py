class CTCBeamError(Exception):
    """Base class for errors raised by ctcbeam."""


class ScoreNotComparableError(CTCBeamError, ValueError):
    """A NaN score reached an operation that needs a total order over scores."""

    def __init__(self, score, value=None):
        self.score = score
        self.value = value
        if value is None:
            message = f"Score {score!r} is not comparable"
        else:
            message = f"Score {score!r} of {value!r} is not comparable"
        super().__init__(message)


class ConfigError(CTCBeamError):
    pass
