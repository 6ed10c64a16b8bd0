"""Exception types raised by the density and metric functions."""


class InformationError(ValueError):
    """Base class for all infodisc failures."""


class LengthMismatch(InformationError):
    """Observation vectors for a joint construction differ in length."""

    def __init__(self, lengths):
        self.lengths = tuple(int(n) for n in lengths)
        super().__init__(
            f"All observation vectors must have the same length, got lengths {list(self.lengths)}"
        )


class EmptyInput(InformationError):
    """No observations were supplied where normalization needs at least one."""


class IndexOutOfRange(InformationError, IndexError):
    """An observation label falls outside its declared support."""

    def __init__(self, value, support_size, variable=None):
        self.value = int(value)
        self.support_size = int(support_size)
        self.variable = variable
        where = "" if variable is None else f" in variable {variable}"
        super().__init__(
            f"Label {self.value}{where} is outside the support [0, {self.support_size}); "
            "raise the support size"
        )


class InvalidProbability(InformationError):
    """An array passed to a metric is not a valid probability distribution."""
