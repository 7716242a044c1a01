import math
from dataclasses import dataclass, field, fields
from typing import Tuple, Union
import pandas as pd
from entcheck.features.sampling import SamplingMode

DEGENERATE_VARIANCE = "zero variance in a lag window"
INVALID_CHI_SQUARE_TAIL = "chi-square below its degrees of freedom"


@dataclass(frozen=True)
class Undefined:
    """Marks a statistic that has no numeric value for this input."""
    reason: str

    def __bool__(self) -> bool:
        return False


Measurement = Union[float, Undefined]


def is_defined(value) -> bool:
    return not isinstance(value, Undefined)


@dataclass(frozen=True)
class FrequencyTable:
    mode: SamplingMode
    counts: Tuple[int, ...]
    total: int

    def fraction(self, symbol: int) -> float:
        return self.counts[symbol] / self.total if self.total else 0.0

    def rows(self):
        for symbol, count in enumerate(self.counts):
            yield symbol, count, self.fraction(symbol)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows()), columns=["Value", "Occurrences", "Fraction"])


@dataclass(frozen=True)
class ResultRecord:
    """Snapshot of every statistic computed from one buffer."""
    mode: SamplingMode
    byte_count: int
    sample_count: int
    entropy: float
    compression: float
    chisquare: float
    p_value: Measurement
    mean: float
    pi_estimate: float
    serial_correlation: Measurement
    frequencies: FrequencyTable = field(repr=False)

    @property
    def pi_error(self) -> float:
        """Deviation of the Monte Carlo estimate from pi, in percent."""
        return abs(self.pi_estimate - math.pi) / math.pi * 100.0

    def to_dict(self) -> dict:
        out = {"mode": self.mode.value}
        undefined = {}
        for f in fields(self):
            if f.name in ("mode", "frequencies"):
                continue
            value = getattr(self, f.name)
            if isinstance(value, Undefined):
                undefined[f.name] = value.reason
                value = None
            out[f.name] = value
        out["pi_error"] = self.pi_error
        out["undefined"] = undefined
        out["frequencies"] = list(self.frequencies.counts)
        return out
