import math
from enum import Enum
from typing import Tuple
import numpy as np
from scipy.special import erfc
from scipy.stats import chi2
from entcheck.features.sampling import SamplingMode, as_array, sample_count, symbol_counts
from entcheck.features.result_structs import Measurement, Undefined, DEGENERATE_VARIANCE, INVALID_CHI_SQUARE_TAIL
from entcheck.utils.exceptions import InsufficientDataError

MONTE_CARLO_GROUP = 6
COORDINATE_BYTES = 3
RADIUS_SQUARED = 1 << 48  # (2**24)**2, bound of one squared coordinate


class PValueMethod(str, Enum):
    NORMAL = "normal"
    EXACT = "exact"


def normal_cdf(x: float) -> float:
    return 0.5 * float(erfc(-x / math.sqrt(2.0)))


def entropy(buffer, mode: SamplingMode) -> float:
    """Shannon entropy in bits per sample; zero-probability symbols are skipped."""
    counts = symbol_counts(buffer, mode)
    total = counts.sum()
    p = counts[counts > 0] / total
    return float(0.0 - np.dot(p, np.log2(p)))


def compression(entropy_value: float, mode: SamplingMode) -> float:
    """Percentage an optimal coder could shave off, derived from the entropy."""
    return 100.0 * (1.0 - entropy_value / mode.max_entropy)


def chi_square(buffer, mode: SamplingMode, method: PValueMethod = PValueMethod.NORMAL) -> Tuple[float, Measurement]:
    """
    Chi-square statistic of the symbol counts against a uniform distribution, and the
    probability that a uniform source would exceed it.

    The normal method maps the statistic to z = sqrt(chi - df) and returns 1 - Phi(z).
    That transform is only defined when chi >= df; below that the p-value is Undefined.
    The exact method uses the chi-square survival function and is always defined.
    """
    method = PValueMethod(method)
    counts = symbol_counts(buffer, mode)
    expected = sample_count(buffer, mode) / mode.alphabet_size
    diff = counts - expected
    statistic = float(np.sum(diff * diff / expected))
    dof = mode.alphabet_size - 1

    if method is PValueMethod.EXACT:
        return statistic, float(chi2.sf(statistic, dof))
    if statistic < dof:
        return statistic, Undefined(INVALID_CHI_SQUARE_TAIL)
    z = math.sqrt(statistic - dof)
    return statistic, 1.0 - normal_cdf(z)


def arithmetic_mean(buffer) -> float:
    """Mean of the raw byte values, whatever the sampling mode."""
    data = as_array(buffer)
    return int(data.sum(dtype=np.uint64)) / len(data)


def monte_carlo_pi(buffer) -> Tuple[float, int, int]:
    """
    Estimate pi from consecutive 6-byte groups read as (x, y) pairs of 24-bit
    big-endian coordinates. A trailing partial group is ignored.
    Returns (estimate, hits, groups).
    """
    data = as_array(buffer)
    groups = len(data) // MONTE_CARLO_GROUP
    if groups == 0:
        raise InsufficientDataError(len(data), MONTE_CARLO_GROUP)

    coords = data[:groups * MONTE_CARLO_GROUP].reshape(groups, 2, COORDINATE_BYTES).astype(np.int64)
    packed = (coords[..., 0] << 16) | (coords[..., 1] << 8) | coords[..., 2]
    x, y = packed[:, 0], packed[:, 1]
    # both squares are < 2**48, so the sum stays well inside int64
    hits = int(np.count_nonzero(x * x + y * y < RADIUS_SQUARED))
    return 4.0 * hits / groups, hits, groups


def serial_correlation(buffer) -> Measurement:
    """Lag-1 Pearson correlation of the byte values."""
    data = as_array(buffer).astype(np.int64)
    x, y = data[:-1], data[1:]
    n = len(x)

    sum_x, sum_y = int(x.sum()), int(y.sum())
    sum_xy = int(np.dot(x, y))
    sum_x2, sum_y2 = int(np.dot(x, x)), int(np.dot(y, y))

    numerator = n * sum_xy - sum_x * sum_y
    denominator = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if denominator == 0:
        return Undefined(DEGENERATE_VARIANCE)
    return numerator / math.sqrt(denominator)
