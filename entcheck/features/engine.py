import logging
from typing import Iterable, List, Optional, Tuple
from config import AnalysisConfig, settings
from entcheck.features.sampling import SamplingMode, sample_count, symbol_counts
from entcheck.features.result_structs import FrequencyTable, ResultRecord
from entcheck.features.stats import (
    MONTE_CARLO_GROUP,
    PValueMethod,
    arithmetic_mean,
    chi_square,
    compression,
    entropy,
    monte_carlo_pi,
    serial_correlation,
)
from entcheck.services.data_source import ByteSourceFactory
from entcheck.utils.exceptions import EmptyInputError, InsufficientDataError
from entcheck.utils.preprocessing import fold_case

logger = logging.getLogger(__name__)


def calculate(buffer, mode: SamplingMode = SamplingMode.BYTE,
              p_value_method: PValueMethod = PValueMethod.NORMAL) -> ResultRecord:
    """
    Run every measurement over one snapshot of the buffer and bundle the results.

    Raises EmptyInputError for an empty buffer and InsufficientDataError when there are
    fewer bytes than one Monte Carlo group needs.
    """
    snapshot = bytes(buffer)
    mode = SamplingMode(mode)
    if not snapshot:
        raise EmptyInputError("Cannot analyse an empty buffer")
    if len(snapshot) < MONTE_CARLO_GROUP:
        raise InsufficientDataError(len(snapshot), MONTE_CARLO_GROUP)

    entropy_value = entropy(snapshot, mode)
    chisquare, p_value = chi_square(snapshot, mode, p_value_method)
    pi_estimate, _, _ = monte_carlo_pi(snapshot)
    total = sample_count(snapshot, mode)
    counts = symbol_counts(snapshot, mode)

    return ResultRecord(
        mode=mode,
        byte_count=len(snapshot),
        sample_count=total,
        entropy=entropy_value,
        compression=compression(entropy_value, mode),
        chisquare=chisquare,
        p_value=p_value,
        mean=arithmetic_mean(snapshot),
        pi_estimate=pi_estimate,
        serial_correlation=serial_correlation(snapshot),
        frequencies=FrequencyTable(mode=mode, counts=tuple(int(c) for c in counts), total=total),
    )


class AnalysisPipeline:
    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or settings.analysis

    def prepare(self, buffer) -> bytes:
        if self.config.fold_case:
            return fold_case(buffer)
        return bytes(buffer)

    def run(self, target=None) -> ResultRecord:
        source = ByteSourceFactory.create(target)
        buffer = self.prepare(source.read())
        logger.debug("analysing %s: %d bytes, %s mode", source.name, len(buffer), self.config.mode.value)
        return calculate(buffer, self.config.mode, self.config.p_value_method)


def analyze_many(targets: Iterable, config: Optional[AnalysisConfig] = None) -> List[Tuple[str, ResultRecord]]:
    """Analyse each input on its own; nothing carries over from one run to the next."""
    results = []
    for target in targets:
        source = ByteSourceFactory.create(target)
        results.append((source.name, AnalysisPipeline(config).run(source)))
    return results
