from enum import Enum
import numpy as np


class SamplingMode(str, Enum):
    BYTE = "byte"
    BIT = "bit"

    @property
    def alphabet_size(self) -> int:
        return 2 if self is SamplingMode.BIT else 256

    @property
    def samples_per_byte(self) -> int:
        return 8 if self is SamplingMode.BIT else 1

    @property
    def max_entropy(self) -> float:
        # bits per sample
        return 1.0 if self is SamplingMode.BIT else 8.0

    @property
    def unit(self) -> str:
        return self.value

    @property
    def reference_mean(self) -> float:
        return 0.5 if self is SamplingMode.BIT else 127.5


def as_array(buffer) -> np.ndarray:
    """View any bytes-like object as a flat uint8 array without copying."""
    if isinstance(buffer, np.ndarray):
        return buffer.astype(np.uint8, copy=False).ravel()
    return np.frombuffer(buffer, dtype=np.uint8)


def symbols(buffer, mode: SamplingMode) -> np.ndarray:
    """
    Reinterpret the buffer as a stream of symbols.
    Bit mode enumerates all 8 bits of every byte, least significant bit first.
    """
    data = as_array(buffer)
    if mode is SamplingMode.BIT:
        return np.unpackbits(data, bitorder="little")
    return data


def symbol_counts(buffer, mode: SamplingMode) -> np.ndarray:
    """Occurrences of every symbol of the mode's alphabet, zeros included."""
    return np.bincount(symbols(buffer, mode), minlength=mode.alphabet_size).astype(np.int64)


def sample_count(buffer, mode: SamplingMode) -> int:
    return len(as_array(buffer)) * mode.samples_per_byte
