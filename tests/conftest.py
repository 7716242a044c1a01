import pytest
import numpy as np
from entcheck.features.sampling import SamplingMode


@pytest.fixture
def uniform_buffer():
    """Every byte value exactly 16 times, in order."""
    return bytes(range(256)) * 16

@pytest.fixture
def constant_buffer():
    return b"\x00" * 60

@pytest.fixture
def random_buffer():
    """A reproducible pseudo-random buffer large enough for stable statistics."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=1 << 16, dtype=np.uint8).tobytes()

@pytest.fixture
def sample_file(tmp_path, random_buffer):
    path = tmp_path / "sample.bin"
    path.write_bytes(random_buffer)
    return path

@pytest.fixture(params=[SamplingMode.BYTE, SamplingMode.BIT], ids=["byte", "bit"])
def mode(request):
    return request.param
