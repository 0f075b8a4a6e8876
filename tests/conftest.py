import pytest

from anyvalue import rng


@pytest.fixture(autouse=True)
def restore_global_source():
    previous = rng.get_source()
    yield
    rng._global_source = previous


@pytest.fixture
def source():
    return rng.RandomSource(seed=42)
