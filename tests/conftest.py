import pytest

from subspace_core.identity import calculate_subspace_id
from subspace_core.registry import load_registry, reset_registry
from subspace_core.constants import DEFAULT_SUBSPACE_OPS


@pytest.fixture
def registry():
    return load_registry()


@pytest.fixture
def sid():
    return calculate_subspace_id("research-dao", DEFAULT_SUBSPACE_OPS, "")


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    yield
    reset_registry()
