import pytest

from params import Params


@pytest.fixture
def params():
    return Params()


@pytest.fixture
def small_params():
    # Few particles, keeps the quadratic graph quick
    return Params(particle_base_count=40, particle_count_large_screen_factor=1.0)
