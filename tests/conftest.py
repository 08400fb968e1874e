import pytest

from brace_expansion import clear_cache


@pytest.fixture(autouse=True)
def _fresh_default_cache():
    clear_cache()
    yield
    clear_cache()
