import pytest

from vectorz import config


@pytest.fixture(autouse=True)
def _restore_config():
    """Tests may load overrides; every test starts from the defaults."""
    config.reset()
    yield
    config.reset()
