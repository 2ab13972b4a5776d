import pytest

from searchgraph.config import reset_config
from searchgraph.container import reset_container


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from environment-derived configuration."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
