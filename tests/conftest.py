import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # The CLI installs a sink on the runner's stderr; drop it after each test
    logger.remove()
    logger.disable("lsh")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside tmp_path and restore the cwd afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
