import pytest

from crgl.logging import configure_logging


@pytest.fixture(autouse=True)
def _configure_logging() -> None:
    """Route structlog through the CLI renderer so stdout only carries command output."""
    configure_logging(verbose=False)
