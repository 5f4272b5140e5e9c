"""Unit tests for the Uvicorn runner implementation."""

from pytest_mock import MockerFixture

from models.config import ServiceConfiguration
from runners.uvicorn import start_uvicorn


def test_start_uvicorn(mocker: MockerFixture) -> None:
    """Test the function to start Uvicorn server using default configuration."""
    configuration = ServiceConfiguration()

    # don't start real Uvicorn server
    mocked_run = mocker.patch("uvicorn.run")
    start_uvicorn(configuration)
    mocked_run.assert_called_once_with(
        "app.main:app",
        host="localhost",
        port=8080,
        workers=1,
        log_level=20,
        use_colors=True,
        access_log=True,
    )


def test_start_uvicorn_different_host_port(mocker: MockerFixture) -> None:
    """Test the function to start Uvicorn server using custom configuration."""
    configuration = ServiceConfiguration(
        host="0.0.0.0", port=1234, workers=4, color_log=False, access_log=False
    )

    mocked_run = mocker.patch("uvicorn.run")
    start_uvicorn(configuration)
    mocked_run.assert_called_once_with(
        "app.main:app",
        host="0.0.0.0",
        port=1234,
        workers=4,
        log_level=20,
        use_colors=False,
        access_log=False,
    )
