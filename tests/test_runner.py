"""Tests for running cargo."""

import subprocess

import pytest
from pytest_mock import MockerFixture

from crgl.models import RunOptions
from crgl.runner import CargoSpawnError, format_command, run_cargo


def _completed(returncode: int) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


class TestRunCargo:
    """Tests for run_cargo."""

    def test_runs_cargo_once_and_waits(self, mocker: MockerFixture) -> None:
        """Test that exactly one child is spawned with the full argument list."""
        mock_run = mocker.patch('crgl.runner.subprocess.run', return_value=_completed(0))

        result = run_cargo(['add', 'serde'], RunOptions())

        assert result == 0
        mock_run.assert_called_once_with(['cargo', 'add', 'serde'], check=False, shell=False)

    def test_custom_executable(self, mocker: MockerFixture) -> None:
        """Test that --cargo replaces the executable."""
        mock_run = mocker.patch('crgl.runner.subprocess.run', return_value=_completed(0))

        run_cargo(['build'], RunOptions(cargo='/opt/rust/bin/cargo'))

        assert mock_run.call_args.args[0] == ['/opt/rust/bin/cargo', 'build']

    def test_returns_child_exit_code(self, mocker: MockerFixture) -> None:
        """Test that a failing child's exit code is returned."""
        mocker.patch('crgl.runner.subprocess.run', return_value=_completed(101))

        assert run_cargo(['build'], RunOptions()) == 101

    def test_signal_exit_code(self, mocker: MockerFixture) -> None:
        """Test that a child killed by a signal maps to 128 + signal."""
        mocker.patch('crgl.runner.subprocess.run', return_value=_completed(-9))

        assert run_cargo(['build'], RunOptions()) == 137

    @pytest.mark.parametrize('error', [FileNotFoundError, PermissionError])
    def test_spawn_failure(self, mocker: MockerFixture, error: type[OSError]) -> None:
        """Test that a missing or unrunnable executable raises CargoSpawnError."""
        mocker.patch('crgl.runner.subprocess.run', side_effect=error('cargo'))

        with pytest.raises(CargoSpawnError, match='Failed to start cargo'):
            run_cargo(['build'], RunOptions())

    def test_dry_run_prints_without_spawning(
        self,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture,
    ) -> None:
        """Test that dry run prints the command and spawns nothing."""
        mock_run = mocker.patch('crgl.runner.subprocess.run')

        result = run_cargo(['new', 'my app'], RunOptions(dry_run=True))

        assert result == 0
        mock_run.assert_not_called()
        assert capsys.readouterr().out == "cargo new 'my app'\n"


def test_format_command_quotes_arguments() -> None:
    """Test that arguments with spaces are shell-quoted."""
    assert format_command(['cargo', 'add', 'serde', '--features', 'derive std']) == (
        "cargo add serde --features 'derive std'"
    )
