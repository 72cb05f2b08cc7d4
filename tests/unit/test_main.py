"""Tests for the __main__ entry point."""

from unittest.mock import patch


class TestRunFunction:
    """Tests for the run() function."""

    def test_run_calls_main(self) -> None:
        """Test that run() calls the main() function."""
        with patch("tswitch.__main__.main") as mock_main:
            from tswitch.__main__ import run

            run()
            mock_main.assert_called_once()

    def test_run_handles_exception(self) -> None:
        """Test that run() handles exceptions and exits with code 1."""
        with (
            patch("tswitch.__main__.main", side_effect=RuntimeError("Test error")),
            patch("tswitch.__main__.traceback.print_exc") as mock_traceback,
            patch("tswitch.__main__.sys.exit") as mock_exit,
        ):
            from tswitch.__main__ import run

            run()
            mock_traceback.assert_called_once()
            mock_exit.assert_called_once_with(1)

    def test_run_lets_system_exit_through(self) -> None:
        """Test that explicit exits from main() are not turned into tracebacks."""
        with (
            patch("tswitch.__main__.main", side_effect=SystemExit(1)),
            patch("tswitch.__main__.traceback.print_exc") as mock_traceback,
        ):
            from tswitch.__main__ import run

            try:
                run()
            except SystemExit as exc:
                assert exc.code == 1
            mock_traceback.assert_not_called()

    def test_run_handles_keyboard_interrupt(self) -> None:
        """Test that Ctrl+C outside the picker exits with status 130."""
        with (
            patch("tswitch.__main__.main", side_effect=KeyboardInterrupt),
            patch("tswitch.__main__.sys.exit") as mock_exit,
        ):
            from tswitch.__main__ import run

            run()
            mock_exit.assert_called_once_with(130)
