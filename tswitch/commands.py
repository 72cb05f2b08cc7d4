"""Execution of post-apply shell commands."""

import os
import shutil
import subprocess

from tswitch.errors import CommandError
from tswitch.logger import get_logger

logger = get_logger(__name__)

SHELL = "sh"


def _execute(cmd: str) -> subprocess.CompletedProcess[str]:
    """Run a command string through the shell and wait for it.

    Args:
        cmd: The command string.

    Returns:
        The completed process with captured output.

    Raises:
        CommandError: If the shell cannot be found or started.
    """
    shell = shutil.which(SHELL)
    if shell is None:
        raise CommandError(f"Executable {SHELL!r} was not found on PATH")

    logger.debug(f"Running command: {cmd}")
    try:
        return subprocess.run(  # noqa: S603
            [shell, "-c", cmd],
            capture_output=True,
            text=True,
            env=os.environ.copy(),
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise CommandError(f"Error running {SHELL}: {exc}") from exc


def run_command(cmd: str, app_name: str) -> bool:
    """Run an application's reload command, logging every outcome.

    Nothing is raised to the caller; failures are reported as warnings.

    Args:
        cmd: The command string to run through the shell.
        app_name: Application the command belongs to.

    Returns:
        True if the command exited with status 0.
    """
    try:
        result = _execute(cmd)
    except CommandError as exc:
        logger.warning(f"command '{cmd}' for app '{app_name}' failed: {exc}")
        return False

    if result.returncode != 0:
        logger.warning(f"command '{cmd}' for app '{app_name}' failed: exit status {result.returncode}")
        if result.stderr:
            logger.warning(f"Stderr: {result.stderr}")
        return False

    if result.stdout:
        logger.info(f"Stdout: {result.stdout}")
    if result.stderr:
        logger.info(f"Stderr: {result.stderr}")
    return True
