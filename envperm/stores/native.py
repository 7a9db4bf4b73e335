"""Native persistent-variable store.

Shells out to `setx NAME "VALUE"` so the assignment is kept by the OS
across sessions.
"""

from __future__ import annotations

import subprocess
from typing import Any, Callable, Mapping

from ..config.types import DEFAULT_NATIVE_COMMAND
from ..errors import EnvPermError
from ..utils.env import read_env_value
from ..utils.log import log_debug


Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


def describe_failure(command: str, returncode: int, stderr: bytes | None) -> str:
    """Build the error message for a command that exited non-zero."""
    if returncode >= 0:
        message = f"{command} exited with status code {returncode}"
    else:
        message = f"{command} was terminated by signal {-returncode}"

    try:
        text = (stderr or b"").decode("utf-8")
    except UnicodeDecodeError:
        return f"{message}\nstderr content cannot be displayed because it is not utf-8."
    return f"{message}\n{command} wrote the following to stderr:\n{text}"


class NativeStore:
    """Persists variables through the OS's persistent environment command."""

    def __init__(
        self,
        command: str = DEFAULT_NATIVE_COMMAND,
        runner: Runner | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize native store.
        
        Args:
            command: Executable invoked as `command NAME "VALUE"`
            runner: subprocess.run compatible callable
            environ: Environment used to read current values (defaults to os.environ)
        """
        self.command = command
        self.runner = runner or subprocess.run
        self.environ = environ

    def set(self, name: str, value: Any) -> None:
        """Run `command NAME "VALUE"`, quoting the value."""
        args = [self.command, str(name), f'"{value}"']
        log_debug(f"Running {args}")
        try:
            result = self.runner(args, capture_output=True)
        except OSError as e:
            raise EnvPermError(f"Could not run {self.command}: {e}") from e

        if result.returncode != 0:
            raise EnvPermError(describe_failure(self.command, result.returncode, result.stderr))

    def append(self, name: str, value: Any) -> None:
        """Persist `VALUE; CURRENT`, reading CURRENT from the process environment.

        A variable that is not present counts as empty, giving `VALUE; `.
        """
        current = read_env_value(str(name), self.environ)
        if current is None:
            log_debug(f"{name} is not present, appending to an empty value")
            current = ""
        self.set(name, f"{value}; {current}")
