"""
Shell-script probes: run a user script once per probe value.
"""

from __future__ import annotations

import io
import logging
import os
import re
import subprocess
from typing import IO, Dict, Optional, Sequence, Union

from ..config import DEFAULT_ENV_VAR, PROBE_PLACEHOLDER, get_default_shell
from .base import ExecutionFailed, Exited, Probe, RunOutcome, join_command

logger = logging.getLogger(__name__)

_VAR_PATTERN = re.compile(r"\$(?:\{(\w*)\}|(\w+))")


def expand_probe_template(template: str, value: str) -> str:
    """
    Substitute the probe value into a path template.

    `$PROBE` and `${PROBE}` become the value; any other `$NAME` reference
    expands to the empty string.
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1) if match.group(1) is not None else match.group(2)
        return value if name == PROBE_PLACEHOLDER else ""

    return _VAR_PATTERN.sub(_replace, template)


def _has_fileno(stream: IO) -> bool:
    try:
        stream.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return False
    return True


class ShellProbe(Probe):
    """
    Runs a script through a shell, exposing the probe value to it.

    The script text is fed to the shell on stdin, so multi-word commands and
    shell syntax work as typed on a command line.

    Args:
        command: Script text, or words joined with spaces
        shell: Shell executable (defaults to CULPRIT_SHELL or /bin/sh)
        env_var: Environment variable carrying the probe value ("" disables)
        chdir: Working directory template; $PROBE is replaced with the value
        echo_stream: Stream receiving the script's stdout and stderr
        log_commands: Log the script and directory before each run
        timeout: Seconds before a run is abandoned as a failure
    """

    def __init__(
        self,
        command: Union[str, Sequence[str]],
        shell: Optional[str] = None,
        env_var: str = DEFAULT_ENV_VAR,
        chdir: Optional[str] = None,
        echo_stream: Optional[IO] = None,
        log_commands: bool = False,
        timeout: Optional[float] = None,
    ):
        self.script = join_command(command)
        if not self.script.strip():
            raise ValueError("probe script cannot be empty")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"timeout must be > 0, got {timeout}")
        self.shell = shell or get_default_shell()
        self.env_var = env_var
        self.chdir = chdir
        self.echo_stream = echo_stream
        self.log_commands = log_commands
        self.timeout = timeout

    def build_env(self, value: str) -> Optional[Dict[str, str]]:
        """Child environment, or None to inherit ours unchanged."""
        if not self.env_var:
            return None
        env = os.environ.copy()
        env[self.env_var] = value
        return env

    def working_dir(self, value: str) -> Optional[str]:
        if not self.chdir:
            return None
        return expand_probe_template(self.chdir, value)

    def run(self, value: str) -> RunOutcome:
        cwd = self.working_dir(value)
        if self.log_commands:
            logger.info(f"SCRIPT :: {self.script}")
            if cwd is not None:
                logger.info(f"CHDIR :: {cwd}")

        # Live echo needs a real file descriptor; otherwise capture and copy
        live = self.echo_stream is not None and _has_fileno(self.echo_stream)
        if self.echo_stream is None:
            out = subprocess.DEVNULL
        elif live:
            out = self.echo_stream
        else:
            out = subprocess.PIPE

        try:
            result = subprocess.run(
                [self.shell],
                input=self.script,
                text=True,
                errors="replace",
                stdout=out,
                stderr=subprocess.STDOUT if out == subprocess.PIPE else out,
                env=self.build_env(value),
                cwd=cwd,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return ExecutionFailed(f"probe timed out after {self.timeout}s")
        except OSError as e:
            return ExecutionFailed(f"could not run {self.shell}: {e}")

        if out == subprocess.PIPE and result.stdout:
            self.echo_stream.write(result.stdout)

        logger.debug(f"Probe {value} exited with code {result.returncode}")
        return Exited(result.returncode)

    def __repr__(self) -> str:
        return f"ShellProbe(script={self.script!r}, shell={self.shell!r})"
