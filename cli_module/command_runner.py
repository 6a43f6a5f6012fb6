"""
Command execution utilities for the cli plugin.
"""

import re
import subprocess
from typing import Dict, List

from .config import child_environment
from .logger import get_logger

logger = get_logger()

ANSI_COLOR_RE = re.compile(r'\x1b\[\d+(?:;\d+)*m')
OUTPUT_ENCODING = 'utf-8'


class CommandExecutionError(Exception):
    """Raised when the shell could not be started for a command."""

    def __init__(self, command: str, reason: Exception):
        super().__init__(f"{command} can't be executed: {reason}")
        self.command = command
        self.reason = reason


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences such as ``\\x1b[1;32m`` from text."""
    return ANSI_COLOR_RE.sub('', text)


def decode_output(raw: bytes) -> str:
    """Decode captured bytes without translating carriage returns."""
    return (raw or b'').decode(OUTPUT_ENCODING, errors='replace')


def split_output_lines(raw: str) -> List[str]:
    """
    Split merged output on newlines only, dropping trailing whitespace of each.

    A carriage return or other separator inside a line stays part of it.
    """
    if not raw:
        return []
    lines = raw.split("\n")
    if raw.endswith("\n"):
        lines.pop()
    return [line.rstrip() for line in lines]


class CommandRunner:
    """Utility class for running shell commands with merged output."""

    def __init__(self, debug: bool = False):
        self.debug = debug

    def debug_print(self, message: str):
        """Print debug message to stdout."""
        if self.debug:
            print(message, flush=True)

    def run_command(self, cmd: str) -> Dict:
        """
        Run a shell command and return its result.

        stderr is redirected into stdout so the lines keep the order the
        command wrote them in. The call blocks until the command exits.

        Returns:
            Dict with ``returncode`` and ``output``.

        Raises:
            CommandExecutionError: the shell itself could not be spawned.
        """
        logger.info(f"Executing: {cmd}")

        try:
            result = subprocess.run(
                cmd,
                shell=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=child_environment(),
            )
        except OSError as e:
            logger.error(f"Command failed: {cmd}, Error: {e}")
            self.debug_print(f"\n[DEBUG] Command failed: {cmd}, Error: {e}\n")
            raise CommandExecutionError(cmd, e) from e

        lines = split_output_lines(decode_output(result.stdout))
        command_result = {
            'returncode': result.returncode,
            'output': "\n".join(lines),
        }

        if self.debug:
            self.debug_print(f"\n[DEBUG] Command: {cmd}")
            self.debug_print(f"[DEBUG] Return code: {command_result['returncode']}")

        return command_result
