"""
Cli Test Module Package

This package runs shell commands from pytest tests and provides assertions
over the output and exit code of the latest command.
"""

from .cli import Cli, NO_RESULT
from .command_runner import CommandRunner, CommandExecutionError, strip_ansi
from .logger import get_logger

__all__ = ['Cli', 'NO_RESULT', 'CommandRunner', 'CommandExecutionError', 'strip_ansi', 'get_logger']
