"""
Shell command wrapper exposing assertions over the latest command output.
"""

from typing import Optional

from . import assertions
from .command_runner import CommandExecutionError, CommandRunner, strip_ansi
from .logger import get_logger

logger = get_logger()

# Exit code before any command has run in the current test.
NO_RESULT = None


class Cli:
    """
    Wrapper for basic shell commands and shell output.

    One instance lives for the whole test session; ``reset`` is called
    before each test so assertions only ever see the latest command.

    Usage:
        cli.run_command('ls -la')
        cli.see_in_output('README')

        # do not fail the test when the command fails
        cli.run_command('false', fail_non_zero=False)
        cli.see_exit_code_is(1)
    """

    def __init__(self, debug: bool = False, runner: Optional[CommandRunner] = None):
        self.runner = runner if runner is not None else CommandRunner(debug=debug)
        self.output: str = ''
        self.result: Optional[int] = NO_RESULT

    def reset(self):
        """Forget the previous command. Called before each test."""
        self.output = ''
        self.result = NO_RESULT

    def debug(self, message: str):
        logger.debug(message)
        self.runner.debug_print(message)

    def run_command(self, command: str, fail_non_zero: bool = True):
        """
        Execute a shell command.

        Fails the test if the exit code is not 0. Pass
        ``fail_non_zero=False`` to check the exit code yourself.
        """
        try:
            command_result = self.runner.run_command(command)
        except CommandExecutionError:
            assertions.fail(f"{command} can't be executed")

        self.result = command_result['returncode']
        self.output = command_result['output']

        if self.result != 0 and fail_non_zero:
            assertions.fail(f"Result code was {self.result}.\n\n{self.output}")

        self.debug(strip_ansi(self.output))

    def see_in_output(self, text: str):
        """Checks that output from the last executed command contains text."""
        assertions.assert_contains(text, self.output)

    def dont_see_in_output(self, text: str):
        """Checks that output from the latest command doesn't contain text."""
        self.debug(self.output)
        assertions.assert_not_contains(text, self.output)

    def see_output_matches(self, regex: str):
        assertions.assert_matches(regex, self.output)

    def grab_output(self) -> str:
        """Returns the output of the latest command."""
        return self.output

    def see_exit_code_is(self, code: int):
        """
        Checks the exit code of the latest command.

        To verify a non-zero code, run the command with
        ``fail_non_zero=False``. Fails when no command has run yet.
        """
        assertions.assert_equals(code, self.result, f"result code is {code}")

    def see_exit_code_is_not(self, code: int):
        """Checks the exit code of the latest command is not code."""
        assertions.assert_not_equals(code, self.result, f"result code is {code}")

    def see_result_code_is(self, code: int):
        """Deprecated, use ``see_exit_code_is``."""
        self.see_exit_code_is(code)

    def see_result_code_is_not(self, code: int):
        """Deprecated, use ``see_exit_code_is_not``."""
        self.see_exit_code_is_not(code)
