"""
Configuration module for the cli plugin.
"""

import os

# Variables removed from the child environment before every run.
# Symfony's Application::configureIO exports SHELL_VERBOSITY, which changes
# the output of nested console commands.
CLEARED_ENV_VARS = ("SHELL_VERBOSITY",)

DEFAULT_LOGGER_NAME = "cli_module"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Environment variable checks
def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variables."""
    return os.environ.get('TEST_DEBUG', '').lower() in ['true', '1', 'yes']

def get_log_file() -> str:
    """Get log file path from environment variables."""
    return os.environ.get('TEST_LOG_FILE')

def child_environment() -> dict:
    """Copy of the current environment without the cleared variables."""
    env = dict(os.environ)
    for name in CLEARED_ENV_VARS:
        env.pop(name, None)
    return env
