"""
Standard exit codes for gitminer commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors
USAGE_ERROR = 2          # Misuse of shell command (wrong arguments, etc.)

# Application-specific exit codes (64-113 are typically available)
GIT_ERROR = 65           # git invocation failed
CONFIG_ERROR = 66        # Configuration file error
PERMISSION_ERROR = 67    # Insufficient permissions
DATA_ERROR = 70          # Log format or validation error
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'PermissionError': PERMISSION_ERROR,
    'UnicodeDecodeError': DATA_ERROR,
    'ValueError': DATA_ERROR,
    'ParseError': DATA_ERROR,
    'MalformedHeader': DATA_ERROR,
    'InvalidTimestamp': DATA_ERROR,
    'MalformedChange': DATA_ERROR,
    'AmbiguousBlock': DATA_ERROR,
    'ConfigError': CONFIG_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    exc_name = exc.__class__.__name__
    return EXCEPTION_EXIT_CODES.get(exc_name, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class LogParseError(CommandError):
    """Raised when a log file cannot be parsed."""
    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message, DATA_ERROR)
        self.line = line


class GitCommandError(CommandError):
    """Raised when git fails to produce a log."""
    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message, GIT_ERROR)
        self.returncode = returncode


class ConfigError(CommandError):
    """Raised when there's a configuration error."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)
