"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import logging
import click
from functools import wraps

from .config import configure_logging, load_config
from .errors import ParseError
from .exit_codes import (
    INTERRUPTED,
    get_exit_code_for_exception, CommandError, LogParseError
)
from .output import emit_error

logger = logging.getLogger(__name__)


def _fail(error: CommandError, type_name: str) -> None:
    context = {'exit_code': error.exit_code}
    if getattr(error, 'line', None) is not None:
        context['line'] = error.line
    emit_error(str(error), type=type_name, context=context)
    sys.exit(error.exit_code)


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Loads configuration and sets up logging (``--debug`` forces DEBUG)
    - Injects the loaded config as the ``config`` keyword argument
    - Reports errors as a JSON object on stderr with a matching exit code
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        debug = kwargs.pop('debug', False)
        try:
            config = load_config()
            configure_logging(config, debug=debug)
            kwargs['config'] = config
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            emit_error("Interrupted by user", type="KeyboardInterrupt")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except ParseError as e:
            logger.debug("Log parsing failed", exc_info=True)
            _fail(LogParseError(str(e), line=e.raw_line), type(e).__name__)
        except CommandError as e:
            _fail(e, type(e).__name__)
        except (OSError, UnicodeDecodeError) as e:
            code = get_exit_code_for_exception(e)
            emit_error(str(e), type=type(e).__name__, context={'exit_code': code})
            sys.exit(code)

    return wrapper


# Standard options that many commands share
common_options = {
    'pretty': click.option('--pretty', is_flag=True,
                           help='Render a table instead of JSONL'),
    'strict': click.option('--strict', is_flag=True,
                           help='Fail on blocks with more than one commit header'),
    'debug': click.option('--debug', is_flag=True,
                          help='Enable debug logging'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('pretty', 'debug')
        def my_command(pretty, debug):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator


def resolve_pretty(pretty: bool, config: dict) -> bool:
    """Use --pretty if given, otherwise the output.pretty setting."""
    return pretty or bool(config.get('output', {}).get('pretty', False))
