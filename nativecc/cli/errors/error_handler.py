import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libnativecc.compiler.errors import CompilerInvocationError
from libnativecc.exceptions import NativeCCError
from nativecc.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit internal errors."""
    try:
        yield
    except CompilerInvocationError as ie:
        if not debug_user_friendly_errors:
            raise  # re-throw exception due to unfriendly flag set for debugging
        cli_message("ERROR", repr(ie))
        # Propagate exit code from compiler process
        return sys.exit(ie.exit_code or 1)
    except NativeCCError as ne:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(ne))
        raise
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
