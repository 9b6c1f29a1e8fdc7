from __future__ import annotations

import sys

from nativecc.cli.arguments import parse_cli_arguments
from nativecc.cli.compile import cli_perform_compile
from nativecc.cli.errors import cli_error_handler


def cli_entry_point() -> None:
    """CLI main entry."""
    args = parse_cli_arguments()
    wrapper = cli_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap compilation into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        sys.exit(cli_perform_compile(args))


if __name__ == "__main__":
    cli_entry_point()
