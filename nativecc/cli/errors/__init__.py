from .error_handler import cli_error_handler

__all__ = ["cli_error_handler"]
