"""Command line interface for native compiler invocation."""
