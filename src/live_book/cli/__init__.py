"""Command-line entry points for the live book."""
