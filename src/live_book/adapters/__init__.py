"""Runtime adapters: logging setup and randomness."""

from live_book.adapters.observability import configure_runtime_logging
from live_book.adapters.random_picker import RandomPicker

__all__ = ["RandomPicker", "configure_runtime_logging"]
