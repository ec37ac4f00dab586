"""Bundled story configurations."""

from live_book.stories.aurora_in_motion import AURORA_IN_MOTION, default_book_config

__all__ = ["AURORA_IN_MOTION", "default_book_config"]
