# src/monkey/config.py
"""Runtime configuration for the Monkey core.

Only logging verbosity lives here; the language semantics are fixed.
The initial level comes from the ``MONKEY_DEBUG`` environment variable
(``none``, ``error`` or ``debug``; ``1``/``true`` mean ``debug``).
"""
import os

LEVELS = ("none", "error", "debug")

_TRUTHY = {"1", "true", "yes", "on"}


def _level_from_env(raw):
    if raw is None:
        return "none"
    raw = raw.strip().lower()
    if raw in LEVELS:
        return raw
    if raw in _TRUTHY:
        return "debug"
    return "none"


class Config:
    def __init__(self, debug_level=None):
        if debug_level is None:
            debug_level = _level_from_env(os.environ.get("MONKEY_DEBUG"))
        self.set_level(debug_level)

    def set_level(self, level):
        if level not in LEVELS:
            raise ValueError(f"invalid debug level {level!r}; expected one of {', '.join(LEVELS)}")
        self.debug_level = level

    def enable_debug(self):
        self.set_level("debug")

    def disable_debug(self):
        self.set_level("none")

    def should_log(self, level="debug"):
        """True when a message at ``level`` passes the configured threshold."""
        if level not in LEVELS or level == "none":
            return False
        return LEVELS.index(self.debug_level) >= LEVELS.index(level)

    def __repr__(self):
        return f"Config(debug_level={self.debug_level!r})"


config = Config()
