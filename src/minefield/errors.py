"""
Error types raised by the minefield engine.

Only caller bugs raise. Legal actions that have no effect (revealing a
revealed cell, flagging during a finished game) are silently ignored.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class InvalidIndex(MinefieldError, IndexError):
    """A cell index was not an integer in ``[0, size * size)``."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board size, mine count or mine schedule cannot produce a fair game."""
