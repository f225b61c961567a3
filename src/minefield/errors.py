"""
Exceptions raised by the minefield engine.
"""


class InvalidConfiguration(ValueError):
    """Raised when a new game is requested with unusable parameters."""
