"""Exception types raised by the identicon package."""


class IdenticonError(Exception):
    """Base class for identicon errors."""


class InvalidConfigError(IdenticonError, ValueError):
    """Canvas configuration rejected before rendering (non-positive sizes etc.)."""
