"""Exceptions raised by the Ralph loop driver."""


class RalphError(Exception):
    """Base class for driver errors."""


class ConfigError(RalphError, ValueError):
    """Raised when environment configuration is invalid."""


class PreflightError(RalphError):
    """Raised when a precondition for starting the loop is not met."""


class NotificationError(RalphError):
    """Raised by a notifier when a message could not be delivered."""
