class TodoError(Exception):
    """Base class for errors raised by the to-do app."""


class ConfigError(TodoError):
    """Raised when a required setting is missing or invalid."""


class BackendError(TodoError):
    """
    The backend could not be reached, answered with a non-2xx status,
    or returned a body we could not understand.

    Args:
        message: Human readable description
        status_code: HTTP status, or None for transport and decode failures
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
