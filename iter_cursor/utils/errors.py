# iter_cursor/utils/errors.py
class IterCursorError(RuntimeError):
    """
    Base class for every error this package raises on purpose.
    """


class InvalidArgumentError(IterCursorError, ValueError):
    """
    Raised when a combinator is registered with a malformed argument
    (non-callable fn, negative or non-integer count).
    Raised at registration time, the pipeline is left unchanged.
    """


class ConfigError(IterCursorError):
    """
    Raised when a config file is missing or fails validation.
    """
