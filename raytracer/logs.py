"""Small coloured logging helpers writing to standard output."""

_RESET = "\x1b[0m"
_GREEN = "\x1b[32m"
_WHITE = "\x1b[37m"
_YELLOW = "\x1b[33m"
_RED = "\x1b[31m"


def _log(prefix: str, colour: str, message: str, args: tuple) -> None:
    print(f"{colour}[{prefix}]{_RESET}: {message.format(*args)}")


def debug(message: str, *args) -> None:
    """Log a debug message; ``message`` is a ``str.format`` template."""
    _log("DEBUG", _GREEN, message, args)


def info(message: str, *args) -> None:
    """Log an informational message."""
    _log("INFO", _WHITE, message, args)


def warning(message: str, *args) -> None:
    """Log a warning."""
    _log("WARN", _YELLOW, message, args)


def warn(message: str, *args) -> None:
    """Log a warning (alias of :func:`warning`)."""
    _log("WARN", _YELLOW, message, args)


def error(message: str, *args) -> None:
    """Log an error."""
    _log("ERROR", _RED, message, args)