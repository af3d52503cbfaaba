"""Error rendering utilities."""


def describe_error(error: Exception) -> str:
    """Return the default textual representation of an error.

    Args:
        error: Any exception raised across the entry point boundary

    Returns:
        The error's message, or its class name when the message is empty
    """
    message = str(error)
    if message:
        return message
    return type(error).__name__
