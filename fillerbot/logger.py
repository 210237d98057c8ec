"""Debug switch and debug output for the bot."""

_debug = False


def set_debug(enabled):
    """Turn debug output on or off."""
    global _debug
    _debug = bool(enabled)


def is_debug():
    """Return whether debug output is on."""
    return _debug


def console_log(value):
    """Print the debug representation of ``value`` when debug output is on."""
    if _debug:
        print(repr(value))