"""Package logger for geoutm"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geoutm')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNED_ONCE: set = set()


def warn_once(msg: str, *args) -> None:
    """
    Logs a warning only the first time a given message is seen. Arguments are
    interpolated the same way as logging.Logger.warning, and the interpolated
    message is what is remembered.
    """
    rendered = msg % args if args else msg
    if rendered in _WARNED_ONCE:
        return

    LOGGER.warning(rendered)
    _WARNED_ONCE.add(rendered)
