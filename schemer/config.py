from __future__ import annotations
import logging
import os

from schemer.debug_utils.pprint import DEFAULT_OPTIONS, load_options_from_json

_DEFAULT_LOG_LEVEL = logging.WARNING
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Resolve SCHEMER_LOGLEVEL (a level name such as DEBUG) to a logging level."""
    raw = os.environ.get('SCHEMER_LOGLEVEL')
    if not raw:
        return _DEFAULT_LOG_LEVEL
    level = getattr(logging, raw.strip().upper(), None)
    if isinstance(level, int):
        return level
    return _DEFAULT_LOG_LEVEL


def get_pprint_options() -> dict:
    """Printer options from the SCHEMER_PPRINT JSON object, over the defaults."""
    raw = os.environ.get('SCHEMER_PPRINT')
    if not raw:
        return dict(DEFAULT_OPTIONS)
    return load_options_from_json(raw)


def configure_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=_LOG_FORMAT)
