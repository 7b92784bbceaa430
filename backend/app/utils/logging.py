import logging
import sys

from app.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Named logger writing to stdout with a bracketed prefix, e.g. "[CHECKOUT] ...".
    Handlers are attached once per name so repeated imports don't duplicate lines.
    """
    log = logging.getLogger(name)
    log.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(f"[{name.upper()}] %(levelname)s %(message)s"))
        log.addHandler(h)
        log.propagate = False
    return log
