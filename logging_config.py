"""
Console logging for the particle field app.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def setup_logging(verbose=False):
    """
    Send every module logger to stdout.

    The modules are top-level (`sim`, `params`, `app`), so they all hang
    off the root logger; `verbose` switches it to DEBUG, which also shows
    rejected canvas sizes.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # main() can run more than once in a process (tests, REPL)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
