"""
logger
~~~~~~

Helpers to send our logging somewhere visible.  A thin wrapper around the
Python standard library :mod:`logging` module.

Every module logs under its `__name__`, so everything we log is below the
`region_tree` logger, and configuring that one logger is enough.  Calling
one of the functions here again replaces the handler added last time, so a
widget embedded in a larger application can be pointed at a new target
without duplicating output.
"""

import logging as _logging
import sys as _sys

NAME = "region_tree"


class _MarkedStreamHandler(_logging.StreamHandler):
    """A :class:`logging.StreamHandler` we can recognise later."""
    def __init__(self, stream):
        super().__init__(stream)
        self.region_tree_marker = True


class _MarkedFileHandler(_logging.FileHandler):
    """A :class:`logging.FileHandler` we can recognise later."""
    def __init__(self, filename):
        super().__init__(filename, mode="w", encoding="utf-8")
        self.region_tree_marker = True


def _replace_handler(logger, handler):
    for h in [ h for h in logger.handlers if hasattr(h, "region_tree_marker") ]:
        logger.removeHandler(h)
        h.close()
    logger.addHandler(handler)

def standard_formatter():
    """Our standard logging formatter"""
    return _logging.Formatter("{asctime} {levelname} {name} - {message}", style="{")

def _attach(handler, name, level):
    logger = _logging.getLogger(name)
    logger.setLevel(level)
    handler.setFormatter(standard_formatter())
    _replace_handler(logger, handler)
    return logger

def log_to_stdout(name=NAME, level=_logging.DEBUG):
    """Start logging to `stdout`.  In a Jupyter notebook, this will print
    logging to the notebook.

    :param name: The logger to configure.
    :param level: Messages below this level are dropped.
    """
    _attach(_MarkedStreamHandler(_sys.stdout), name, level)

def log_to_true_stdout(name=NAME, level=_logging.DEBUG):
    """Start logging to the "real" `stdout`, which under Jupyter is the
    console the server runs in, not the notebook.
    """
    _attach(_MarkedStreamHandler(_sys.__stdout__), name, level)

def log_to_file(filename, name=NAME, level=_logging.DEBUG):
    """Start logging to a file, which is overwritten."""
    _attach(_MarkedFileHandler(filename), name, level)
