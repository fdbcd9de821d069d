# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class MergePatchError(ValueError):
    """Base class for all errors raised by mergepatch."""


class PatchFormatError(MergePatchError):
    """A tree value handed to the core is not well formed."""


class ConversionError(MergePatchError):
    """A record could not be converted to or from a tree value."""


class PatchParseError(MergePatchError):
    """Patch input is not a well formed JSON document."""


def init_logging(level=logging.INFO):
    """Sets up logging for mergepatch entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all mergepatch loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_mergepatch_log_level(level, set_main=True):
    """Set a log level for mergepatch loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('mergepatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
