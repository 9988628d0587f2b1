# Copyright (C) 2012-2026 by the mailbounce developers.
#
# This file is part of mailbounce.
#
# mailbounce is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option)
# any later version.
#
# mailbounce is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for
# more details.
#
# You should have received a copy of the GNU General Public License along with
# mailbounce.  If not, see <http://www.gnu.org/licenses/>.

"""Logging initialization, using Python's standard logging package."""

__all__ = [
    'get_handler',
    'initialize',
    'reopen',
    ]


import os
import sys
import logging

from lazr.config import as_boolean, as_log_level

from mailbounce.config import config


_handlers = {}



class ReopenableFileHandler(logging.Handler):
    """A file handler that supports reopening."""

    def __init__(self, name, filename):
        logging.Handler.__init__(self)
        self.name = name
        self.filename = filename
        self._stream = self._open()

    def _open(self):
        directory = os.path.dirname(self.filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        return open(self.filename, 'a', encoding='utf-8')

    def flush(self):
        if self._stream:
            self._stream.flush()

    def emit(self, record):
        # The stream may already have been closed at shut down.
        stream = (self._stream if self._stream else sys.stderr)
        try:
            msg = self.format(record)
            stream.write(msg)
            if msg[-1:] != '\n':
                stream.write('\n')
            self.flush()
        except Exception:
            self.handleError(record)

    def close(self):
        self.flush()
        if self._stream:
            self._stream.close()
        self._stream = None
        logging.Handler.close(self)

    def reopen(self, filename=None):
        """Reopen the output stream.

        :param filename: If given, this reopens the output stream to a new
            file.  This is used in the test suite.
        :type filename: string
        """
        if filename is not None:
            self.filename = filename
        if self._stream:
            self._stream.close()
        self._stream = self._open()



def initialize(propagate=None):
    """Initialize all logs.

    :param propagate: Flag specifying whether logs should propagate their
        messages to the root logger.  If omitted, propagation is determined
        from the configuration files.
    :type propagate: bool or None
    """
    # Initialize the root logger, which logs to stderr, then create a
    # formatter and handler for each of the sublogs.
    logging.basicConfig(format=config.logging.root.format,
                        datefmt=config.logging.root.datefmt,
                        level=as_log_level(config.logging.root.level),
                        stream=sys.stderr)
    for logger_config in config.logger_configs:
        sub_name = logger_config.name.split('.')[-1]
        if sub_name == 'root':
            continue
        log = logging.getLogger('mailbounce.' + sub_name)
        log.propagate = (as_boolean(logger_config.propagate)
                         if propagate is None else propagate)
        log.setLevel(as_log_level(logger_config.level))
        formatter = logging.Formatter(fmt=logger_config.format,
                                      datefmt=logger_config.datefmt)
        path_str = logger_config.path
        if path_str:
            path_abs = os.path.normpath(
                os.path.join(config.LOG_DIR, path_str))
            handler = ReopenableFileHandler(sub_name, path_abs)
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.name = sub_name
        # Initializing twice must not double up the output.
        old_handler = _handlers.pop(sub_name, None)
        if old_handler is not None:
            log.removeHandler(old_handler)
            old_handler.close()
        _handlers[sub_name] = handler
        handler.setFormatter(formatter)
        log.addHandler(handler)


def reopen():
    """Re-open all log files."""
    for handler in _handlers.values():
        if isinstance(handler, ReopenableFileHandler):
            handler.reopen()


def get_handler(sub_name):
    """Return the handler associated with a named logger.

    :param sub_name: The logger name, sans the 'mailbounce.' prefix.
    :type sub_name: string
    :return: The handler associated with the named logger.
    :rtype: `logging.Handler`
    """
    return _handlers[sub_name]
