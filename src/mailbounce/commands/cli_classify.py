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

"""Classify bounce messages from the command line."""

__all__ = [
    'Classify',
    ]


import logging
import sys

from zope.interface import implementer

from mailbounce.app.classifier import BounceClassifier
from mailbounce.app.registry import DetectorRegistry
from mailbounce.config import config
from mailbounce.core.errors import InvalidInputError
from mailbounce.email.message import RawMessage
from mailbounce.interfaces.bounce import NotMatched
from mailbounce.interfaces.command import ICLISubCommand


elog = logging.getLogger('mailbounce.error')



@implementer(ICLISubCommand)
class Classify:
    """Classify bounce messages."""

    name = 'classify'

    def add(self, parser, command_parser):
        """See `ICLISubCommand`."""
        self.parser = parser
        command_parser.add_argument(
            '-a', '--all',
            default=False, action='store_true',
            help="""\
            Show the results of every detector which understands the message,
            instead of only the first one.""")
        command_parser.add_argument(
            '-d', '--detector',
            action='store', help="""\
            Only try the named detector.""")
        command_parser.add_argument(
            '-o', '--original',
            default=False, action='store_true',
            help="""\
            Also print the salvaged headers of the original message.""")
        command_parser.add_argument(
            'files', metavar='FILE', nargs='+',
            help="""\
            The bounce messages to classify.  Use - to read a message from
            standard input.""")

    def process(self, args):
        """See `ICLISubCommand`."""
        classifier = BounceClassifier.from_config(config)
        if args.detector is not None:
            detector = classifier.registry.get(args.detector)
            if detector is None:
                self.parser.error(
                    'No such detector: {0}'.format(args.detector))
            classifier.registry = DetectorRegistry([detector])
        for filename in args.files:
            try:
                msg = self._read(filename)
            except OSError as error:
                self._fail(filename, error)
                continue
            try:
                if args.all:
                    results = classifier.classify_all(msg)
                else:
                    result = classifier.classify(msg)
                    results = ([] if result is NotMatched else [result])
            except InvalidInputError as error:
                self._fail(filename, error)
                continue
            if len(results) == 0:
                print('{0}: no detector matched'.format(filename))
                continue
            for result in results:
                self._show(filename, result, args.original)

    def _read(self, filename):
        if filename == '-':
            return RawMessage.from_file(sys.stdin)
        with open(filename, errors='replace') as fp:
            return RawMessage.from_file(fp)

    def _fail(self, filename, error):
        elog.error('%s: %s', filename, error)
        print('{0}: {1}'.format(filename, error), file=sys.stderr)

    def _show(self, filename, result, original):
        print('{0}: {1}'.format(filename, result.detector))
        for record in result.records:
            fields = [(name, value)
                      for name, value in record.as_dict().items()
                      if value]
            longest = max(len(name) for name, value in fields)
            for index, (name, value) in enumerate(fields):
                print('{0} {1:{3}} {2}'.format(
                    ('-' if index == 0 else ' '), name + ':', value,
                    longest + 1))
        if original and result.original:
            print('  original:')
            for line in result.original.splitlines():
                print('    ' + line)
