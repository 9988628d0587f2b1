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

"""Salvaging the headers of an original message embedded in a bounce.

Bounces usually quote the message which could not be delivered, often
truncated and sometimes mangled.  Only a canonical subset of its header
fields is worth keeping: those which identify the message and its sender and
recipients.
"""

__all__ = [
    'HEADER_FIELDS',
    'HeaderWeeder',
    'LONG_FIELDS',
    'received',
    'weedout',
    ]


import re


# The header fields of the original message which are retained.
HEADER_FIELDS = frozenset((
    'apparently-to',
    'date',
    'delivered-to',
    'envelope-from',
    'envelope-to',
    'errors-to',
    'forward-path',
    'from',
    'list-id',
    'message-id',
    'posted-date',
    'reply-to',
    'resent-date',
    'resent-to',
    'return-path',
    'reverse-path',
    'subject',
    'to',
    'x-envelope-from',
    'x-envelope-to',
    'x-postfix-sender',
    ))

# Of those, the ones whose folded continuation lines are worth keeping.
LONG_FIELDS = frozenset((
    'from',
    'message-id',
    'subject',
    'to',
    ))

_FIELD_CRE = re.compile(r'\A(?P<name>[-0-9A-Za-z]+):')
_FROM_CRE = re.compile(r'\bfrom\s+(?P<host>[^\s()\[\];]+)', re.IGNORECASE)
_BY_CRE = re.compile(r'\bby\s+(?P<host>[^\s()\[\];]+)', re.IGNORECASE)



class HeaderWeeder:
    """Incrementally filter the header lines of an embedded message.

    Lines are fed one at a time.  A header field line is kept when its name is
    in the allowed set; a continuation line is kept only while the current
    field is one which allows folding, and only until the first blank line
    after it.
    """

    def __init__(self, fields=HEADER_FIELDS, long_fields=LONG_FIELDS):
        self._fields = fields
        self._long_fields = long_fields
        self._lines = []
        # The name of the field the previous line belonged to, if it was one
        # of the retained fields.
        self._current = None
        self._finished = set()

    @property
    def lines(self):
        """The retained lines, in order."""
        return list(self._lines)

    def feed(self, line):
        """Consider one line of the embedded message.

        :param line: The line, without its line ending.
        :type line: string
        """
        mo = _FIELD_CRE.match(line)
        if mo is not None:
            field_name = mo.group('name').lower()
            if field_name in self._fields:
                self._current = field_name
                self._lines.append(line)
            else:
                self._current = None
        elif line[:1] in (' ', '\t') and line.strip():
            if (self._current in self._long_fields and
                    self._current not in self._finished):
                self._lines.append(line)
        elif line.strip() == '':
            # The end of the header block, or of a header in it.
            if self._current in self._long_fields:
                self._finished.add(self._current)
        else:
            # Body text; it is not part of any header.
            self._current = None


def weedout(lines):
    """Return the canonical subset of the given header lines.

    :param lines: The lines of the embedded message.
    :type lines: sequence of strings
    :return: The retained lines.
    :rtype: list of strings
    """
    weeder = HeaderWeeder()
    for line in lines:
        weeder.feed(line)
    return weeder.lines


def received(value):
    """Return the `from` and `by` host names of a Received header.

    :param value: The value of a Received header.
    :type value: string
    :return: The sending and receiving host names; either may be the empty
        string.
    :rtype: 2-tuple of strings
    """
    hosts = []
    for cre in (_FROM_CRE, _BY_CRE):
        mo = cre.search(value or '')
        hosts.append('' if mo is None else mo.group('host').lower())
    return tuple(hosts)
