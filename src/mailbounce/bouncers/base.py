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

"""The body parser shared by every bounce detector.

A bounce body is walked line by line through a small state machine:

    preamble -> delivery_status -> original_message -> done

Nothing before the detector's `begin` marker matters.  Between the `begin`
and the `rfc822` markers, lines describe the delivery to one or more
recipients; by default they are read as RFC 3464 `Field: value` lines.  After
the `rfc822` marker come the headers of the original message, of which only a
canonical subset is kept, and the second blank line there ends the parse.
"""

__all__ = [
    'BodyParser',
    'BounceDetector',
    ]


import logging
import re

from zope.interface import implementer

from mailbounce.email.rfc5322 import HeaderWeeder
from mailbounce.interfaces.bounce import IFormatDetector, ParseState
from mailbounce.model.bounce import DeliveryStatus


log = logging.getLogger('mailbounce.bounce')

SPACE = ' '

# state -> (marker name, next state).  The `done` transition is not driven by
# a marker; see `_original_message()`.
TRANSITIONS = {
    ParseState.preamble: ('begin', ParseState.delivery_status),
    ParseState.delivery_status: ('rfc822', ParseState.original_message),
    }

# Field: value
_FIELD_CRE = re.compile(
    r'\A(?P<name>[A-Za-z][-A-Za-z0-9]*)[ \t]*:[ \t]*(?P<value>.*?)[ \t]*\Z')
# rfc822; user@example.com  (the address type is optional in the wild)
_TYPED_CRE = re.compile(
    r'\A(?:(?P<type>[^;\s]+)[ \t]*;)?[ \t]*(?P<value>.*)\Z')
_STATUS_CRE = re.compile(r'\A(?P<status>[45]\.\d{1,3}\.\d{1,3})')


def _compile(pattern):
    if pattern is None or hasattr(pattern, 'search'):
        return pattern
    return re.compile(pattern)


def _typed_value(value):
    """Split `type; value` into its parts; the type may be missing."""
    mo = _TYPED_CRE.match(value)
    return (mo.group('type') or ''), mo.group('value').strip()


def _first_token(value):
    tokens = value.split()
    if len(tokens) == 0:
        return ''
    return tokens[0].strip('<>')



class BodyParser:
    """Turn the lines of a bounce body into delivery status records.

    A parser is built for one message and thrown away afterwards.  The
    detector supplies the markers and, optionally, its own line grammar:

    * `on_line(parser, line)` replaces the RFC 3464 field vocabulary for the
      lines of the delivery status part;
    * `on_unrecognized(parser, line)` is offered the lines which the field
      vocabulary does not know about.

    Grammars record their findings through `add_recipient()`, `current`,
    `set_connection()` and, for scratch values, `notes`.
    """

    # Field names whose value may continue on indented lines.
    continued_fields = frozenset(('diagnostic-code',))

    def __init__(self, begin, rfc822, on_line=None, on_unrecognized=None,
                 weeder=None):
        self._markers = dict(begin=_compile(begin), rfc822=_compile(rfc822))
        self._on_line = on_line
        self._on_unrecognized = on_unrecognized
        self._weeder = (HeaderWeeder() if weeder is None else weeder)
        self.state = ParseState.preamble
        self.records = [DeliveryStatus()]
        self.notes = {}
        self._connection = {}
        self._recipients = 0
        self._blank_lines = 0
        # The name of the last field recognized in the delivery status part;
        # indented lines continue it.
        self._field = None

    @property
    def current(self):
        """The record currently being filled in."""
        return self.records[-1]

    @property
    def recipients(self):
        """The number of recipients seen so far."""
        return self._recipients

    def add_recipient(self, address):
        """Start the record for a new recipient.

        If the current record already has a recipient, it is closed and a
        sibling record is opened; nothing but the message-wide connection
        values (applied at the end) is shared between the two.

        :param address: The recipient address.
        :type address: string
        :return: The record for the recipient.
        :rtype: `DeliveryStatus`
        """
        if self.current.recipient:
            self.records.append(DeliveryStatus())
        self.current.recipient = address
        self._recipients += 1
        return self.current

    def set_connection(self, name, value):
        """Record a message-wide value; the first one seen wins.

        :param name: The record field the value applies to.
        :type name: string
        :param value: The value.
        :type value: string
        """
        if value and not self._connection.get(name):
            self._connection[name] = value

    def parse(self, lines):
        """Parse the body.

        :param lines: The body lines, without line endings.
        :type lines: iterable of strings
        :return: The records (an empty list when no recipient was found) and
            the retained header lines of the original message.
        :rtype: 2-tuple of (list of `DeliveryStatus`, list of strings)
        """
        for line in lines:
            if self.state is ParseState.done:
                break
            transition = TRANSITIONS.get(self.state)
            if transition is not None:
                marker, next_state = transition
                cre = self._markers[marker]
                if cre is not None and cre.search(line):
                    self.state = next_state
                    self._field = None
                    continue
            if self.state is ParseState.delivery_status:
                self._delivery_status(line)
            elif self.state is ParseState.original_message:
                self._original_message(line)
        return self._finalize(), self._weeder.lines

    def _delivery_status(self, line):
        if len(line.strip()) == 0:
            self._field = None
            return
        if line[:1] in (' ', '\t') and self._field in self.continued_fields:
            # A continuation of the previous field's value.
            record = self.current
            record.diagnosis = SPACE.join(
                part for part in (record.diagnosis, line.strip()) if part)
            return
        self._field = None
        if self._on_line is None:
            self.field_line(line)
        else:
            self._on_line(self, line)

    def field_line(self, line):
        """Read one line of an RFC 3464 delivery status part."""
        mo = _FIELD_CRE.match(line)
        if mo is None:
            self.unrecognized(line)
            return
        name = mo.group('name').lower()
        value = mo.group('value')
        record = self.current
        if name == 'final-recipient':
            address_type, address = _typed_value(value)
            address = _first_token(address)
            if not address:
                return
            self.add_recipient(address)
        elif name in ('original-recipient', 'x-actual-recipient'):
            address_type, address = _typed_value(value)
            record.alias = _first_token(address)
        elif name == 'action':
            record.action = value.lower()
        elif name == 'status':
            status = _STATUS_CRE.match(value)
            if status is None:
                return
            record.status = status.group('status')
        elif name == 'remote-mta':
            mta_type, host = _typed_value(value)
            record.rhost = host.lower()
        elif name in ('reporting-mta', 'received-from-mta'):
            mta_type, host = _typed_value(value)
            self.set_connection('lhost', host.lower())
        elif name == 'arrival-date':
            self.set_connection('date', value)
        elif name == 'last-attempt-date':
            record.date = value
        elif name == 'diagnostic-code':
            spec, text = _typed_value(value)
            record.spec = spec.upper()
            record.diagnosis = text
        else:
            self.unrecognized(line)
            return
        self._field = name

    def unrecognized(self, line):
        """Offer a line the field vocabulary does not know to the grammar."""
        if self._on_unrecognized is not None:
            self._on_unrecognized(self, line)

    def _original_message(self, line):
        if len(line.strip()) == 0:
            self._blank_lines += 1
            if self._blank_lines > 1:
                self.state = ParseState.done
                return
        self._weeder.feed(line)

    def _finalize(self):
        if self._recipients == 0:
            return []
        for record in self.records:
            for name, value in self._connection.items():
                if not getattr(record, name):
                    setattr(record, name, value)
        return self.records



@implementer(IFormatDetector)
class BounceDetector:
    """Base class for detectors whose bodies fit the common state machine.

    Subclasses set `name`, `description`, the `begin` and `rfc822` marker
    patterns, and implement `match()`.  Detectors with their own line grammar
    override `delivery_status_line()`; those which only need to pick up a few
    extra lines override `unrecognized_line()`.
    """

    name = None
    description = None
    begin = None
    rfc822 = None
    # Ordered (reason, compiled pattern) pairs for the provider's own error
    # messages.  The first one matching the diagnosis sets the reason.
    failures = ()

    def match(self, msg):
        """See `IFormatDetector`."""
        raise NotImplementedError

    def make_parser(self, msg):
        """Build the body parser for one message."""
        on_line = None
        if type(self).delivery_status_line is not (
                BounceDetector.delivery_status_line):
            on_line = self.delivery_status_line
        return BodyParser(self.begin, self.rfc822,
                          on_line=on_line,
                          on_unrecognized=self.unrecognized_line)

    def scan(self, msg):
        """See `IFormatDetector`."""
        parser = self.make_parser(msg)
        records, original = parser.parse(msg.body_lines)
        log.debug('%s: %d record(s), %d original header line(s)',
                  self.name, len(records), len(original))
        return records, original

    def delivery_status_line(self, parser, line):
        """Read one line of the delivery status part."""
        parser.field_line(line)

    def unrecognized_line(self, parser, line):
        """A line of the delivery status part nobody recognized."""

    def refine(self, record, msg):
        """See `IFormatDetector`."""
        if record.reason:
            return
        for reason, cre in self.failures:
            if cre.search(record.diagnosis):
                record.reason = reason
                break
