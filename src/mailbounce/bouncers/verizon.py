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

"""Verizon Wireless bounces.

Two unrelated gateways answer for Verizon: the vtext.com SMS gateway, which
quotes the SMTP transaction, and the vzwpix.com MMS gateway, which sends a
short English notice.  Neither quotes the original message headers in full,
so the sender and subject they mention are added to the salvaged block.
"""

__all__ = [
    'Verizon',
    ]


import re

from mailbounce.bouncers.base import BodyParser, BounceDetector
from mailbounce.smtp import status
from mailbounce.utilities.email import extract_address


_VTEXT_FROM_CRE = re.compile(r'\Apost_master@vtext\.com\Z')
_VZWPIX_FROM_CRE = re.compile(r'<?sysadmin@.+\.vzwpix\.com>?\Z')
_RECEIVED_CRE = re.compile(r'by .+\.vtext\.com ')
_BOUNDARY_CRE = re.compile(r'boundary="?(?P<boundary>[^";]+)"?',
                           re.IGNORECASE)

# The vtext.com grammar.
_RCPT_TO_CRE = re.compile(r'\A[ \t]+RCPT TO: (?P<value>.*)\Z')
_MAIL_FROM_CRE = re.compile(r'\A[ \t]+MAIL FROM:[ \t](?P<value>.+)\Z')
_VTEXT_SUBJECT_CRE = re.compile(r'\A[ \t]+Subject:[ \t](?P<value>.+)\Z')
_REPLY_CRE = re.compile(r'\A\d{3}[ \t]-[ \t].*\Z')

# The vzwpix.com grammar.
_TO_CRE = re.compile(r'\ATo:[ \t]+(?P<value>.*)\Z')
_FROM_CRE = re.compile(r'\AFrom:[ \t](?P<value>.+)\Z')
_SUBJECT_CRE = re.compile(r'\ASubject:[ \t](?P<value>.+)\Z')
_ERROR_CRE = re.compile(r'\AError:[ \t]+(?P<value>.+)\Z')

VTEXT_FAILURES = (
    ('userunknown', re.compile(
        r'550 - Requested action not taken: no such user here')),
    )
VZWPIX_FAILURES = (
    ('userunknown', re.compile(r'No valid recipients for this MM')),
    )



class Verizon(BounceDetector):
    """Parse bounces from the Verizon Wireless SMS and MMS gateways."""

    name = 'verizon'
    description = 'Verizon Wireless vtext.com and vzwpix.com bounces.'

    failures = VTEXT_FAILURES + VZWPIX_FAILURES

    def match(self, msg):
        """See `IFormatDetector`."""
        if not any(_RECEIVED_CRE.search(value)
                   for value in msg.get_all('received')):
            return False
        return self._grammar(msg) is not None

    def _grammar(self, msg):
        sender = msg.get('from')
        if _VTEXT_FROM_CRE.match(sender):
            return 'vtext'
        if (_VZWPIX_FROM_CRE.search(sender) and
                'Undeliverable Message' in msg.get('subject')):
            return 'vzwpix'
        return None

    def make_parser(self, msg):
        """Build the body parser for one message."""
        # Both gateways end the notice with the closing MIME boundary.
        mo = _BOUNDARY_CRE.search(msg.get('content-type'))
        boundary = ('__BOUNDARY_STRING_HERE__' if mo is None
                    else mo.group('boundary'))
        rfc822 = re.compile(r'\A--' + re.escape(boundary) + r'--\Z')
        if self._grammar(msg) == 'vtext':
            return BodyParser(re.compile(r'\AError:[ \t]'), rfc822,
                              on_line=self._vtext_line)
        return BodyParser(
            re.compile(r'\AMessage could not be delivered to mobile'),
            rfc822, on_line=self._vzwpix_line)

    def _vtext_line(self, parser, line):
        mo = _RCPT_TO_CRE.match(line)
        if mo is not None:
            parser.add_recipient(extract_address(mo.group('value')) or
                                 mo.group('value'))
            return
        mo = _MAIL_FROM_CRE.match(line)
        if mo is not None:
            parser.notes.setdefault('from', mo.group('value'))
            return
        mo = _VTEXT_SUBJECT_CRE.match(line)
        if mo is not None:
            parser.notes.setdefault('subject', mo.group('value'))
            return
        if _REPLY_CRE.match(line):
            parser.current.diagnosis = line

    def _vzwpix_line(self, parser, line):
        mo = _TO_CRE.match(line)
        if mo is not None:
            address = extract_address(mo.group('value'))
            if address:
                parser.add_recipient(address)
            return
        mo = _FROM_CRE.match(line)
        if mo is not None:
            parser.notes.setdefault('from', mo.group('value'))
            return
        mo = _SUBJECT_CRE.match(line)
        if mo is not None:
            parser.notes.setdefault('subject', mo.group('value'))
            return
        mo = _ERROR_CRE.match(line)
        if mo is not None:
            parser.current.diagnosis = line

    def scan(self, msg):
        """See `IFormatDetector`."""
        parser = self.make_parser(msg)
        records, original = parser.parse(msg.body_lines)
        if len(records) == 0:
            return records, original
        present = set(line.split(':', 1)[0].lower() for line in original)
        for name in ('from', 'subject'):
            value = parser.notes.get(name)
            if value and name not in present:
                original.append('{0}: {1}'.format(name.capitalize(), value))
        return records, original

    def refine(self, record, msg):
        """See `IFormatDetector`."""
        record.spec = 'SMTP'
        record.status = status.find(record.diagnosis)
        if record.status[:1] in ('4', '5'):
            record.action = 'failed'
        super().refine(record, msg)
