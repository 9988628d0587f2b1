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

"""SendGrid bounces."""

__all__ = [
    'SendGrid',
    ]


import re

from mailbounce.bouncers.base import BounceDetector
from mailbounce.smtp import status


# ... User Unknown in RCPT TO
_COMMAND_CRE = re.compile(r'.+ in (?:End of )?(?P<command>[A-Z]{4})')
_REPLY_CODE_CRE = re.compile(r'\b(?P<class>[45])\d\d\b')
# SendGrid's own Arrival-Date format: 2012-12-31 23-59-59
_DATE_CRE = re.compile(
    r'\A(?P<date>\d{4}-\d\d-\d\d) (?P<h>\d\d)-(?P<m>\d\d)-(?P<s>\d\d)\Z')



class SendGrid(BounceDetector):
    """Parse bounces sent by SendGrid."""

    name = 'sendgrid'
    description = 'SendGrid bounces.'

    begin = re.compile(
        r'\AThis is an automatically generated message from SendGrid\.\Z')
    rfc822 = re.compile(r'\AContent-Type: message/rfc822')

    def match(self, msg):
        """See `IFormatDetector`."""
        return (msg.get('return-path') == '<apps@sendgrid.net>' and
                msg.get('subject') == 'Undelivered Mail Returned to Sender')

    def unrecognized_line(self, parser, line):
        mo = _COMMAND_CRE.match(line)
        if mo is not None:
            parser.set_connection('command', mo.group('command'))

    def refine(self, record, msg):
        """See `IFormatDetector`."""
        mo = _DATE_CRE.match(record.date)
        if mo is not None:
            record.date = '{0} {1}:{2}:{3}'.format(*mo.groups())
        if record.action == 'expired':
            record.reason = 'expired'
            if not record.status or status.is_placeholder(record.status):
                record.status = status.code('expired')
        if not record.status:
            # No status field at all; make do with the SMTP reply code.
            mo = _REPLY_CODE_CRE.search(record.diagnosis)
            if mo is not None:
                record.status = (status.find(record.diagnosis) or
                                 '{0}.0.0'.format(mo.group('class')))
        super().refine(record, msg)
