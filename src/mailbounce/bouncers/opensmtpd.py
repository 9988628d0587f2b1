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

"""OpenSMTPD bounces."""

__all__ = [
    'OpenSMTPD',
    ]


import re

from mailbounce.bouncers.base import BounceDetector


# user@example.com: 550 5.1.1 Unknown user
_RECIPIENT_CRE = re.compile(r'\A(?P<address>[^ ]+?@[^ ]+?):?[ ](?P<text>.+)\Z')



class OpenSMTPD(BounceDetector):
    """Parse bounces sent by OpenSMTPD."""

    name = 'opensmtpd'
    description = 'OpenSMTPD bounces.'

    begin = re.compile(r'\A[ \t]*This is the MAILER-DAEMON, please DO NOT '
                       r'REPLY to this e-?mail\.\Z')
    rfc822 = re.compile(r'\A[ \t]*Below is a copy of the original message:\Z')
    failures = (
        ('expired', re.compile(r'Envelope expired')),
        ('hostunknown', re.compile(
            r'Invalid domain name|Domain does not exist')),
        ('notaccept', re.compile(r'Destination seem to reject all mails')),
        ('networkerror', re.compile(
            r'Address family mismatch on destination MXs|'
            r'All routes to destination blocked|'
            r'bad DNS lookup error code|'
            r'Could not retrieve source address|'
            r'Loop detected|'
            r'Network error on destination MXs|'
            r'No MX found for (?:domain|destination)|'
            r'No valid route to (?:remote MX|destination)|'
            r'Temporary failure in MX lookup')),
        ('securityerror', re.compile(r'Could not retrieve credentials')),
        )

    def match(self, msg):
        """See `IFormatDetector`."""
        if not msg.get('subject').startswith('Delivery status notification'):
            return False
        if re.match(r'Mailer Daemon <[^ ]+@', msg.get('from')) is None:
            return False
        return any(' (OpenSMTPD) with ' in value
                   for value in msg.get_all('received'))

    def delivery_status_line(self, parser, line):
        mo = _RECIPIENT_CRE.match(line.strip())
        if mo is None:
            return
        record = parser.add_recipient(mo.group('address'))
        record.diagnosis = mo.group('text')
