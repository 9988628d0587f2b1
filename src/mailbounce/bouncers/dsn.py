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

"""Standard RFC 3464 delivery status notifications.

This is the catch-all detector: any MTA which sends a proper
multipart/report, or at least a mailer-daemon message with a
message/delivery-status part, is understood here.
"""

__all__ = [
    'DSN',
    ]


import re

from mailbounce.bouncers.base import BounceDetector
from mailbounce.utilities.email import extract_address, split_email


DAEMONS = frozenset(('mailer-daemon', 'postmaster'))



class DSN(BounceDetector):
    """Parse RFC 3464 delivery status notifications."""

    name = 'dsn'
    description = 'Generic RFC 3464 delivery status notifications.'

    begin = re.compile(r'\AContent-Type:[ \t]*message/delivery-status',
                       re.IGNORECASE)
    rfc822 = re.compile(
        r'\AContent-Type:[ \t]*(?:message/rfc822|text/rfc822-headers)',
        re.IGNORECASE)

    def match(self, msg):
        """See `IFormatDetector`."""
        content_type = msg.get('content-type').lower()
        if content_type.startswith('multipart/report'):
            return True
        local_part, domain = split_email(extract_address(msg.get('from')))
        return local_part.lower() in DAEMONS
