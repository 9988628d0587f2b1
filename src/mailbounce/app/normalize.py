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

"""Normalization of the raw delivery status records."""

__all__ = [
    'normalize',
    ]


import re

from mailbounce.email.rfc5322 import received
from mailbounce.smtp import status
from mailbounce.utilities.string import sweep


# A status code quoted in the diagnosis: 'D.S.S ...' or "D.S.S ..."
_QUOTED_STATUS_CRE = re.compile(r'["\'](\d\.\d\.\d.+)[\'"]')



def _received_hosts(msg):
    """Return the local and the remote host from the Received headers.

    The newest header (the first one) was added by the host which sent the
    bounce; the oldest one names the host the message first came from.
    """
    values = msg.get_all('received')
    if len(values) == 0:
        return '', ''
    newest_from, newest_by = received(values[0])
    oldest_from, oldest_by = received(values[-1])
    return newest_by, (oldest_from or oldest_by)


def normalize(record, detector, msg):
    """Normalize one record in place.

    :param record: The record, as parsed by the detector.
    :type record: `DeliveryStatus`
    :param detector: The detector which parsed it.
    :type detector: `IFormatDetector`
    :param msg: The bounce message.
    :type msg: `RawMessage`
    """
    if not record.lhost or not record.rhost:
        lhost, rhost = _received_hosts(msg)
        record.lhost = record.lhost or lhost
        record.rhost = record.rhost or rhost
    # Some providers escape the line breaks of multi-line replies.
    record.diagnosis = sweep(record.diagnosis.replace('\\n', ' '))
    if status.is_placeholder(record.status):
        # The real code is often buried in the text.
        mo = _QUOTED_STATUS_CRE.search(record.diagnosis)
        recovered = status.find(mo.group(1)) if mo else ''
        recovered = recovered or status.find(record.diagnosis)
        if recovered and not status.is_placeholder(recovered):
            record.status = recovered
    if not record.status:
        record.status = status.find(record.diagnosis)
    record.action = record.action.lower()
    if not record.action and record.status:
        record.action = ('failed' if record.status.startswith('5')
                         else 'delayed')
    record.command = record.command.upper()
    detector.refine(record, msg)
