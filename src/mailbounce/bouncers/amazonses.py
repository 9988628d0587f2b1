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

"""Amazon SES bounces.

SES sends bounces in two shapes.  Mail sent through SMTP comes back as a
text/DSN hybrid; accounts with SNS notifications get a JSON document, which
is decoded when the text grammar finds nobody.
"""

__all__ = [
    'AmazonSES',
    ]


import json
import logging
import re

from mailbounce.bouncers.base import BounceDetector
from mailbounce.model.bounce import DeliveryStatus


log = logging.getLogger('mailbounce.bounce')

# bounceSubType -> reason.  Sub types not listed here are left to the reason
# engine.
SUBTYPES = {
    'AttachmentRejected': 'securityerror',
    'ContentRejected': 'contenterror',
    'MailboxFull': 'mailboxfull',
    'MessageTooLarge': 'mesgtoobig',
    'NoEmail': 'userunknown',
    }

_TYPED_CRE = re.compile(
    r'\A(?:(?P<type>[^;\s]+)[ \t]*;)?[ \t]*(?P<value>.*)\Z', re.DOTALL)


def _typed(value):
    if not isinstance(value, str):
        value = ''
    mo = _TYPED_CRE.match(value)
    return (mo.group('type') or '').upper(), mo.group('value').strip()


def _text(mapping, key):
    value = mapping.get(key)
    return (value if isinstance(value, str) else '')


def _entries(mapping, key):
    """The dictionaries listed under key; anything else is skipped."""
    entries = mapping.get(key)
    if not isinstance(entries, list):
        return []
    return [entry for entry in entries if isinstance(entry, dict)]


def _load_notification(body):
    """Return the notification dictionary embedded in a body, or None."""
    start = body.find('{')
    end = body.rfind('}')
    if start < 0 or end < start:
        return None
    try:
        document = json.loads(body[start:end + 1])
    except ValueError as error:
        log.debug('Undecodable SES notification: %s', error)
        return None
    if not isinstance(document, dict):
        return None
    # Notifications delivered through SNS wrap the real one as a string.
    if 'notificationType' not in document and isinstance(
            document.get('Message'), str):
        try:
            document = json.loads(document['Message'])
        except ValueError as error:
            log.debug('Undecodable SNS message: %s', error)
            return None
    if not isinstance(document, dict) or 'notificationType' not in document:
        return None
    return document



class AmazonSES(BounceDetector):
    """Parse bounces sent by Amazon Simple Email Service."""

    name = 'amazonses'
    description = 'Amazon SES bounces and JSON notifications.'

    begin = re.compile(r'\A(?:The following message to <|'
                       r'An error occurred while trying to deliver the mail )')
    rfc822 = re.compile(r'\Acontent-type:[ \t]*message/rfc822\Z',
                        re.IGNORECASE)
    failures = (
        ('expired', re.compile(r'Delivery expired')),
        )

    def match(self, msg):
        """See `IFormatDetector`."""
        if 'Amazon WorkMail' in msg.get('x-mailer'):
            return False
        return 'x-aws-outgoing' in msg or 'x-ses-outgoing' in msg

    def scan(self, msg):
        """See `IFormatDetector`."""
        records, original = super().scan(msg)
        if len(records) == 0 and 'notificationType' in msg.body:
            records = self.decode(msg.body)
            log.debug('%s: %d record(s) from the JSON notification',
                      self.name, len(records))
        return records, original

    def decode(self, body):
        """Build records from a JSON notification.

        :param body: The text holding the JSON document.
        :type body: string
        :return: The records; an empty list when the body holds no usable
            notification.
        :rtype: list of `DeliveryStatus`
        """
        document = _load_notification(body)
        if document is None:
            return []
        kind = document['notificationType']
        if kind == 'Bounce':
            return self._bounce(document.get('bounce'))
        if kind == 'Complaint':
            return self._complaint(document.get('complaint'))
        log.debug('Ignoring SES %s notification', kind)
        return []

    def _bounce(self, bounce):
        if not isinstance(bounce, dict):
            log.debug('Malformed SES bounce: %r', bounce)
            return []
        records = []
        mta_type, lhost = _typed(bounce.get('reportingMTA'))
        reason = SUBTYPES.get(_text(bounce, 'bounceSubType'), '')
        for recipient in _entries(bounce, 'bouncedRecipients'):
            address = _text(recipient, 'emailAddress')
            if not address:
                continue
            spec, diagnosis = _typed(recipient.get('diagnosticCode'))
            records.append(DeliveryStatus(
                recipient=address,
                action=(_text(recipient, 'action') or 'failed').lower(),
                status=_text(recipient, 'status'),
                diagnosis=diagnosis,
                spec=spec,
                lhost=lhost.lower(),
                rhost=_text(bounce, 'remoteMtaIp'),
                date=_text(bounce, 'timestamp'),
                reason=reason,
                ))
        return records

    def _complaint(self, complaint):
        if not isinstance(complaint, dict):
            log.debug('Malformed SES complaint: %r', complaint)
            return []
        records = []
        for recipient in _entries(complaint, 'complainedRecipients'):
            address = _text(recipient, 'emailAddress')
            if not address:
                continue
            records.append(DeliveryStatus(
                recipient=address,
                diagnosis=_text(complaint, 'complaintFeedbackType'),
                date=_text(complaint, 'timestamp'),
                reason='feedback',
                ))
        return records
