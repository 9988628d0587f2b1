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

"""Delivery status records and parse results."""

__all__ = [
    'DeliveryStatus',
    'ParseResult',
    ]


from collections import OrderedDict

from zope.interface import implementer

from mailbounce.interfaces.bounce import IDeliveryStatus, IParseResult
from mailbounce.smtp.status import is_status


FIELDS = (
    'recipient',
    'alias',
    'action',
    'status',
    'diagnosis',
    'rhost',
    'lhost',
    'date',
    'command',
    'spec',
    'reason',
    'agent',
    )



@implementer(IDeliveryStatus)
class DeliveryStatus:
    """The outcome of the delivery to one recipient."""

    def __init__(self, **fields):
        for name in FIELDS:
            setattr(self, name, '')
        for name, value in fields.items():
            if name not in FIELDS:
                raise TypeError('Unknown delivery status field: ' + name)
            setattr(self, name, value)

    def __setattr__(self, name, value):
        value = ('' if value is None else value)
        if name == 'status' and value and not is_status(value):
            # Only well-formed enhanced status codes are ever assigned.
            return
        super().__setattr__(name, value)

    def copy(self):
        """Return a new record with the same field values."""
        return DeliveryStatus(**self.as_dict())

    def as_dict(self):
        """See `IDeliveryStatus`."""
        return OrderedDict((name, getattr(self, name)) for name in FIELDS)

    def __eq__(self, other):
        if not isinstance(other, DeliveryStatus):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return '<DeliveryStatus {0} [{1}] {2}>'.format(
            self.recipient or '(no recipient)', self.status or '-',
            self.reason or '-')



@implementer(IParseResult)
class ParseResult:
    """The classification of one bounce message."""

    def __init__(self, records, original='', detector=''):
        self.records = list(records)
        self.original = original
        self.detector = detector

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def as_dict(self):
        return OrderedDict((
            ('detector', self.detector),
            ('records', [record.as_dict() for record in self.records]),
            ('original', self.original),
            ))

    def __eq__(self, other):
        if not isinstance(other, ParseResult):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return '<ParseResult {0}: {1} record(s)>'.format(
            self.detector, len(self.records))
