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

"""Interface to bounce detection components."""

__all__ = [
    'IDeliveryStatus',
    'IFormatDetector',
    'IParseResult',
    'NotMatched',
    'ParseState',
    ]


from flufl.enum import Enum
from zope.interface import Attribute, Interface



class _NotMatchedType:
    """The type of the `NotMatched` marker."""

    def __repr__(self):
        return '<NotMatched>'

    def __bool__(self):
        return False


# Returned instead of a result when no detector recognizes a message.  This
# is an ordinary outcome, not an error: plenty of bounces come from MTAs
# nobody has written a grammar for yet.
NotMatched = _NotMatchedType()



class ParseState(Enum):
    """Where in a bounce body the parser currently is."""

    # Before the detector's `begin` marker; everything is ignored.
    preamble = 1
    # Reading per-recipient delivery status fields.
    delivery_status = 2
    # Reading the headers of the embedded original message.
    original_message = 3
    # The rest of the body is ignored.
    done = 4



class IDeliveryStatus(Interface):
    """The outcome of the delivery to one recipient."""

    recipient = Attribute('The address which failed.')

    alias = Attribute('An alternate address for the recipient, if reported.')

    action = Attribute('The lower-cased DSN action, e.g. `failed`.')

    status = Attribute('The enhanced status code (`D.S.S`) or empty.')

    diagnosis = Attribute('The diagnostic text.')

    rhost = Attribute('The remote MTA which rejected the message.')

    lhost = Attribute('The local (reporting) MTA.')

    date = Attribute('The date of the last delivery attempt, as reported.')

    command = Attribute('The SMTP command which failed, e.g. `RCPT`.')

    spec = Attribute('The diagnostic type, e.g. `SMTP`.')

    reason = Attribute('The canonical bounce reason.')

    agent = Attribute('The name of the detector which produced the record.')

    def as_dict():
        """Return the fields as an ordered dictionary."""


class IParseResult(Interface):
    """The classification of one bounce message."""

    records = Attribute('The list of `IDeliveryStatus` records.')

    original = Attribute(
        """The salvaged header block of the original message, as text.""")

    detector = Attribute('The name of the detector which recognized it.')



class IFormatDetector(Interface):
    """A provider-specific recognizer and body grammar."""

    name = Attribute('Detector name; must be unique.')

    description = Attribute('A brief description of the detector.')

    def match(msg):
        """Do the message headers look like this detector's bounces?

        This must be cheap; it is called for every message until some
        detector succeeds.

        :param msg: The bounce message.
        :type msg: `RawMessage`
        :return: True if the body is worth scanning.
        :rtype: bool
        """

    def scan(msg):
        """Parse the body of a bounce message.

        :param msg: The bounce message.
        :type msg: `RawMessage`
        :return: The delivery status records and the retained header lines
            of the original message.  An empty record list means the message
            is not in this detector's format after all.
        :rtype: 2-tuple of (list of `IDeliveryStatus`, list of strings)
        """

    def refine(record, msg):
        """Apply provider-specific fix-ups to a normalized record.

        :param record: The record, after generic normalization.
        :type record: `IDeliveryStatus`
        :param msg: The bounce message the record was parsed from.
        :type msg: `RawMessage`
        """
