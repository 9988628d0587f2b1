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

"""Interfaces describing bounce reasons."""

__all__ = [
    'IReasonEngine',
    'IReasonRule',
    'REASON_TAGS',
    'UNKNOWN',
    ]


from zope.interface import Attribute, Interface


# The reason given when nothing explains the bounce.
UNKNOWN = 'unknown'

# Every reason a record can end up with.
REASON_TAGS = frozenset((
    'blocked',
    'contenterror',
    'exceedlimit',
    'expired',
    'feedback',
    'filtered',
    'hasmoved',
    'hostunknown',
    'mailboxfull',
    'mailererror',
    'mesgtoobig',
    'networkerror',
    'norelaying',
    'notaccept',
    'rejected',
    'securityerror',
    'spamdetected',
    'suspend',
    'syntaxerror',
    'systemerror',
    'systemfull',
    'toomanyconn',
    'userunknown',
    UNKNOWN,
    ))



class IReasonRule(Interface):
    """A text pattern rule for one bounce reason."""

    name = Attribute('The reason tag; must be unique.')

    description = Attribute('A brief description of the reason.')

    def match(text):
        """Does the diagnostic text match the rule's patterns?

        :param text: The diagnostic text.
        :type text: string
        :return: True if any pattern matches.
        :rtype: bool
        """

    def excludes(text):
        """Does the diagnostic text match the rule's exclusion pattern?

        A rule whose exclusion matches can never resolve the record, however
        well its patterns match.
        """

    def applies(record):
        """Do the rule's non-textual preconditions hold for the record?

        :param record: The delivery status record.
        :type record: `IDeliveryStatus`
        :return: True if the rule may be used for the record.
        :rtype: bool
        """


class IReasonEngine(Interface):
    """Resolve the reason of delivery status records."""

    rules = Attribute('The ordered sequence of `IReasonRule` objects.')

    def resolve(record):
        """Return the reason tag for a record.

        The record itself is not modified.

        :param record: The normalized delivery status record.
        :type record: `IDeliveryStatus`
        :return: One of `REASON_TAGS`.
        :rtype: string
        """
