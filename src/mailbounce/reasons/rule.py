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

"""Text pattern rules for bounce reasons."""

__all__ = [
    'ReasonRule',
    ]


import re

from zope.interface import implementer

from mailbounce.interfaces.reason import IReasonRule
from mailbounce.smtp import status



@implementer(IReasonRule)
class ReasonRule:
    """One bounce reason, described entirely by data.

    A rule is matched against the diagnostic text of a record.  Its patterns
    are case-insensitive regular expressions, any of which may match.  The
    optional exclusion pattern vetoes the rule outright, and two
    preconditions restrict it further:

    * `commands` - the rule only applies when the failed SMTP command is one
      of these (any command when empty);
    * `excluded_statuses` - the rule never applies when the record's status
      is one of these codes, or maps to one of these reason names.
    """

    def __init__(self, name, description, patterns, exclusion=None,
                 commands=(), excluded_statuses=()):
        self.name = name
        self.description = description
        self.patterns = tuple(re.compile(pattern, re.IGNORECASE)
                              for pattern in patterns)
        self.exclusion = (None if exclusion is None
                          else re.compile(exclusion, re.IGNORECASE))
        self.commands = frozenset(command.upper() for command in commands)
        self.excluded_statuses = frozenset(excluded_statuses)

    def match(self, text):
        """See `IReasonRule`."""
        if not text:
            return False
        return any(cre.search(text) is not None for cre in self.patterns)

    def excludes(self, text):
        """See `IReasonRule`."""
        if self.exclusion is None or not text:
            return False
        return self.exclusion.search(text) is not None

    def applies(self, record):
        """See `IReasonRule`."""
        if self.commands and record.command.upper() not in self.commands:
            return False
        if record.status and (
                record.status in self.excluded_statuses or
                status.name(record.status) in self.excluded_statuses):
            return False
        return True

    def __repr__(self):
        return '<ReasonRule {0}>'.format(self.name)
