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

"""Resolving the reason of delivery status records."""

__all__ = [
    'ReasonEngine',
    ]


import logging

from zope.interface import implementer
from zope.interface.verify import verifyObject

from mailbounce.core.errors import ConfigurationError
from mailbounce.interfaces.reason import (
    IReasonEngine, IReasonRule, REASON_TAGS, UNKNOWN)
from mailbounce.reasons.builtin import builtin_rules
from mailbounce.smtp import status


log = logging.getLogger('mailbounce.bounce')



@implementer(IReasonEngine)
class ReasonEngine:
    """An ordered list of reason rules.

    The order of the rules is significant: their patterns overlap, and the
    first rule which matches wins.
    """

    def __init__(self, rules, default=UNKNOWN):
        self.rules = tuple(rules)
        names = set()
        for rule in self.rules:
            verifyObject(IReasonRule, rule)
            if rule.name in names:
                raise ConfigurationError(
                    'Duplicate reason rule: {0}'.format(rule.name))
            names.add(rule.name)
        if default not in REASON_TAGS:
            raise ConfigurationError(
                'Unknown default reason: {0}'.format(default))
        self._by_name = dict((rule.name, rule) for rule in self.rules)
        self.default = default

    @classmethod
    def from_config(cls, config):
        """Build the engine with the built-in rules and configured default."""
        return cls(builtin_rules(), config.mailbounce.default_reason)

    def resolve(self, record):
        """See `IReasonEngine`."""
        if record.reason:
            return record.reason
        diagnosis = record.diagnosis
        reason = status.name(record.status)
        if reason:
            rule = self._by_name.get(reason)
            if rule is None or not rule.excludes(diagnosis):
                return reason
            log.debug('%s: status %s vetoed by the diagnosis',
                      record.recipient, record.status)
        for rule in self.rules:
            if rule.excludes(diagnosis):
                continue
            if rule.match(diagnosis) and rule.applies(record):
                return rule.name
        return self.default
