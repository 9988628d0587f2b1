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

"""mailbounce exceptions.

The bounce engine is a best-effort classifier, so very little of it raises.
Malformed lines inside a bounce are skipped, a bounce nobody recognizes is
reported with the `NotMatched` marker and an unrecognized cause is reported
as the `unknown` reason.  Only structurally unusable input and broken
configurations are errors.
"""

__all__ = [
    'ConfigurationError',
    'InvalidInputError',
    'MailbounceError',
    ]



class MailbounceError(Exception):
    """Base class for all mailbounce errors."""



class InvalidInputError(MailbounceError):
    """The message to classify is missing its headers or its body."""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return self.reason


class ConfigurationError(MailbounceError):
    """The configuration names something that does not exist."""
