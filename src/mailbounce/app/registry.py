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

"""The ordered registry of bounce detectors."""

__all__ = [
    'DetectorRegistry',
    ]


import logging

from zope.interface.verify import verifyObject

from mailbounce.bouncers import builtin_detectors
from mailbounce.core.errors import ConfigurationError
from mailbounce.interfaces.bounce import IFormatDetector, NotMatched


log = logging.getLogger('mailbounce.bounce')
elog = logging.getLogger('mailbounce.config')



class DetectorRegistry:
    """An ordered, read-only sequence of bounce detectors.

    Detectors are tried in order.  A detector is asked to scan a message only
    when its header test passes, and the first one which finds at least one
    recipient wins; there is no ranking of results.
    """

    def __init__(self, detectors):
        """Create the registry.

        :param detectors: The detectors, in order of precedence.
        :type detectors: sequence of `IFormatDetector`
        :raises ConfigurationError: when two detectors have the same name.
        """
        detectors = tuple(detectors)
        by_name = {}
        for detector in detectors:
            verifyObject(IFormatDetector, detector)
            if detector.name in by_name:
                raise ConfigurationError(
                    'Duplicate bounce detector: {0}'.format(detector.name))
            by_name[detector.name] = detector
        self._detectors = detectors
        self._by_name = by_name

    @classmethod
    def from_config(cls, config):
        """Build the registry from the `[bounces]detectors` setting.

        :param config: The configuration object.
        :type config: `Configuration`
        :raises ConfigurationError: when an unknown detector is named.
        """
        available = builtin_detectors()
        detectors = []
        for name in config.detector_names:
            detector_class = available.get(name)
            if detector_class is None:
                elog.error('Unknown bounce detector: %s', name)
                raise ConfigurationError(
                    'Unknown bounce detector: {0}'.format(name))
            detectors.append(detector_class())
        return cls(detectors)

    @property
    def detectors(self):
        """The detectors, in order of precedence."""
        return self._detectors

    @property
    def names(self):
        """The detector names, in order of precedence."""
        return [detector.name for detector in self._detectors]

    def get(self, name, default=None):
        """Return the named detector."""
        return self._by_name.get(name, default)

    def __iter__(self):
        return iter(self._detectors)

    def __len__(self):
        return len(self._detectors)

    def select(self, msg):
        """Find the detector which understands a message.

        :param msg: The bounce message.
        :type msg: `RawMessage`
        :return: The detector, its records and the retained header lines of
            the original message; or `NotMatched`.
        :rtype: 3-tuple or `NotMatched`
        """
        for detector, records, original in self.select_all(msg):
            return detector, records, original
        return NotMatched

    def select_all(self, msg):
        """Iterate over every detector which understands a message.

        This is `select()` without stopping at the first success; it is
        meant for diagnosing overlapping detectors.
        """
        for detector in self._detectors:
            if not detector.match(msg):
                continue
            records, original = detector.scan(msg)
            if len(records) == 0:
                log.debug('%s: headers matched but no recipients found',
                          detector.name)
                continue
            log.debug('%s: matched %d recipient(s)',
                      detector.name, len(records))
            yield detector, records, original
